"""
Difficulty catalog - the fixed list of presets a session can be played with
"""

from dataclasses import dataclass
from typing import Tuple

from .exceptions import InvalidConfiguration


@dataclass(frozen=True)
class DifficultyPreset:
    """One difficulty level. Presentation fields are passed through untouched."""
    name: str
    count: int          # numbers flashed per round
    interval_ms: int    # display time per number
    max_value: int      # inclusive upper bound, lower bound is 1
    color: str = ""
    icon: str = ""
    message: str = ""

    def validate(self) -> None:
        if self.count < 1:
            raise InvalidConfiguration(f"Preset '{self.name}': count must be >= 1, got {self.count}")
        if self.max_value < 1:
            raise InvalidConfiguration(f"Preset '{self.name}': max_value must be >= 1, got {self.max_value}")
        if self.interval_ms <= 0:
            raise InvalidConfiguration(f"Preset '{self.name}': interval_ms must be positive, got {self.interval_ms}")


DIFFICULTY_LEVELS: Tuple[DifficultyPreset, ...] = (
    DifficultyPreset('たまご級', count=2, interval_ms=1200, max_value=5,
                     color='bg-yellow-400', icon='🥚', message='まずは 2つから！'),
    DifficultyPreset('ひよこ級', count=3, interval_ms=1000, max_value=9,
                     color='bg-green-400', icon='🐤', message='3つに ちょうせん！'),
    DifficultyPreset('うさぎ級', count=5, interval_ms=800, max_value=9,
                     color='bg-pink-400', icon='🐰', message='どんどん いくよ！'),
    DifficultyPreset('くま級', count=7, interval_ms=600, max_value=9,
                     color='bg-orange-400', icon='🐻', message='キミなら できる！'),
    DifficultyPreset('らいおん級', count=10, interval_ms=400, max_value=15,
                     color='bg-red-500', icon='🦁', message='あんざんマスター！'),
)

PRAISE_MESSAGES: Tuple[str, ...] = (
    "すごすぎる！",
    "てんさい！",
    "かんぺき！",
    "そのちょうし！",
    "きらきら！",
    "かっこいい！",
)

MISS_MESSAGE = "おしかったね！"
