"""
Round generation - the numbers to flash and their sum
"""

from dataclasses import dataclass
from typing import Tuple

from .difficulty import DifficultyPreset
from .exceptions import InvalidConfiguration


@dataclass(frozen=True)
class Round:
    """Immutable round: flashed values and their precomputed sum"""
    values: Tuple[int, ...]
    sum: int

    def __post_init__(self):
        if self.sum != sum(self.values):
            raise ValueError(f"Round sum {self.sum} does not match values {self.values}")

    @classmethod
    def from_values(cls, values) -> 'Round':
        values = tuple(values)
        return cls(values=values, sum=sum(values))

    @property
    def count(self) -> int:
        return len(self.values)


def generate_round(preset: DifficultyPreset, rng) -> Round:
    """
    Draw preset.count values uniformly from [1, preset.max_value], with replacement.

    Args:
        preset: Difficulty preset to generate for
        rng: Random source providing randint(a, b), e.g. random.Random

    Raises:
        InvalidConfiguration: If count < 1 or max_value < 1
    """
    if preset.count < 1:
        raise InvalidConfiguration(f"Preset '{preset.name}': count must be >= 1, got {preset.count}")
    if preset.max_value < 1:
        raise InvalidConfiguration(f"Preset '{preset.name}': max_value must be >= 1, got {preset.max_value}")

    return Round.from_values(rng.randint(1, preset.max_value) for _ in range(preset.count))
