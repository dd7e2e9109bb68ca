"""
Game system configuration
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .difficulty import DIFFICULTY_LEVELS, DifficultyPreset
from .exceptions import InvalidConfiguration


@dataclass
class GameConfig:
    """Main game system configuration"""

    # Timing configuration
    frame_duration_ms: float = 20.0  # 50 FPS

    # Gameplay
    default_preset_index: int = 0
    seed: Optional[int] = None

    # Audio configuration
    use_mock_audio: bool = False
    sample_rate_hz: int = 44100
    master_volume: float = 1.0

    # Logging
    log_dir: Optional[str] = "logs"
    log_level: int = logging.INFO

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self, catalog: Sequence[DifficultyPreset] = DIFFICULTY_LEVELS) -> None:
        """Basic validation of configuration and of every preset in the catalog"""
        if self.frame_duration_ms <= 0:
            raise InvalidConfiguration("Frame duration must be positive")

        if not catalog:
            raise InvalidConfiguration("At least one difficulty preset must be configured")

        if not (0 <= self.default_preset_index < len(catalog)):
            raise InvalidConfiguration(
                f"Default preset index {self.default_preset_index} out of range (0-{len(catalog) - 1})"
            )

        if self.sample_rate_hz <= 0:
            raise InvalidConfiguration(f"Sample rate must be positive, got {self.sample_rate_hz}")

        if not (0.0 <= self.master_volume <= 1.0):
            raise InvalidConfiguration(f"Master volume must be 0.0-1.0, got {self.master_volume}")

        for preset in catalog:
            preset.validate()
