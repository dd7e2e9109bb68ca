import logging
import random

import pytest

from audio_system import MockSoundController
from game_system import DifficultyPreset, GameSession
from utils import FakeClock, HybridLogger


class ScriptedRandom(random.Random):
    """random.Random whose randint() replays fixed values"""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._values = list(values)

    def randint(self, a, b):
        if self._values:
            value = self._values.pop(0)
            assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
            return value
        return super().randint(a, b)


@pytest.fixture
def main_logger():
    hybrid = HybridLogger("FlashAnzanTest", log_dir=None)
    yield hybrid
    hybrid.cleanup()


@pytest.fixture
def logger(main_logger):
    return main_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sound(logger):
    return MockSoundController(logger=logger)


@pytest.fixture
def small_preset():
    return DifficultyPreset("test", count=2, interval_ms=1000, max_value=5)


@pytest.fixture
def make_session(logger, sound, clock):
    """Factory for sessions over a custom catalog and scripted randomness"""

    def _make(catalog=None, values=(), seed=0, preset_index=0):
        kwargs = {}
        if catalog is not None:
            kwargs["catalog"] = catalog
        return GameSession(
            logger=logger,
            sound_controller=sound,
            clock=clock,
            rng=ScriptedRandom(values, seed=seed),
            preset_index=preset_index,
            **kwargs
        )

    return _make
