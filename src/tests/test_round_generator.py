import random

import pytest

from game_system import DIFFICULTY_LEVELS, DifficultyPreset, InvalidConfiguration, Round, generate_round
from tests.conftest import ScriptedRandom


@pytest.mark.parametrize("preset", DIFFICULTY_LEVELS, ids=lambda p: p.name)
def test_values_in_range_for_every_level(preset):
    rng = random.Random(1234)
    for _ in range(200):
        round_ = generate_round(preset, rng)
        assert len(round_.values) == preset.count
        assert all(1 <= value <= preset.max_value for value in round_.values)
        assert round_.sum == sum(round_.values)


def test_scripted_values_give_exact_sum():
    preset = DifficultyPreset("egg", count=2, interval_ms=1200, max_value=5)
    round_ = generate_round(preset, ScriptedRandom([3, 4]))
    assert round_.values == (3, 4)
    assert round_.sum == 7


def test_same_seed_reproduces_round():
    preset = DIFFICULTY_LEVELS[-1]
    assert generate_round(preset, random.Random(7)) == generate_round(preset, random.Random(7))


def test_duplicates_are_allowed():
    preset = DifficultyPreset("ones", count=4, interval_ms=100, max_value=1)
    assert generate_round(preset, random.Random(0)).values == (1, 1, 1, 1)


@pytest.mark.parametrize("count,max_value", [(0, 5), (-1, 5), (3, 0), (3, -2)])
def test_invalid_preset_rejected(count, max_value):
    preset = DifficultyPreset("bad", count=count, interval_ms=500, max_value=max_value)
    with pytest.raises(InvalidConfiguration):
        generate_round(preset, random.Random(0))


def test_invalid_configuration_is_a_value_error():
    preset = DifficultyPreset("bad", count=0, interval_ms=500, max_value=5)
    with pytest.raises(ValueError):
        generate_round(preset, random.Random(0))


def test_round_rejects_inconsistent_sum():
    with pytest.raises(ValueError):
        Round(values=(1, 2), sum=4)


def test_round_is_immutable():
    round_ = Round.from_values([2, 2])
    with pytest.raises(AttributeError):
        round_.sum = 5
