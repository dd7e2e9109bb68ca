import pytest

from game_system import FlashTimer
from utils import FakeClock


class Recorder:
    def __init__(self, repeats):
        self.remaining = repeats
        self.events = []

    def on_repeat(self):
        self.events.append("repeat")
        self.remaining -= 1
        return self.remaining > 0

    def on_final(self):
        self.events.append("final")


def make_timer(clock, recorder, interval_ms=100):
    return FlashTimer(interval_ms, recorder.on_repeat, recorder.on_final, clock)


def test_repeat_then_final_one_interval_later():
    clock = FakeClock()
    rec = Recorder(repeats=2)
    timer = make_timer(clock, rec)
    timer.start()

    clock.advance(99)
    assert timer.update() == 0

    clock.advance(1)     # t=100
    timer.update()
    assert rec.events == ["repeat"]

    clock.advance(100)   # t=200, repeat stops here
    timer.update()
    assert rec.events == ["repeat", "repeat"]
    assert timer.active

    clock.advance(99)
    timer.update()
    assert rec.events == ["repeat", "repeat"]

    clock.advance(1)     # t=300
    timer.update()
    assert rec.events == ["repeat", "repeat", "final"]
    assert timer.finished
    assert not timer.active


def test_late_update_fires_overdue_events_in_order():
    clock = FakeClock()
    rec = Recorder(repeats=3)
    timer = make_timer(clock, rec)
    timer.start()

    clock.advance(1000)
    assert timer.update() == 4
    assert rec.events == ["repeat", "repeat", "repeat", "final"]


def test_cancel_stops_all_callbacks():
    clock = FakeClock()
    rec = Recorder(repeats=5)
    timer = make_timer(clock, rec)
    timer.start()

    clock.advance(100)
    timer.update()
    timer.cancel()
    clock.advance(1000)
    assert timer.update() == 0
    assert rec.events == ["repeat"]
    assert timer.cancelled and not timer.finished


def test_callback_can_cancel_its_own_timer():
    clock = FakeClock()
    events = []
    timer = None

    def on_repeat():
        events.append("repeat")
        timer.cancel()
        return True

    timer = FlashTimer(100, on_repeat, lambda: events.append("final"), clock)
    timer.start()
    clock.advance(500)
    timer.update()
    assert events == ["repeat"]


def test_invalid_interval_and_double_start():
    clock = FakeClock()
    with pytest.raises(ValueError):
        FlashTimer(0, lambda: False, lambda: None, clock)

    timer = FlashTimer(10, lambda: False, lambda: None, clock)
    timer.start()
    with pytest.raises(RuntimeError):
        timer.start()
