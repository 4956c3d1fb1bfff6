import pytest

from simple_timer.clock import ManualClock, monotonic


class TestManualClock:
    def test_starts_at_given_time(self):
        assert ManualClock()() == 0.0
        assert ManualClock(3.5)() == 3.5
        assert ManualClock(3.5).now == 3.5

    def test_advance(self):
        clock = ManualClock()
        assert clock.advance(0.5) == 0.5
        assert clock.advance(0.25) == 0.75
        assert clock() == 0.75

    def test_advance_ms(self):
        clock = ManualClock()
        clock.advance_ms(250)
        assert clock() == 0.25

    def test_advance_zero(self):
        clock = ManualClock(1.0)
        clock.advance(0)
        assert clock() == 1.0

    def test_rejects_backwards(self):
        clock = ManualClock(1.0)

        with pytest.raises(ValueError):
            clock.advance(-0.1)

        assert clock() == 1.0

    def test_repr(self):
        assert repr(ManualClock(1.5)) == "ManualClock(1.500)"


class TestMonotonic:
    def test_non_decreasing(self):
        readings = [monotonic() for _ in range(100)]
        assert readings == sorted(readings)
