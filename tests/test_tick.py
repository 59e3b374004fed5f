"""Tests for the TickGenerator module."""

import pytest

from snake_controller.tick import TickGenerator


class TestTickGenerator:
    def test_invalid_divisor(self):
        with pytest.raises(ValueError, match="at least 1"):
            TickGenerator(0)

    def test_pulses_every_divisor_cycles(self):
        gen = TickGenerator(4)
        pulses = [gen.advance() for _ in range(12)]
        assert pulses == [False, False, False, True] * 3

    def test_divisor_one_pulses_every_cycle(self):
        gen = TickGenerator(1)
        assert all(gen.advance() for _ in range(5))

    def test_pulse_lasts_one_cycle(self):
        gen = TickGenerator(3)
        gen.advance()
        gen.advance()
        assert gen.advance()
        assert gen.pulse
        assert not gen.advance()
        assert not gen.pulse

    def test_reset_clears_counter_and_pulse(self):
        gen = TickGenerator(3)
        gen.advance()
        gen.advance()
        gen.advance()
        gen.reset()
        assert gen.counter == 0
        assert not gen.pulse
        assert [gen.advance() for _ in range(3)] == [False, False, True]
