"""Tests for the LFSR module."""

import pytest

from snake_controller.lfsr import Lfsr, next_value


class TestLfsrInit:
    def test_default_seed(self):
        lfsr = Lfsr()
        assert lfsr.value == 0xA5

    def test_zero_seed_rejected(self):
        with pytest.raises(ValueError, match="non-zero"):
            Lfsr(0)

    def test_wide_seed_rejected(self):
        with pytest.raises(ValueError, match="8-bit"):
            Lfsr(0x100)


class TestLfsrSequence:
    def test_first_steps_from_seed(self):
        lfsr = Lfsr(0xA5)
        assert [lfsr.advance() for _ in range(5)] == [0x4A, 0x95, 0x2A, 0x54, 0xA9]

    def test_feedback_enters_bit_zero(self):
        # Only bit 3 set: feedback is 1, shifted value is 0x10.
        assert next_value(0x08) == 0x11

    def test_full_period_never_zero(self):
        lfsr = Lfsr(0xA5)
        seen = set()
        for _ in range(255):
            seen.add(lfsr.advance())
        assert 0 not in seen
        assert len(seen) == 255
        assert lfsr.value == 0xA5

    def test_reset_restores_seed(self):
        lfsr = Lfsr(0x33)
        for _ in range(10):
            lfsr.advance()
        lfsr.reset()
        assert lfsr.value == 0x33

    def test_deterministic_across_instances(self):
        a, b = Lfsr(), Lfsr()
        assert [a.advance() for _ in range(50)] == [b.advance() for _ in range(50)]
