"""Tests for the controller configuration dataclass."""

import json

import pytest

from snake_controller.config import ControllerConfig
from snake_controller.tick import TickGenerator


class TestControllerConfig:
    def test_defaults(self):
        cfg = ControllerConfig()
        assert cfg.clock_hz == 60
        assert cfg.ticks_per_second == 2
        assert cfg.lfsr_seed == 0xA5
        assert (cfg.start_x, cfg.start_y, cfg.start_length) == (10, 10, 3)
        assert (cfg.apple_x, cfg.apple_y) == (15, 10)

    def test_tick_divisor(self):
        assert ControllerConfig().tick_divisor == 30
        assert ControllerConfig(clock_hz=8, ticks_per_second=2).tick_divisor == 4

    def test_clock_slower_than_tick_rejected(self):
        with pytest.raises(ValueError, match="clock_hz must be >="):
            ControllerConfig(clock_hz=1, ticks_per_second=2)

    def test_uneven_divisor_rejected(self):
        with pytest.raises(ValueError, match="whole multiple"):
            ControllerConfig(clock_hz=5, ticks_per_second=2)

    def test_divisor_gives_exact_tick_rate(self):
        cfg = ControllerConfig(clock_hz=6, ticks_per_second=2)
        gen = TickGenerator(cfg.tick_divisor)
        ticks = sum(gen.advance() for _ in range(cfg.clock_hz * 10))
        assert ticks == cfg.ticks_per_second * 10

    def test_non_positive_rate_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            ControllerConfig(ticks_per_second=0)

    def test_zero_seed_rejected(self):
        with pytest.raises(ValueError, match="non-zero"):
            ControllerConfig(lfsr_seed=0)

    def test_apple_off_grid_rejected(self):
        with pytest.raises(ValueError, match="apple_x"):
            ControllerConfig(apple_x=20)

    def test_start_body_must_fit(self):
        with pytest.raises(ValueError, match="start_length"):
            ControllerConfig(start_x=1, start_length=3)

    def test_to_dict_serializable(self):
        serialized = json.dumps(ControllerConfig().to_dict())
        assert isinstance(serialized, str)

    def test_save_and_load(self, tmp_path):
        cfg = ControllerConfig(clock_hz=10, lfsr_seed=0x3C)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()

        loaded = ControllerConfig.load(path)
        assert loaded == cfg
