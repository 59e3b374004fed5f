"""Tests for the throughput benchmark."""

import pytest

from snake_controller.benchmark import BenchmarkResult, benchmark_throughput
from snake_controller.config import ControllerConfig


class TestBenchmark:
    def test_result_fields(self):
        result = benchmark_throughput(
            cycles=2_000, config=ControllerConfig(clock_hz=2, ticks_per_second=2),
        )
        assert isinstance(result, BenchmarkResult)
        assert result.total_cycles == 2_000
        assert result.total_ticks > 0
        assert result.games >= 1
        assert result.cycles_per_second > 0

    def test_summary(self):
        result = benchmark_throughput(cycles=100)
        text = result.summary()
        assert "Benchmark:" in text
        assert "ticks/s" in text

    def test_invalid_cycles(self):
        with pytest.raises(ValueError, match="at least 1"):
            benchmark_throughput(cycles=0)
