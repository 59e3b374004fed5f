"""Performance benchmarking for controller cycle throughput."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_controller.config import ControllerConfig
from snake_controller.engine import GameController
from snake_controller.inputs import DirectionInputs

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_cycles: int
    total_ticks: int
    games: int
    wall_time_seconds: float
    cycles_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_cycles} cycles, "
            f"{self.total_ticks} ticks, {self.games} games in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.cycles_per_second:.1f} cycles/s, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_throughput(
    *,
    cycles: int = 10_000,
    seed: int = 42,
    config: ControllerConfig | None = None,
) -> BenchmarkResult:
    """Measure raw cycle throughput under random level inputs.

    A finished game is reset on the following cycle so the controller
    keeps simulating for the whole run.
    """
    if cycles < 1:
        raise ValueError("cycles must be at least 1.")
    controller = GameController(config)
    rng = np.random.default_rng(seed)
    levels = rng.random((cycles, 4)) < 0.05

    total_ticks = 0
    games = 1
    start = time.perf_counter()

    for up, down, left, right in levels.tolist():
        if controller.game_over:
            total_ticks += controller.ticks
            games += 1
            controller.cycle(reset=True)
            continue
        controller.cycle(DirectionInputs(up, down, left, right))

    total_ticks += controller.ticks
    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_cycles=cycles,
        total_ticks=total_ticks,
        games=games,
        wall_time_seconds=elapsed,
        cycles_per_second=cycles / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
