"""Controller configuration: clock division, LFSR seed and initial board."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GRID_SIZE = 20
MAX_LENGTH = GRID_SIZE * GRID_SIZE


@dataclass(frozen=True)
class ControllerConfig:
    """Full controller configuration.

    The board is always 20×20; only timing, seed and the reset
    layout are configurable. Supports JSON serialization.
    """

    # Timing
    clock_hz: int = 60
    ticks_per_second: int = 2

    # Pseudo-random source
    lfsr_seed: int = 0xA5

    # Reset layout
    start_x: int = 10
    start_y: int = 10
    start_length: int = 3
    apple_x: int = 15
    apple_y: int = 10

    def __post_init__(self) -> None:
        if self.clock_hz < 1 or self.ticks_per_second < 1:
            raise ValueError("clock_hz and ticks_per_second must be at least 1.")
        if self.clock_hz < self.ticks_per_second:
            raise ValueError("clock_hz must be >= ticks_per_second.")
        if self.clock_hz % self.ticks_per_second:
            raise ValueError("clock_hz must be a whole multiple of ticks_per_second.")
        if not 0 < self.lfsr_seed <= 0xFF:
            raise ValueError("lfsr_seed must be a non-zero 8-bit value.")
        for name in ("start_x", "start_y", "apple_x", "apple_y"):
            if not 0 <= getattr(self, name) < GRID_SIZE:
                raise ValueError(f"{name} must lie within the {GRID_SIZE}×{GRID_SIZE} grid.")
        if not 1 <= self.start_length <= self.start_x + 1:
            raise ValueError("start_length must be at least 1 and fit left of the head.")

    @property
    def tick_divisor(self) -> int:
        """Number of clock cycles between two game ticks."""
        return self.clock_hz // self.ticks_per_second

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> ControllerConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
