"""Clock divider producing the fixed-rate game tick."""

from __future__ import annotations


class TickGenerator:
    """Free-running counter that pulses once every *divisor* cycles.

    The pulse is high for exactly the cycle on which the counter reaches
    ``divisor - 1``; the counter then restarts from zero.
    """

    def __init__(self, divisor: int) -> None:
        if divisor < 1:
            raise ValueError("Tick divisor must be at least 1.")
        self.divisor = divisor
        self.counter = 0
        self.pulse = False

    def reset(self) -> None:
        """Clear the counter and the pulse."""
        self.counter = 0
        self.pulse = False

    def advance(self) -> bool:
        """Advance one cycle and return whether this cycle carries the tick."""
        if self.counter >= self.divisor - 1:
            self.counter = 0
            self.pulse = True
        else:
            self.counter += 1
            self.pulse = False
        return self.pulse
