"""Apple placement logic."""

from __future__ import annotations

import logging

from snake_controller.config import GRID_SIZE

logger = logging.getLogger(__name__)


def coordinate_from_entropy(value: int) -> tuple[int, int]:
    """Derive an on-grid (x, y) from an 8-bit LFSR value.

    x comes from bits 4..0 and y from bits 7..3, each reduced modulo the
    grid size.
    """
    x = (value & 0x1F) % GRID_SIZE
    y = ((value >> 3) & 0x1F) % GRID_SIZE
    return x, y


class Apple:
    """The single apple on the board.

    Replacement positions are taken straight from the pseudo-random
    source; they are not checked against the snake, so an apple may
    appear on top of the body.
    """

    def __init__(self, x: int, y: int) -> None:
        self.initial = (x, y)
        self.position = (x, y)

    def reset(self) -> None:
        self.position = self.initial

    def respawn(self, entropy: int) -> tuple[int, int]:
        """Move the apple to the cell derived from *entropy*."""
        self.position = coordinate_from_entropy(entropy)
        logger.debug("Apple respawned at %s (lfsr=0x%02X).", self.position, entropy)
        return self.position

    def to_list(self) -> list[int]:
        return list(self.position)
