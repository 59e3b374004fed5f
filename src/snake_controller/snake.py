"""Snake representation and movement logic."""

from __future__ import annotations

import enum

import numpy as np

from snake_controller.config import GRID_SIZE, MAX_LENGTH

# Coordinates are 5-bit unsigned registers; 20..31 are off-grid.
COORD_MASK = 0x1F


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def opposite(self) -> Direction:
        return OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def step(x: int, y: int, direction: Direction) -> tuple[int, int]:
    """Move one cell in *direction* using 5-bit wrapping arithmetic.

    Stepping left or up from 0 yields 31, which the wall check treats as
    off-grid exactly like 20.
    """
    dx, dy = direction.value
    return (x + dx) & COORD_MASK, (y + dy) & COORD_MASK


def in_bounds(x: int, y: int) -> bool:
    """Check whether a coordinate lies within the grid."""
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


class Snake:
    """A snake stored as a fixed-capacity array of (x, y) segments.

    The head is ``body[0]`` and the tail is ``body[length - 1]``. Slots
    past ``length`` hold stale coordinates and are never considered part
    of the snake. Every move shifts the whole array by one slot, so the
    cost of a move does not depend on the current length.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        length: int = 3,
        capacity: int = MAX_LENGTH,
    ) -> None:
        if not 1 <= length <= capacity:
            raise ValueError("Snake length must be at least 1 and within capacity.")
        if start_x - (length - 1) < 0 or not in_bounds(start_x, start_y):
            raise ValueError("Initial snake must lie on the grid.")
        self.capacity = capacity
        self.body = np.zeros((capacity, 2), dtype=np.uint8)
        for i in range(length):
            self.body[i] = (start_x - i, start_y)
        self.length = length

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        x, y = self.body[0]
        return int(x), int(y)

    @property
    def segments(self) -> np.ndarray:
        """Live segments, head first."""
        return self.body[: self.length]

    def occupies(self, x: int, y: int) -> bool:
        """Check whether any live segment sits on the given cell."""
        return bool(np.any(np.all(self.segments == (x, y), axis=1)))

    def grow(self) -> None:
        """Extend the live length by one slot, saturating at capacity."""
        self.length = min(self.length + 1, self.capacity)

    def advance(self, x: int, y: int) -> None:
        """Shift every slot one place toward the tail and write a new head."""
        self.body[1:] = self.body[:-1].copy()
        self.body[0] = (x, y)

    def to_list(self) -> list[list[int]]:
        """Serialize the live segments."""
        return self.segments.tolist()
