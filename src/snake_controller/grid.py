"""Occupancy grid rendering for the display driver."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from snake_controller.config import GRID_SIZE

if TYPE_CHECKING:
    from snake_controller.apple import Apple
    from snake_controller.snake import Snake


def render(snake: Snake, apple: Apple) -> np.ndarray:
    """Project the board into a read-only 20×20 boolean image.

    Cells are indexed ``grid[y, x]`` (row-major). Live snake segments are
    drawn first and the apple last; anything off-grid is skipped.
    """
    cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)

    segments = snake.segments
    visible = np.all(segments < GRID_SIZE, axis=1)
    cells[segments[visible, 1], segments[visible, 0]] = True

    ax, ay = apple.position
    if 0 <= ax < GRID_SIZE and 0 <= ay < GRID_SIZE:
        cells[ay, ax] = True

    cells.flags.writeable = False
    return cells


def to_text(cells: np.ndarray, occupied: str = "#", empty: str = ".") -> str:
    """Render a grid as one text line per row."""
    return "\n".join(
        "".join(occupied if cell else empty for cell in row) for row in cells
    )


def to_dict(cells: np.ndarray) -> dict:
    """Serialize a grid to a dictionary."""
    return {
        "width": GRID_SIZE,
        "height": GRID_SIZE,
        "cells": cells.tolist(),
    }
