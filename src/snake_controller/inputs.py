"""Directional input levels and the pending-direction resolver."""

from __future__ import annotations

from dataclasses import dataclass

from snake_controller.snake import Direction

# Tie-break order when several lines are held at once.
PRIORITY: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True)
class DirectionInputs:
    """Level state of the four direction lines for one cycle."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @property
    def any(self) -> bool:
        return self.up or self.down or self.left or self.right

    def is_held(self, direction: Direction) -> bool:
        return getattr(self, direction.name.lower())

    @classmethod
    def from_names(cls, *names: str) -> DirectionInputs:
        """Build a snapshot from line names such as ``"up"``."""
        held: dict[str, bool] = {}
        for name in names:
            key = name.lower()
            if key not in ("up", "down", "left", "right"):
                raise ValueError(f"Unknown direction input: {name!r}.")
            held[key] = True
        return cls(**held)


NO_INPUT = DirectionInputs()


class DirectionResolver:
    """Latches the pending direction from the held input lines.

    The first held line in priority order that is not the reverse of the
    applied direction wins. When no line qualifies the pending direction
    is left as it was.
    """

    def __init__(self, initial: Direction = Direction.RIGHT) -> None:
        self.initial = initial
        self.pending = initial

    def reset(self) -> None:
        self.pending = self.initial

    def update(self, inputs: DirectionInputs, applied: Direction) -> Direction:
        """Sample *inputs* against the *applied* direction."""
        for candidate in PRIORITY:
            if inputs.is_held(candidate) and candidate is not applied.opposite:
                self.pending = candidate
                break
        return self.pending
