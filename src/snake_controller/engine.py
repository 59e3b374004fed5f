"""Cycle-driven game controller composing tick, LFSR, input and board logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_controller import grid
from snake_controller.apple import Apple
from snake_controller.config import ControllerConfig
from snake_controller.inputs import NO_INPUT, DirectionInputs, DirectionResolver
from snake_controller.lfsr import Lfsr
from snake_controller.snake import Direction, Snake, in_bounds, step
from snake_controller.tick import TickGenerator

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Top-level controller states."""

    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameController:
    """Single-snake controller advanced one clock cycle at a time.

    The controller owns every register of the game. Each call to
    :meth:`cycle` samples the input lines, advances the tick divider and
    the LFSR, runs the state machine when the tick fires, and re-renders
    the occupancy grid from the resulting state.
    """

    def __init__(self, config: ControllerConfig | None = None) -> None:
        self.config = config if config is not None else ControllerConfig()
        self.tick_generator = TickGenerator(self.config.tick_divisor)
        self.lfsr = Lfsr(self.config.lfsr_seed)
        self.resolver = DirectionResolver(Direction.RIGHT)
        self.reset()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def pending_direction(self) -> Direction:
        return self.resolver.pending

    @property
    def head(self) -> tuple[int, int]:
        return self.snake.head

    @property
    def length(self) -> int:
        return self.snake.length

    @property
    def score(self) -> int:
        return self.snake.length - self.config.start_length

    def reset(self) -> None:
        """Return every register to its power-on value."""
        cfg = self.config
        self.tick_generator.reset()
        self.lfsr.reset()
        self.resolver.reset()
        self.snake = Snake(cfg.start_x, cfg.start_y, length=cfg.start_length)
        self.apple = Apple(cfg.apple_x, cfg.apple_y)
        self.direction = Direction.RIGHT
        self.state = GameState.IDLE
        self.cycles = 0
        self.ticks = 0
        self.frame = grid.render(self.snake, self.apple)
        logger.debug("Controller reset.")

    def cycle(
        self,
        inputs: DirectionInputs = NO_INPUT,
        reset: bool = False,
    ) -> np.ndarray:
        """Advance the controller by one clock cycle.

        Returns the occupancy grid for the post-update state.
        """
        if reset:
            self.reset()
            return self.frame

        tick = self.tick_generator.advance()
        entropy = self.lfsr.value
        self.lfsr.advance()

        if self.state == GameState.IDLE:
            if inputs.any:
                self.state = GameState.PLAYING
                logger.info("Game started.")
        elif self.state == GameState.PLAYING and tick:
            self._tick(entropy)

        # Sampled after the tick so a same-cycle press never reaches the
        # move it could reverse.
        self.resolver.update(inputs, self.direction)

        self.cycles += 1
        self.frame = grid.render(self.snake, self.apple)
        return self.frame

    def get_state(self) -> dict:
        """Return the full, serializable controller state."""
        return {
            "cycle": self.cycles,
            "tick": self.ticks,
            "state": self.state.value,
            "game_over": self.game_over,
            "direction": self.direction.name,
            "pending_direction": self.pending_direction.name,
            "length": self.length,
            "score": self.score,
            "head": list(self.head),
            "snake": self.snake.to_list(),
            "apple": self.apple.to_list(),
            "lfsr": self.lfsr.value,
            "grid": grid.to_dict(self.frame),
        }

    # ------------------------------------------------------------------
    # Board update
    # ------------------------------------------------------------------

    def _tick(self, entropy: int) -> None:
        self.direction = self.resolver.pending
        self.ticks += 1

        hx, hy = self.snake.head
        nx, ny = step(hx, hy, self.direction)

        # Both checks see the body before it moves, tail included.
        hit_wall = not in_bounds(nx, ny)
        hit_self = not hit_wall and self.snake.occupies(nx, ny)

        if (nx, ny) == self.apple.position:
            self.snake.grow()
            self.apple.respawn(entropy)
            logger.debug("Apple eaten at (%d, %d); length %d.", nx, ny, self.length)

        if hit_wall or hit_self:
            self.state = GameState.GAME_OVER
            logger.info(
                "Game over (%s) at tick %d with length %d.",
                "wall" if hit_wall else "self",
                self.ticks,
                self.length,
            )
            return

        self.snake.advance(nx, ny)
