"""Snake Controller — cycle-driven snake game core."""

from snake_controller.config import ControllerConfig
from snake_controller.engine import GameController, GameState
from snake_controller.inputs import NO_INPUT, DirectionInputs
from snake_controller.snake import Direction, Snake

__all__ = [
    "NO_INPUT",
    "ControllerConfig",
    "Direction",
    "DirectionInputs",
    "GameController",
    "GameState",
    "Snake",
]
