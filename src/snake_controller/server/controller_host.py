"""Hosts one controller: held inputs, async clock loop and frame broadcast."""

from __future__ import annotations

import asyncio
import json
import logging

from starlette.websockets import WebSocket, WebSocketState

from snake_controller.config import ControllerConfig
from snake_controller.engine import GameController
from snake_controller.inputs import DirectionInputs
from snake_controller.server.models import ControllerSummary

logger = logging.getLogger(__name__)

_INPUT_NAMES = ("up", "down", "left", "right")


class ControllerHost:
    """Owns a controller and drives it from REST calls or a clock task.

    Input lines are level signals: a press stays held until released.
    """

    def __init__(self, config: ControllerConfig | None = None) -> None:
        self.controller = GameController(config)
        self.held = DirectionInputs()
        self.sockets: list[WebSocket] = []
        self.lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def clock_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def summary(self) -> ControllerSummary:
        c = self.controller
        return ControllerSummary(
            state=c.state.value,
            game_over=c.game_over,
            length=c.length,
            score=c.score,
            head=list(c.head),
            apple=c.apple.to_list(),
            direction=c.direction.name,
            cycle=c.cycles,
            tick=c.ticks,
            clock_running=self.clock_running,
        )

    # --- inputs ---------------------------------------------------------

    def set_inputs(self, **levels: bool) -> DirectionInputs:
        """Replace the held levels of the given lines."""
        current = {name: getattr(self.held, name) for name in _INPUT_NAMES}
        for name, level in levels.items():
            if name not in current:
                raise ValueError(f"Unknown direction input: {name!r}.")
            current[name] = bool(level)
        self.held = DirectionInputs(**current)
        return self.held

    def press(self, name: str) -> DirectionInputs:
        return self.set_inputs(**{name.lower(): True})

    def release(self, name: str) -> DirectionInputs:
        return self.set_inputs(**{name.lower(): False})

    # --- stepping -------------------------------------------------------

    def run_cycles(self, count: int) -> dict:
        """Run *count* cycles with the held inputs. Not allowed while clocked."""
        if self.clock_running:
            raise RuntimeError("Clock is running; stop it before stepping manually.")
        for _ in range(count):
            self.controller.cycle(self.held)
        return self.controller.get_state()

    def reset(self) -> dict:
        """Assert the reset line for one cycle."""
        self.controller.cycle(reset=True)
        return self.controller.get_state()

    # --- clock ----------------------------------------------------------

    def start_clock(self) -> None:
        """Start the background clock. A running clock is left alone."""
        if self.clock_running:
            return
        self._task = asyncio.create_task(self._clock_loop())
        logger.info(
            "Clock started at %d Hz.", self.controller.config.clock_hz,
        )

    async def stop_clock(self) -> None:
        """Cancel the clock task and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Clock stopped.")

    async def _clock_loop(self) -> None:
        """Cycle the controller at ``clock_hz``, broadcasting on change."""
        interval = 1.0 / self.controller.config.clock_hz
        try:
            while True:
                await asyncio.sleep(interval)
                async with self.lock:
                    before = (self.controller.ticks, self.controller.state)
                    self.controller.cycle(self.held)
                    changed = before != (
                        self.controller.ticks, self.controller.state,
                    )
                    state = self.controller.get_state()
                if changed:
                    await self.broadcast(state)
        except asyncio.CancelledError:
            logger.info("Clock loop cancelled.")
        except Exception:
            logger.exception("Clock loop error.")

    # --- display --------------------------------------------------------

    async def broadcast(self, state: dict) -> None:
        """Send controller state to every connected display socket."""
        payload = json.dumps(state, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(self.sockets):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in self.sockets:
                self.sockets.remove(ws)

    async def cleanup(self) -> None:
        """Stop the clock and forget connected sockets."""
        await self.stop_clock()
        self.sockets.clear()
        logger.info("ControllerHost cleanup complete.")
