"""WebSocket handlers for live input and display streaming."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from snake_controller.server.controller_host import ControllerHost

logger = logging.getLogger(__name__)

ws_router = APIRouter()

_INPUT_NAMES = frozenset({"up", "down", "left", "right"})


def _get_host(ws: WebSocket) -> ControllerHost:
    return ws.app.state.host


async def _attach(websocket: WebSocket, host: ControllerHost) -> None:
    await websocket.accept()
    host.sockets.append(websocket)
    # Send an initial snapshot so the display has something to draw.
    state = host.controller.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))


def _detach(websocket: WebSocket, host: ControllerHost) -> None:
    if websocket in host.sockets:
        host.sockets.remove(websocket)


@ws_router.websocket("/controller/play")
async def play(websocket: WebSocket) -> None:
    """Input WebSocket: press/release lines or reset, receive state."""
    host = _get_host(websocket)
    await _attach(websocket, host)
    logger.info("Player connected.")

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("reset") is True:
                async with host.lock:
                    state = host.reset()
                await host.broadcast(state)
                continue

            for action in ("press", "release"):
                name = msg.get(action)
                if not isinstance(name, str) or name.lower() not in _INPUT_NAMES:
                    continue
                async with host.lock:
                    getattr(host, action)(name)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        _detach(websocket, host)


@ws_router.websocket("/controller/display")
async def display(websocket: WebSocket) -> None:
    """Display WebSocket: receive-only state stream."""
    host = _get_host(websocket)
    await _attach(websocket, host)
    logger.info("Display connected.")

    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Display disconnected.")
    finally:
        _detach(websocket, host)
