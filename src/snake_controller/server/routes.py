"""REST API route handlers for driving the hosted controller."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from snake_controller.server.controller_host import ControllerHost
from snake_controller.server.models import (
    ClockStatus,
    ControllerSummary,
    CycleRequest,
    GridResponse,
    InputLevels,
)

router = APIRouter(prefix="/controller", tags=["controller"])


def _get_host(request: Request) -> ControllerHost:
    return request.app.state.host


@router.get("")
async def get_controller(request: Request) -> ControllerSummary:
    """Get the controller summary."""
    return _get_host(request).summary()


@router.get("/grid")
async def get_grid(request: Request) -> GridResponse:
    """Get the current occupancy grid."""
    host = _get_host(request)
    return GridResponse(**host.controller.get_state()["grid"])


@router.put("/inputs")
async def set_inputs(body: InputLevels, request: Request) -> ControllerSummary:
    """Set the held level of every direction line."""
    host = _get_host(request)
    async with host.lock:
        try:
            host.set_inputs(**body.model_dump())
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    return host.summary()


@router.post("/inputs/{name}/press")
async def press(name: str, request: Request) -> ControllerSummary:
    """Hold one direction line."""
    host = _get_host(request)
    async with host.lock:
        try:
            host.press(name)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    return host.summary()


@router.post("/inputs/{name}/release")
async def release(name: str, request: Request) -> ControllerSummary:
    """Release one direction line."""
    host = _get_host(request)
    async with host.lock:
        try:
            host.release(name)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
    return host.summary()


@router.post("/cycles")
async def run_cycles(body: CycleRequest, request: Request) -> ControllerSummary:
    """Run cycles manually with the held inputs."""
    host = _get_host(request)
    async with host.lock:
        try:
            # Off the event loop so the clock task and sockets keep running.
            state = await run_in_threadpool(host.run_cycles, body.count)
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
    await host.broadcast(state)
    return host.summary()


@router.post("/reset")
async def reset(request: Request) -> ControllerSummary:
    """Assert reset for one cycle."""
    host = _get_host(request)
    async with host.lock:
        state = host.reset()
    await host.broadcast(state)
    return host.summary()


@router.post("/clock/start")
async def start_clock(request: Request) -> ClockStatus:
    """Start clocking the controller in the background."""
    host = _get_host(request)
    host.start_clock()
    return ClockStatus(
        clock_running=host.clock_running,
        clock_hz=host.controller.config.clock_hz,
    )


@router.post("/clock/stop")
async def stop_clock(request: Request) -> ClockStatus:
    """Stop the background clock."""
    host = _get_host(request)
    await host.stop_clock()
    return ClockStatus(
        clock_running=host.clock_running,
        clock_hz=host.controller.config.clock_hz,
    )
