"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InputLevels(BaseModel):
    """Request body for PUT /controller/inputs."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


class CycleRequest(BaseModel):
    """Request body for POST /controller/cycles."""

    count: int = Field(default=1, ge=1, le=100_000)


class ControllerSummary(BaseModel):
    """Compact controller info for REST responses."""

    state: str
    game_over: bool
    length: int
    score: int
    head: list[int]
    apple: list[int]
    direction: str
    cycle: int
    tick: int
    clock_running: bool


class GridResponse(BaseModel):
    """Occupancy grid, row-major."""

    width: int
    height: int
    cells: list[list[bool]]


class ClockStatus(BaseModel):
    """Response for clock start/stop."""

    clock_running: bool
    clock_hz: int
