"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from snake_controller.config import ControllerConfig
from snake_controller.server.controller_host import ControllerHost
from snake_controller.server.routes import router
from snake_controller.server.websocket import ws_router


def create_app(config: ControllerConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.host = ControllerHost(config)
        yield
        await app.state.host.cleanup()

    app = FastAPI(
        title="Snake Controller API", version="0.1.0", lifespan=_lifespan,
    )
    app.include_router(router)
    app.include_router(ws_router)
    return app
