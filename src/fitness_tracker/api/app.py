"""FastAPI application factory for the health-check server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import ServerContainer

RUNNING_MESSAGE = "Fitness tracker server is running!"


def create_app(container: ServerContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.database.connect()
        logger.info("Server listening on port %s", container.settings.port)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Static confirmation that the server is up."""
        return RUNNING_MESSAGE

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        state_container: ServerContainer = request.app.state.container
        return {"status": "ok", "database": state_container.database.status}

    return app
