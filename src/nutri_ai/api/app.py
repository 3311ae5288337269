"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nutri_ai.api.meals import router as meals_router
from nutri_ai.api.search import router as search_router
from nutri_ai.app_logging import configure_logging
from nutri_ai.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting Nutri-AI API (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Nutri-AI", lifespan=lifespan)
    app.state.container = container

    app.include_router(search_router)
    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
