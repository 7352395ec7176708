"""FastAPI application factory for the provider schema service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from provider_schema import __version__
from provider_schema.api.router import build_router
from provider_schema.config import Settings, get_settings
from provider_schema.schemas.providers import PROVIDERS_SCHEMA_ID, providers_schema_bytes

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging in the service's standard format."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    On startup the schema body is encoded once so the first request pays
    no serialization cost.
    """
    body = providers_schema_bytes()
    logger.info(
        "%s %s started, serving %s (%d bytes)",
        app.title,
        app.version,
        PROVIDERS_SCHEMA_ID,
        len(body),
    )

    yield

    logger.info("%s shutting down", app.title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn provider_schema.app:create_app --factory
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Provider Schema",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.include_router(build_router(settings.schema_prefix))

    return app
