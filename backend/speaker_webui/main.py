"""FastAPI application entry point serving the bundled web UI."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from speaker_webui.assets import ASSETS, get_bundle
from speaker_webui.config import settings
from speaker_webui.routers import webui

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    bundle = get_bundle()
    for asset in ASSETS:
        if bundle.exists(asset.resource):
            logger.info(f"Bundled asset available: {asset.resource}")
        else:
            logger.warning(f"Bundled asset missing: {asset.resource} (routes {', '.join(asset.routes)})")
    yield
    logger.info("Web UI shutting down.")


app = FastAPI(
    title=settings.APP_TITLE,
    version="1.0.0",
    lifespan=lifespan,
    # Only the asset routes are reachable
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(webui.router)
