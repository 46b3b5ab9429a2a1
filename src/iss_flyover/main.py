"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from iss_flyover.config import Settings
from iss_flyover.passes.routes import router
from iss_flyover.passes.service import FlyoverService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the flyover service on startup and release its executor on teardown."""
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    service = FlyoverService(settings)
    app.state.flyover_service = service
    logger.info("Flyover service initialized")
    yield
    service.shutdown()
    logger.info("Flyover service shut down")


app = FastAPI(title="ISS Flyover API", lifespan=lifespan)
app.include_router(router)
