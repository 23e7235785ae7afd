"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.config import get_settings
from src.api.routes import carrier
from src.api import dependencies

settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    logger.info("Starting up Carrier IP API...")

    # Build the classifier up front so table errors surface at startup
    dependencies.get_classifier()

    yield

    logger.info("Shutting down Carrier IP API...")
    dependencies.cleanup()


app = FastAPI(
    title=settings.app_name,
    description="API for classifying IP addresses as Korean mobile carrier networks",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(carrier.router, prefix="/api/v1/carrier", tags=["carrier"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "carrier-ip"}


@app.get("/health")
async def health():
    """Detailed health check."""
    classifier_status = dependencies.check_classifier_health()

    return {
        "status": "healthy",
        "components": {
            "api": "up",
            "classifier": classifier_status["status"],
        },
        "details": {
            "classifier": classifier_status,
        },
    }
