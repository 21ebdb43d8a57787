"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from src.config import settings
from src.exceptions import WorkshopAPIError
from src.handlers.exception_handler import (
    generic_exception_handler,
    validation_exception_handler,
    workshop_api_exception_handler,
)
from src.logging.config import configure_logging, get_logger
from src.middleware.logging import LoggingMiddleware
from src.routes import csv, status, workshops
from src.services.orchestration_service import get_orchestration_service

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan.

    On shutdown, waits for every CSV export that was already answered
    with 202 instead of letting the loop cancel it.
    """
    yield
    service = get_orchestration_service()
    if service.pending_count:
        logger.info(
            "Waiting for CSV exports to finish",
            extra={"context": {"pending_exports": service.pending_count}},
        )
    await service.wait_idle()


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
## Workshop Data API

Workshops, locations and organizers of every client live in one DynamoDB
table, keyed by client id and a tagged sort key.

### Endpoints

- **Workshops**: create, read, list, replace and delete workshop records
- **CSV export**: `POST /csv` starts a background export and answers
  `202 Accepted` with a `trackingId`
- **Health**: `GET /status`
""",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_exception_handler(WorkshopAPIError, workshop_api_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(csv.router)
app.include_router(workshops.router)
app.include_router(status.router)


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """
    Root endpoint with API information.

    Returns:
        Dict with welcome message and docs link
    """
    return {
        "message": f"Welcome to {settings.api_title}",
        "version": settings.api_version,
        "docs": "/docs",
        "health": "/status",
    }
