"""Health check and status endpoints."""

import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.config import settings
from src.services.orchestration_service import (
    OrchestrationService,
    get_orchestration_service,
)

_app_start_time = time.time()

router = APIRouter(tags=["Health"])


@router.get("/status")
async def get_status(
    orchestration_service: OrchestrationService = Depends(get_orchestration_service),
) -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Does not touch DynamoDB, so it stays fast when the store is slow.

    Returns:
        JSONResponse with status, version, uptime and export backlog
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "version": settings.api_version,
            "uptime_seconds": int(time.time() - _app_start_time),
            "table": settings.dynamodb_table_name,
            "pending_exports": orchestration_service.pending_count,
        },
    )
