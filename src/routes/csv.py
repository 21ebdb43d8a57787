"""API routes for CSV exports."""

from fastapi import APIRouter, Depends, status

from src.schemas.csv import CsvResponse
from src.services.orchestration_service import (
    OrchestrationService,
    get_orchestration_service,
)
from src.utils.ids import generate_id

router = APIRouter(prefix="/csv", tags=["CSV"])


@router.post(
    "",
    response_model=CsvResponse,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        202: {
            "description": "Export accepted for processing",
            "content": {
                "application/json": {
                    "example": {"trackingId": "Q2hZb8m6TqS0x1W4dKp3aA"}
                }
            },
        },
        500: {
            "description": "Export could not be initiated",
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "error_code": "DATA_PROCESSING_ERROR",
                        "message": "Error in OrchestrationService: 10 exports already in progress",
                        "details": {},
                    }
                }
            },
        },
    },
)
async def post_csv(
    orchestration_service: OrchestrationService = Depends(get_orchestration_service),
) -> CsvResponse:
    """
    Start a CSV export and return its tracking id.

    The export runs in the background; the response only confirms that it
    was accepted.

    Raises:
        DataProcessingException: If the export cannot be initiated (500)
    """
    tracking_id = generate_id()
    await orchestration_service.create_csv(tracking_id)
    return CsvResponse(tracking_id=tracking_id)
