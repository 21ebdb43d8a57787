"""Custom exception classes for the Workshop Data API."""

from typing import Any


class WorkshopAPIError(Exception):
    """Base exception for errors that map to an HTTP response."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class DataProcessingException(WorkshopAPIError):
    """
    Raised when the data layer or the export initiator fails (500).

    This is the only failure kind produced by the DAOs. The originating
    error is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize DataProcessingException.

        Args:
            message: Error message naming the failing component
            cause: The originating exception, if any
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=500,
            error_code="DATA_PROCESSING_ERROR",
            details=details,
        )
        self.cause = cause


class NotFoundError(WorkshopAPIError):
    """Raised by the HTTP layer when a requested record does not exist (404)."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize NotFoundError.

        Args:
            message: Error message
            resource_id: Identifier that was not found
            details: Additional error details
        """
        error_details = dict(details or {})
        if resource_id:
            error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=error_details,
        )
