"""Custom exceptions for API error handling."""

from typing import Any

from fastapi import HTTPException, status


class APIException(HTTPException):
    """Custom exception for API errors with standard format.

    Every error raised by the application carries a machine-readable code and
    a human-readable message, and is rendered as
    ``{"error": {"code", "message", "details"}, "data": null}``.

    Example:
        raise APIException(
            code="REPORTING_REPORT_NOT_FOUND",
            message="Report 'foo' not found",
            status_code=status.HTTP_404_NOT_FOUND
        )
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize API exception.

        Args:
            code: Error code (e.g., 'REPORTING_REPORT_NOT_FOUND').
            message: Human-readable error message.
            status_code: HTTP status code (default: 400).
            details: Optional additional error details.
        """
        super().__init__(
            status_code=status_code,
            detail={"error": {"code": code, "message": message, "details": details}},
        )
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
