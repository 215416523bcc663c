"""Common schemas for standard API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class StandardResponse(BaseModel, Generic[T]):
    """Standard response wrapper for single resources and report results."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"data": {}, "meta": None, "error": None}}
    )

    data: T = Field(..., description="Response data")
    meta: dict | None = Field(None, description="Optional metadata")
    error: None = Field(None, description="Error object (null on success)")


class ErrorDetail(BaseModel):
    """Error detail schema."""

    code: str = Field(..., description="Error code (e.g., 'REPORTING_REPORT_NOT_FOUND')")
    message: str = Field(..., description="Human-readable error message")
    details: dict | None = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Error response schema."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "code": "REPORTING_REPORT_NOT_FOUND",
                    "message": "Report 'foo' not found",
                    "details": {"report_id": "foo"},
                },
                "data": None,
            }
        }
    )

    error: ErrorDetail = Field(..., description="Error information")
    data: None = Field(None, description="Data object (null on error)")
