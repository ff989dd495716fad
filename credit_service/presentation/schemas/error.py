"""Pydantic schema for API error responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorDetailSchema(BaseModel):
    """A single field-level error."""

    field: str = Field(
        ...,
        description="Offending input field",
        examples=["customerId"],
    )
    message: str = Field(
        ...,
        description="Why the field was rejected",
        examples=["Customer not found: 999"],
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    title: str = Field(
        ...,
        description="Short summary of the error",
        examples=["Bad Request! Consult the documentation"],
    )
    timestamp: datetime = Field(
        ...,
        description="When the error occurred",
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    exception: str = Field(
        ...,
        description="Fully-qualified error classification",
        examples=["credit_service.domain.exceptions.base.BusinessException"],
    )
    details: list[ErrorDetailSchema] = Field(
        ...,
        description="Field-level error details",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Bad Request! Consult the documentation",
                    "timestamp": "2026-10-18T12:00:00Z",
                    "status": 400,
                    "exception": "credit_service.domain.exceptions.base.BusinessException",
                    "details": [
                        {"field": "customerId", "message": "Customer not found: 999"}
                    ],
                    "request_id": "abc123",
                }
            ]
        }
    }
