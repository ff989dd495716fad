"""Pydantic schemas for API request/response validation."""

from .credit import (
    CreditRequestSchema,
    CreditViewSchema,
    CreditCreatedSchema,
)
from .error import ErrorResponseSchema, ErrorDetailSchema

__all__ = [
    "CreditRequestSchema",
    "CreditViewSchema",
    "CreditCreatedSchema",
    "ErrorResponseSchema",
    "ErrorDetailSchema",
]
