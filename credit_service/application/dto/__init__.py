"""Data Transfer Objects for application layer."""

from .credit import CreditRequest, CreditView, CreditCreatedResponse

__all__ = [
    "CreditRequest",
    "CreditView",
    "CreditCreatedResponse",
]
