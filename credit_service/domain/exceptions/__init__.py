"""Domain Exceptions - Business rule violations and domain errors."""

from .base import (
    BusinessException,
    DomainException,
    FieldViolation,
    ValidationException,
)
from .credit import CreditNotFoundException, CreditOwnershipException
from .customer import CustomerNotFoundException

__all__ = [
    "DomainException",
    "BusinessException",
    "ValidationException",
    "FieldViolation",
    "CreditNotFoundException",
    "CreditOwnershipException",
    "CustomerNotFoundException",
]
