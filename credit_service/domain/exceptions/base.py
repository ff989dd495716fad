"""Base domain exceptions."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level constraint violation."""

    field: str
    message: str


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    @property
    def violations(self) -> List[FieldViolation]:
        return []


class BusinessException(DomainException):
    """
    Raised when an operation breaks a business rule.

    Carries the name of the input field the rule applies to, so the
    error can be reported the same way as a field validation failure.
    """

    def __init__(
        self,
        message: str,
        code: str = "BUSINESS_ERROR",
        field: Optional[str] = None,
    ):
        super().__init__(message=message, code=code)
        self.field = field

    @property
    def violations(self) -> List[FieldViolation]:
        return [FieldViolation(field=self.field or "", message=self.message)]


class ValidationException(DomainException):
    """Raised when one or more input fields violate their constraints."""

    def __init__(self, violations: List[FieldViolation]):
        super().__init__(
            message="; ".join(f"{v.field}: {v.message}" for v in violations),
            code="VALIDATION_ERROR",
        )
        self._violations = list(violations)

    @property
    def violations(self) -> List[FieldViolation]:
        return list(self._violations)
