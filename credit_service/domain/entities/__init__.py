"""Domain Entities - Core business objects."""

from .credit import Credit, CreditStatus

__all__ = [
    "Credit",
    "CreditStatus",
]
