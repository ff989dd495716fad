"""Repository implementations."""

from .credit_repository import PostgresCreditRepository
from .customer_repository import PostgresCustomerRepository

__all__ = [
    "PostgresCreditRepository",
    "PostgresCustomerRepository",
]
