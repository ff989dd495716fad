"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from credit_service.domain.entities import Credit


class CreditRepository(ABC):
    """
    Abstract repository for Credit persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, credit: Credit) -> Credit:
        """
        Persist a credit.

        Args:
            credit: The credit to save

        Returns:
            The saved credit
        """
        ...

    @abstractmethod
    async def get_by_id(self, credit_id: UUID) -> Optional[Credit]:
        """
        Retrieve a credit by ID.

        Args:
            credit_id: The credit's unique identifier

        Returns:
            The credit if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits of a customer.

        Args:
            customer_id: The customer's identifier

        Returns:
            List of credits in the order they were created
        """
        ...


class CustomerRepository(ABC):
    """
    Abstract existence check for customers.

    Customers are registered elsewhere; this service only reads them.
    """

    @abstractmethod
    async def exists(self, customer_id: int) -> bool:
        """Check whether a customer with the given ID exists."""
        ...
