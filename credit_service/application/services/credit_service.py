"""Credit service - orchestrates credit registration and lookups."""

from typing import List, Optional
from uuid import UUID

import structlog

from credit_service.domain.entities import Credit
from credit_service.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipException,
    CustomerNotFoundException,
    ValidationException,
)
from credit_service.domain.interfaces import CreditRepository, CustomerRepository
from credit_service.application.dto import CreditRequest
from credit_service.service.installments import calculate_installment_value

logger = structlog.get_logger(__name__)


class CreditService:
    """
    Application service for credit use cases.
    """

    def __init__(
        self,
        credit_repository: CreditRepository,
        customer_repository: CustomerRepository,
    ):
        self._credit_repo = credit_repository
        self._customer_repo = customer_repository

    async def create(self, request: CreditRequest) -> Credit:
        """
        Register a credit for an existing customer.

        Args:
            request: The credit request

        Returns:
            The persisted credit

        Raises:
            ValidationException: If any request field violates its constraints
            CustomerNotFoundException: If the customer doesn't exist
        """
        violations = request.validate()
        if violations:
            raise ValidationException(violations)

        log = logger.bind(
            customer_id=request.customer_id,
            credit_value=str(request.credit_value),
            number_of_installments=request.number_of_installments,
        )
        log.info("credit_requested")

        if not await self._customer_repo.exists(request.customer_id):
            log.warning("customer_not_found")
            raise CustomerNotFoundException(request.customer_id)

        credit = Credit(
            credit_value=request.credit_value,
            day_first_installment=request.day_first_installment,
            number_of_installments=request.number_of_installments,
            installment_value=calculate_installment_value(
                request.credit_value,
                request.number_of_installments,
            ),
            customer_id=request.customer_id,
        )

        await self._credit_repo.save(credit)

        log.info(
            "credit_created",
            credit_id=str(credit.id),
            credit_code=str(credit.credit_code),
            installment_value=str(credit.installment_value),
        )

        return credit

    async def find_by_id(
        self,
        credit_id: UUID,
        customer_id: Optional[int] = None,
    ) -> Credit:
        """
        Retrieve a credit by ID.

        Args:
            credit_id: The credit's unique identifier
            customer_id: When given, the credit must belong to this customer

        Returns:
            The credit entity

        Raises:
            CreditNotFoundException: If credit not found
            CreditOwnershipException: If the credit belongs to another customer
        """
        credit = await self._credit_repo.get_by_id(credit_id)

        if credit is None:
            logger.warning("credit_not_found", credit_id=str(credit_id))
            raise CreditNotFoundException(str(credit_id))

        if customer_id is not None and not credit.belongs_to(customer_id):
            logger.warning(
                "credit_customer_mismatch",
                credit_id=str(credit_id),
                customer_id=customer_id,
                owner_id=credit.customer_id,
            )
            raise CreditOwnershipException(str(credit_id), customer_id)

        return credit

    async def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """
        Retrieve all credits of a customer.

        Args:
            customer_id: The customer's identifier

        Returns:
            Credits in the order they were created, empty if none

        Raises:
            CustomerNotFoundException: If the customer doesn't exist
        """
        if not await self._customer_repo.exists(customer_id):
            logger.warning("customer_not_found", customer_id=customer_id)
            raise CustomerNotFoundException(customer_id)

        credits = await self._credit_repo.get_by_customer_id(customer_id)

        logger.info(
            "customer_credits_retrieved",
            customer_id=customer_id,
            count=len(credits),
        )

        return credits
