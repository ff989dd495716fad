"""PostgreSQL implementation of CreditRepository."""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_service.domain.entities import Credit, CreditStatus
from credit_service.domain.interfaces import CreditRepository
from credit_service.infrastructure.database.models import CreditModel


class PostgresCreditRepository(CreditRepository):
    """
    PostgreSQL implementation of the Credit repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, credit: Credit) -> Credit:
        """Persist a credit to the database."""
        model = CreditModel(
            id=str(credit.id),
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            installment_value=credit.installment_value,
            status=credit.status.value,
            customer_id=credit.customer_id,
            created_at=credit.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return credit

    async def get_by_id(self, credit_id: UUID) -> Optional[Credit]:
        """Retrieve a credit by ID."""
        stmt = select(CreditModel).where(CreditModel.id == str(credit_id))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_customer_id(self, customer_id: int) -> List[Credit]:
        """Retrieve a customer's credits, oldest first."""
        stmt = (
            select(CreditModel)
            .where(CreditModel.customer_id == customer_id)
            .order_by(CreditModel.created_at.asc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: CreditModel) -> Credit:
        """Convert database model to domain entity."""
        return Credit(
            id=UUID(model.id),
            credit_code=UUID(model.credit_code),
            credit_value=Decimal(model.credit_value),
            day_first_installment=model.day_first_installment,
            number_of_installments=model.number_of_installments,
            installment_value=Decimal(model.installment_value),
            status=CreditStatus(model.status),
            customer_id=model.customer_id,
            created_at=model.created_at,
        )
