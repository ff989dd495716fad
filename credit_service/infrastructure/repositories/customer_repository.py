"""PostgreSQL lookup for customers."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_service.domain.interfaces import CustomerRepository
from credit_service.infrastructure.database.models import CustomerModel


class PostgresCustomerRepository(CustomerRepository):
    """Read-only customer repository backed by the customers table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, customer_id: int) -> bool:
        stmt = select(CustomerModel.id).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
