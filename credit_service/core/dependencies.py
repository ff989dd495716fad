"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_service.infrastructure.database import get_db_session
from credit_service.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)
from credit_service.application.services import CreditService


# Repository dependencies
async def get_credit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCreditRepository:
    """Get a CreditRepository instance."""
    return PostgresCreditRepository(session)


async def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCustomerRepository:
    """Get a CustomerRepository instance."""
    return PostgresCustomerRepository(session)


# Service dependencies
async def get_credit_service(
    credit_repo: Annotated[PostgresCreditRepository, Depends(get_credit_repository)],
    customer_repo: Annotated[PostgresCustomerRepository, Depends(get_customer_repository)],
) -> CreditService:
    """Get a CreditService instance with all dependencies."""
    return CreditService(
        credit_repository=credit_repo,
        customer_repository=customer_repo,
    )
