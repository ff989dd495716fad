"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database seeded with test customers
- Request payload builders
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_service.main import app
from credit_service.core.dependencies import (
    get_credit_repository,
    get_customer_repository,
)
from credit_service.infrastructure.database import Base, CustomerModel
from credit_service.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)


EXISTING_CUSTOMER_ID = 1
OTHER_CUSTOMER_ID = 2
MISSING_CUSTOMER_ID = 999


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session with two registered customers."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        session.add_all([
            CustomerModel(
                id=EXISTING_CUSTOMER_ID,
                first_name="Ana",
                last_name="Souza",
                email="ana@example.com",
                income=Decimal("5000.00"),
            ),
            CustomerModel(
                id=OTHER_CUSTOMER_ID,
                first_name="Bruno",
                last_name="Lima",
                email="bruno@example.com",
                income=Decimal("7500.00"),
            ),
        ])
        await session.flush()
        yield session


@pytest.fixture
def credit_repository(test_session: AsyncSession) -> PostgresCreditRepository:
    return PostgresCreditRepository(test_session)


@pytest.fixture
def customer_repository(test_session: AsyncSession) -> PostgresCustomerRepository:
    return PostgresCustomerRepository(test_session)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client uses an in-memory SQLite database where customers 1
    and 2 exist and customer 999 does not.
    """
    async def override_get_credit_repository():
        return PostgresCreditRepository(test_session)

    async def override_get_customer_repository():
        return PostgresCustomerRepository(test_session)

    app.dependency_overrides[get_credit_repository] = override_get_credit_repository
    app.dependency_overrides[get_customer_repository] = override_get_customer_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

def build_credit_request(
    credit_value: float = 260000.0,
    day_first_installment: date | None = None,
    number_of_installments: int = 1,
    customer_id: int = EXISTING_CUSTOMER_ID,
) -> dict:
    """Build a POST /credits body; the first installment defaults to a year from today."""
    first_day = day_first_installment or date.today() + timedelta(days=365)
    return {
        "creditValue": credit_value,
        "dayFirstInstallment": first_day.isoformat(),
        "numberOfInstallments": number_of_installments,
        "customerId": customer_id,
    }


@pytest.fixture
def credit_request() -> dict:
    """Valid request body for the existing customer."""
    return build_credit_request()


@pytest.fixture
def unknown_customer_request() -> dict:
    """Request body referencing a customer that does not exist."""
    return build_credit_request(customer_id=MISSING_CUSTOMER_ID)


@pytest.fixture
def make_credit_request():
    """Factory for request bodies with overridable fields."""
    return build_credit_request
