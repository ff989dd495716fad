"""
Integration tests for data persistence.

These tests verify:
1. Credits round-trip through the SQLAlchemy repository unchanged
2. Credits are listed per customer in creation order
3. Customer existence checks
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from credit_service.domain.entities import Credit, CreditStatus
from credit_service.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)


def make_credit(customer_id: int = 1, credit_value: str = "1200.00", **kwargs) -> Credit:
    return Credit(
        credit_value=Decimal(credit_value),
        day_first_installment=date.today() + timedelta(days=30),
        number_of_installments=12,
        installment_value=Decimal(credit_value) / 12,
        customer_id=customer_id,
        **kwargs,
    )


# =============================================================================
# Credit Repository Tests
# =============================================================================

class TestCreditRepository:
    """Tests for PostgresCreditRepository."""

    @pytest.mark.asyncio
    async def test_saved_credit_can_be_retrieved(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        credit = make_credit()
        await credit_repository.save(credit)

        stored = await credit_repository.get_by_id(credit.id)

        assert stored is not None
        assert stored.id == credit.id
        assert stored.credit_code == credit.credit_code
        assert stored.credit_value == Decimal("1200.00")
        assert stored.day_first_installment == credit.day_first_installment
        assert stored.number_of_installments == 12
        assert stored.installment_value == Decimal("100.00")
        assert stored.status == CreditStatus.IN_PROGRESS
        assert stored.customer_id == 1

    @pytest.mark.asyncio
    async def test_status_is_persisted(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        credit = make_credit(status=CreditStatus.APPROVED)
        await credit_repository.save(credit)

        stored = await credit_repository.get_by_id(credit.id)

        assert stored.status == CreditStatus.APPROVED

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        assert await credit_repository.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_by_customer_id_ordered_by_creation(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        base = datetime(2026, 1, 1, 12, 0, 0)
        newest = make_credit(credit_value="300.00", created_at=base + timedelta(hours=2))
        oldest = make_credit(credit_value="100.00", created_at=base)
        middle = make_credit(credit_value="200.00", created_at=base + timedelta(hours=1))

        for credit in (newest, oldest, middle):
            await credit_repository.save(credit)

        credits = await credit_repository.get_by_customer_id(1)

        assert [c.id for c in credits] == [oldest.id, middle.id, newest.id]

    @pytest.mark.asyncio
    async def test_get_by_customer_id_filters_customer(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        await credit_repository.save(make_credit(customer_id=1))
        other = make_credit(customer_id=2)
        await credit_repository.save(other)

        credits = await credit_repository.get_by_customer_id(2)

        assert [c.id for c in credits] == [other.id]

    @pytest.mark.asyncio
    async def test_get_by_customer_id_empty(
        self,
        credit_repository: PostgresCreditRepository,
    ):
        assert await credit_repository.get_by_customer_id(1) == []


# =============================================================================
# Customer Repository Tests
# =============================================================================

class TestCustomerRepository:
    """Tests for PostgresCustomerRepository."""

    @pytest.mark.asyncio
    async def test_existing_customer(
        self,
        customer_repository: PostgresCustomerRepository,
    ):
        assert await customer_repository.exists(1) is True

    @pytest.mark.asyncio
    async def test_missing_customer(
        self,
        customer_repository: PostgresCustomerRepository,
    ):
        assert await customer_repository.exists(999) is False
