"""SQLAlchemy ORM models for customers and credits."""

from datetime import datetime, date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class CustomerModel(Base):
    """Customer record maintained by the customer registry."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    income: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=0)

    credits: Mapped[list["CreditModel"]] = relationship(
        "CreditModel",
        back_populates="customer",
        order_by="CreditModel.created_at",
    )


class CreditModel(Base):
    """Persisted credit record."""

    __tablename__ = "credits"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    credit_code: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        nullable=False,
        unique=True,
        default=lambda: str(uuid4()),
    )
    credit_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    day_first_installment: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_installments: Mapped[int] = mapped_column(Integer, nullable=False)
    installment_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="IN_PROGRESS",
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )

    customer: Mapped["CustomerModel"] = relationship(
        "CustomerModel",
        back_populates="credits",
    )
