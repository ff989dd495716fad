"""Data transfer objects for credit operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional

from credit_service.domain.entities import Credit
from credit_service.domain.exceptions import FieldViolation

# Bounds of the credits table columns: Numeric(14, 2) and a 32-bit Integer
MAX_CREDIT_VALUE = Decimal("999999999999.99")
MAX_INSTALLMENTS = 2_147_483_647
CENT = Decimal("0.01")


@dataclass(frozen=True)
class CreditRequest:
    """Input data for registering a credit."""

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    customer_id: int

    def validate(self, today: Optional[date] = None) -> List[FieldViolation]:
        today = today or date.today()
        errors = []

        if self.credit_value <= 0:
            errors.append(FieldViolation("creditValue", "must be greater than 0"))
        elif self.credit_value > MAX_CREDIT_VALUE:
            errors.append(
                FieldViolation(
                    "creditValue", f"must be at most {MAX_CREDIT_VALUE}"
                )
            )
        elif self.credit_value != self.credit_value.quantize(CENT):
            errors.append(
                FieldViolation("creditValue", "must have at most 2 decimal places")
            )

        if self.day_first_installment <= today:
            errors.append(
                FieldViolation("dayFirstInstallment", "must be a future date")
            )

        if self.number_of_installments <= 0:
            errors.append(
                FieldViolation("numberOfInstallments", "must be greater than 0")
            )
        elif self.number_of_installments > MAX_INSTALLMENTS:
            errors.append(
                FieldViolation(
                    "numberOfInstallments", f"must be at most {MAX_INSTALLMENTS}"
                )
            )

        return errors


@dataclass(frozen=True)
class CreditView:
    """Public view of a stored credit."""

    id: str
    credit_code: str
    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    installment_value: Decimal
    status: str
    customer_id: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditView":
        return cls(
            id=str(credit.id),
            credit_code=str(credit.credit_code),
            credit_value=credit.credit_value,
            day_first_installment=credit.day_first_installment,
            number_of_installments=credit.number_of_installments,
            installment_value=credit.installment_value,
            status=credit.status.value,
            customer_id=credit.customer_id,
        )


@dataclass(frozen=True)
class CreditCreatedResponse:
    """Confirmation returned after a credit is registered."""

    message: str
    credit: CreditView

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditCreatedResponse":
        return cls(
            message=f"Credit {credit.id} - Customer {credit.customer_id} saved!",
            credit=CreditView.from_entity(credit),
        )
