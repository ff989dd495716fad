"""Credit entity representing a credit grant for a customer."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class CreditStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class Credit:
    """
    A credit granted to an existing customer.

    The installment value is derived from the credit value and the
    number of installments when the credit is created; credits are
    never modified afterwards.
    """

    credit_value: Decimal
    day_first_installment: date
    number_of_installments: int
    installment_value: Decimal
    customer_id: int
    status: CreditStatus = CreditStatus.IN_PROGRESS
    id: UUID = field(default_factory=uuid4)
    credit_code: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def belongs_to(self, customer_id: int) -> bool:
        return self.customer_id == customer_id
