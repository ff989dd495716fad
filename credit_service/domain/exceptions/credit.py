"""Credit-related domain exceptions."""

from .base import BusinessException


class CreditNotFoundException(BusinessException):
    """Raised when a credit cannot be found."""

    def __init__(self, credit_id: str):
        super().__init__(
            message=f"Credit not found: {credit_id}",
            code="CREDIT_NOT_FOUND",
            field="id",
        )
        self.credit_id = credit_id


class CreditOwnershipException(BusinessException):
    """Raised when a credit is requested on behalf of another customer."""

    def __init__(self, credit_id: str, customer_id: int):
        super().__init__(
            message=f"Credit {credit_id} does not belong to customer {customer_id}",
            code="CREDIT_CUSTOMER_MISMATCH",
            field="customerId",
        )
        self.credit_id = credit_id
        self.customer_id = customer_id
