"""Customer-related domain exceptions."""

from .base import BusinessException


class CustomerNotFoundException(BusinessException):
    """Raised when a referenced customer does not exist."""

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Customer not found: {customer_id}",
            code="CUSTOMER_NOT_FOUND",
            field="customerId",
        )
        self.customer_id = customer_id
