"""
Installment arithmetic for credits.

Installments split the credit value evenly; the result is rounded to
currency precision.
"""

from decimal import Decimal

from .settings import CreditSettings, credit_settings


def calculate_installment_value(
    credit_value: Decimal,
    number_of_installments: int,
    settings: CreditSettings = credit_settings,
) -> Decimal:
    """
    Compute the value of each installment.

    Args:
        credit_value: Total value of the credit
        number_of_installments: How many installments the credit is paid in
        settings: Installment settings (uses defaults if not provided)

    Returns:
        credit_value / number_of_installments rounded to currency precision

    Raises:
        ValueError: If number_of_installments is not positive
    """
    if number_of_installments <= 0:
        raise ValueError(
            f"number_of_installments must be positive, got {number_of_installments}"
        )

    value = Decimal(credit_value) / Decimal(number_of_installments)
    return value.quantize(settings.quantum, rounding=settings.rounding)
