"""
Installment Calculation Module
"""

from .settings import CreditSettings, credit_settings
from .calculator import calculate_installment_value

__all__ = [
    "CreditSettings",
    "credit_settings",
    "calculate_installment_value",
]
