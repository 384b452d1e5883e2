"""
Creational Patterns Lab

- Configuration: an explicitly constructed ConfigManager replaces the global singleton
- Builder: BouquetBuilder
- Factory: get_payment_method
"""

from .builder import BouquetBuilder
from .factory import CardPayment, CashPayment, PaymentMethod, get_payment_method, pay

__all__ = [
    "BouquetBuilder",
    "CardPayment",
    "CashPayment",
    "PaymentMethod",
    "get_payment_method",
    "pay",
]
