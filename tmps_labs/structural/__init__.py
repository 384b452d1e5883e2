"""
Structural Patterns Lab

- Adapter: LegacyPaymentAdapter over LegacyPaymentGateway
- Decorator: DecoratedBouquet with ordered extras
- Facade: OrderService
"""

from .adapter import LegacyPaymentAdapter, LegacyPaymentGateway, to_cents
from .decorator import DecoratedBouquet, Extra
from .facade import OrderService

__all__ = [
    "LegacyPaymentAdapter",
    "LegacyPaymentGateway",
    "to_cents",
    "DecoratedBouquet",
    "Extra",
    "OrderService",
]
