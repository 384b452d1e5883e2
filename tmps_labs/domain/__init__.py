"""Bloomify domain values shared by the creational, structural and behavioral labs."""

from .bouquet import Bouquet, BasicBouquet
from .money import format_amount

__all__ = ["Bouquet", "BasicBouquet", "format_amount"]
