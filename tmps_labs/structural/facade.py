import logging
from typing import Protocol

from tmps_labs.domain.money import format_amount


class PricedBouquet(Protocol):
    def description(self) -> str: ...

    def price(self) -> float: ...


class PaymentProvider(Protocol):
    def pay(self, amount: float) -> None: ...


class OrderService:
    """
    Facade over bouquet pricing and payment.

    Callers place an order with one call instead of talking to the
    bouquet and the payment provider themselves.
    """

    def __init__(self, provider: PaymentProvider) -> None:
        self._provider = provider
        self._logger = logging.getLogger(__name__)

    def place_order(self, bouquet: PricedBouquet, customer: str) -> None:
        """
        Print the order summary and charge the bouquet's price.

        Args:
            bouquet: Anything exposing description() and price()
            customer: Name printed on the order
        """
        price = bouquet.price()
        print("=== ORDER ===")
        print("Customer:", customer)
        print("Bouquet:", bouquet.description())
        print("Price:", format_amount(price))
        self._logger.info(f"Charging {price} for order of {customer}")
        self._provider.pay(price)
        print("Order completed.")
