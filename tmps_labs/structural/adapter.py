import logging
import math

logger = logging.getLogger(__name__)


def to_cents(amount: float) -> int:
    """Convert an amount to whole cents, rounding half away from zero."""
    cents = math.floor(abs(amount) * 100 + 0.5)
    return int(math.copysign(cents, amount))


class LegacyPaymentGateway:
    """Old gateway that only understands integer cents."""

    def __init__(self, merchant_id: str) -> None:
        self.merchant_id = merchant_id

    def make_payment(self, cents: int) -> None:
        print(f"[LegacyPayment] Charging {cents} cents via merchant {self.merchant_id}")


class LegacyPaymentAdapter:
    """Exposes the ``pay(amount)`` interface the order facade expects."""

    def __init__(self, gateway: LegacyPaymentGateway) -> None:
        self.gateway = gateway

    def pay(self, amount: float) -> None:
        cents = to_cents(amount)
        logger.debug(f"Adapting payment of {amount} to {cents} cents")
        self.gateway.make_payment(cents)
