import logging
from typing import Annotated, Callable, Dict, Literal, Union

from pydantic import BaseModel, Field

from tmps_labs.domain.money import format_amount

logger = logging.getLogger(__name__)


class CardPayment(BaseModel):
    kind: Literal["card"] = "card"


class CashPayment(BaseModel):
    kind: Literal["cash"] = "cash"


PaymentMethod = Annotated[Union[CardPayment, CashPayment], Field(discriminator="kind")]


def _pay_with_card(amount: float) -> None:
    print("Paid with card:", format_amount(amount))


def _pay_with_cash(amount: float) -> None:
    print("Paid with cash:", format_amount(amount))


PAYMENT_HANDLERS: Dict[str, Callable[[float], None]] = {
    "card": _pay_with_card,
    "cash": _pay_with_cash,
}


def get_payment_method(method: str) -> PaymentMethod:
    """
    Create the payment method named by ``method``.

    Args:
        method: ``"card"`` selects a card payment; any other name falls
            back to cash.

    Returns:
        The selected payment method variant
    """
    if method == "card":
        return CardPayment()
    logger.debug(f"Payment method '{method}' falls back to cash")
    return CashPayment()


def pay(method: PaymentMethod, amount: float) -> None:
    PAYMENT_HANDLERS[method.kind](amount)
