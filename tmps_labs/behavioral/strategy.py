import logging
from typing import Annotated, Callable, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from tmps_labs.core.exceptions import DeliveryStrategyNotSetError

logger = logging.getLogger(__name__)


class Courier(BaseModel):
    kind: Literal["courier"] = "courier"


class Drone(BaseModel):
    kind: Literal["drone"] = "drone"


DeliveryStrategy = Annotated[Union[Courier, Drone], Field(discriminator="kind")]


def _courier_deliver(order_id: int) -> None:
    print("Courier delivers", order_id)


def _drone_deliver(order_id: int) -> None:
    print("Drone delivers", order_id)


DELIVERIES: Dict[str, Callable[[int], None]] = {
    "courier": _courier_deliver,
    "drone": _drone_deliver,
}


class DeliveryContext(BaseModel):
    """Delivers orders with whichever strategy was chosen last."""

    strategy: Optional[DeliveryStrategy] = None

    def set_strategy(self, strategy: DeliveryStrategy) -> None:
        self.strategy = strategy

    def execute(self, order_id: int) -> None:
        if self.strategy is None:
            logger.error(f"No delivery strategy selected for order {order_id}")
            raise DeliveryStrategyNotSetError(
                "Choose a delivery strategy before executing", details={"order_id": order_id}
            )
        DELIVERIES[self.strategy.kind](order_id)
