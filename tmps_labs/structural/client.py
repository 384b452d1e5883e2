"""Structural lab: Adapter, Decorator and Facade."""

import logging

from tmps_labs.core.bootstrap import bootstrap
from tmps_labs.core.config_manager import ConfigManager
from tmps_labs.domain.bouquet import BasicBouquet
from tmps_labs.structural.adapter import LegacyPaymentAdapter, LegacyPaymentGateway
from tmps_labs.structural.decorator import DecoratedBouquet, Extra
from tmps_labs.structural.facade import OrderService

logger = logging.getLogger(__name__)


def run(config_manager: ConfigManager) -> None:
    logger.info("Running structural lab")
    order_settings = config_manager.get_order_settings()

    base_bouquet = BasicBouquet(name="Romantic Roses", base_price=350)
    decorated = DecoratedBouquet(base=base_bouquet, extras=[Extra.RIBBON, Extra.CARD, Extra.VASE])

    gateway = LegacyPaymentGateway(order_settings["merchant_id"])
    provider = LegacyPaymentAdapter(gateway)

    order_service = OrderService(provider)
    order_service.place_order(decorated, order_settings["customer_name"])

    print("Done.")


def main() -> int:
    run(bootstrap())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
