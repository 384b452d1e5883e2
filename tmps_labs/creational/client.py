"""Creational lab: configuration, Builder and Factory."""

import logging

from tmps_labs.core.bootstrap import bootstrap
from tmps_labs.core.config_manager import ConfigManager
from tmps_labs.creational.builder import BouquetBuilder
from tmps_labs.creational.factory import get_payment_method, pay

logger = logging.getLogger(__name__)


def run(config_manager: ConfigManager) -> None:
    logger.info("Running creational lab")

    # Configuration, handed in by the entrypoint
    print("Config value:", config_manager.get_config_value())

    # Builder
    bouquet = BouquetBuilder().set_name("Spring Mix").add_flower("Rose").add_flower("Tulip").build()
    print("Bouquet:", bouquet.name, bouquet.flowers)

    # Factory
    payment = get_payment_method("card")
    pay(payment, 120)


def main() -> int:
    run(bootstrap())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
