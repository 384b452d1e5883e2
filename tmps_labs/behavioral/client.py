"""Behavioral lab: Observer, Strategy and Command."""

import logging

from tmps_labs.behavioral.command import AddFlower, CommandManager
from tmps_labs.behavioral.observer import EmailNotifier, Order
from tmps_labs.behavioral.strategy import DeliveryContext, Drone
from tmps_labs.core.bootstrap import bootstrap
from tmps_labs.core.config_manager import ConfigManager
from tmps_labs.domain.bouquet import Bouquet

logger = logging.getLogger(__name__)


def run(config_manager: ConfigManager) -> None:
    logger.info(f"Running behavioral lab (debug={config_manager.is_debug_mode()})")

    # Observer
    order = Order()
    order.attach(EmailNotifier())
    order.set_status("Packed")

    # Strategy
    ctx = DeliveryContext()
    ctx.set_strategy(Drone())
    ctx.execute(1)

    # Command
    bouquet = Bouquet(name="Roses")
    manager = CommandManager()
    manager.run(AddFlower(bouquet=bouquet, flower="Rose"))
    print("After add:", bouquet.flowers)
    manager.undo()
    print("After undo:", bouquet.flowers)


def main() -> int:
    run(bootstrap())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
