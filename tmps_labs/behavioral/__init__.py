"""
Behavioral Patterns Lab

- Observer: Order notifying EmailNotifier
- Strategy: DeliveryContext with Courier / Drone
- Command: AddFlower actions run through CommandManager with undo
"""

from .command import Action, AddFlower, CommandManager
from .observer import EmailNotifier, Order
from .strategy import Courier, DeliveryContext, Drone

__all__ = [
    "Action",
    "AddFlower",
    "CommandManager",
    "EmailNotifier",
    "Order",
    "Courier",
    "DeliveryContext",
    "Drone",
]
