"""
Core Module

Configuration, start-up and the exception hierarchy shared by all labs.
"""

from .config_manager import ConfigManager, Settings
from .bootstrap import bootstrap, configure_logging
from .exceptions import (
    LabError,
    ConfigurationError,
    UndoMismatchError,
    DeliveryStrategyNotSetError,
)

__all__ = [
    "ConfigManager",
    "Settings",
    "bootstrap",
    "configure_logging",
    "LabError",
    "ConfigurationError",
    "UndoMismatchError",
    "DeliveryStrategyNotSetError",
]
