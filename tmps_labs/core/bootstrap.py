"""Process start-up shared by every lab entrypoint."""

import logging
from typing import Optional

from tmps_labs.core.config_manager import ConfigManager, Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config_manager: ConfigManager) -> None:
    """Configure root logging from the settings; records go to stderr."""
    logging.basicConfig(
        level=config_manager.get_log_level(),
        format=LOG_FORMAT
    )


def bootstrap(settings: Optional[Settings] = None) -> ConfigManager:
    """
    Build the configuration manager and set up logging.

    Args:
        settings: Pre-built settings, mainly for tests. Loaded from the
            environment when omitted.

    Returns:
        The configuration manager to pass to the lab being run.
    """
    config_manager = ConfigManager(settings)
    configure_logging(config_manager)
    logging.getLogger(__name__).debug("Labs bootstrapped")
    return config_manager
