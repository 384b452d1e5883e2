from typing import Callable, Dict, Optional, Tuple
import logging

from tmps_labs import solid
from tmps_labs.core.bootstrap import bootstrap
from tmps_labs.core.config_manager import ConfigManager, Settings
from tmps_labs.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LAB = "1"

# Menu label -> (title, entrypoint)
LABS: Dict[str, Tuple[str, Callable[[], None]]] = {
    "1": ("Laboratory Work #1 – SOLID (SRP, OCP, DIP)", solid.run),
}


def read_choice(prompt: str, default: str) -> str:
    """Read one line from stdin; blank input or end of input selects the default."""
    try:
        text = input(prompt)
    except EOFError:
        text = ""
    choice = text.strip()
    return choice or default


def run_lab(choice: str) -> bool:
    """
    Run the lab registered under ``choice``.

    Returns:
        True if a lab ran, False if the choice is unknown
    """
    lab = LABS.get(choice)
    if lab is None:
        logger.warning(f"Unknown lab choice: {choice!r}")
        print(f"Unknown lab. Available: {', '.join(LABS)}")
        return False

    title, entrypoint = lab
    print(f"\nRunning {title}\n")
    entrypoint()
    return True


def load_config() -> ConfigManager:
    """Bootstrap the runner, falling back to built-in defaults on invalid settings."""
    try:
        return bootstrap()
    except ConfigurationError:
        logger.warning("Running labs with default settings")
        return bootstrap(Settings.model_construct())


def main(config_manager: Optional[ConfigManager] = None) -> int:
    """Labs runner entrypoint. Always exits with 0."""
    if config_manager is None:
        config_manager = load_config()

    print("=== Labs Runner ===")
    print("Available labs:")
    for label, (title, _) in LABS.items():
        print(f"  {label}) {title}")

    choice = read_choice(f"Enter lab number to run (e.g., {DEFAULT_LAB}): ", DEFAULT_LAB)
    run_lab(choice)
    return 0
