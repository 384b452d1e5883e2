from typing import Optional
import logging
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from tmps_labs.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Laboratory settings using Pydantic BaseSettings."""

    # Creational lab
    config_value: str = "Bloomify Default Config"

    # Structural lab
    merchant_id: str = "BLOOMIFY-123"
    customer_name: str = "Popescu Sabina"

    # Development Settings
    debug: bool = False
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="TMPS_",
        env_file=".env",
        extra="ignore",
    )


class ConfigManager:
    """
    Configuration Manager.

    Built once by each entrypoint and handed to the labs that need it,
    so no lab reaches for a process-wide instance.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the configuration manager, loading settings unless given."""
        self._logger = logging.getLogger(__name__)
        self._settings: Optional[Settings] = settings
        if self._settings is None:
            self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except ValidationError as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError("Invalid laboratory configuration", details=e.errors()) from e

    @property
    def settings(self) -> Settings:
        """Get the laboratory settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def get_config_value(self) -> str:
        """Get the value shown by the creational lab."""
        return self.settings.config_value

    def get_log_level(self) -> int:
        """Get the configured log level as a logging constant."""
        return getattr(logging, self.settings.log_level.upper(), logging.WARNING)

    def is_debug_mode(self) -> bool:
        """Check if the labs run in debug mode."""
        return self.settings.debug

    def get_order_settings(self) -> dict:
        """Get the settings used by the structural lab's order."""
        return {
            "merchant_id": self.settings.merchant_id,
            "customer_name": self.settings.customer_name,
        }
