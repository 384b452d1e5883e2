from typing import Optional, Any


class LabError(Exception):
    """Base exception for laboratory errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(LabError):
    """Raised when the settings fail validation."""
    pass


class UndoMismatchError(LabError):
    """Raised when a command's undo no longer matches the collection it mutated."""
    pass


class DeliveryStrategyNotSetError(LabError):
    """Raised when a delivery is requested before a strategy was chosen."""
    pass
