"""Base exception class for all creational-specific errors."""


class CreationalError(Exception):
    """Base class for all creational errors."""


class ConfigValidationError(CreationalError):
    """Raised when a configuration mapping fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")
