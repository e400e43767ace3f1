"""Error types raised by abstract factory infrastructure."""

from creational.core.errors import CreationalError


class FamilyNotSupportedError(CreationalError):
    """Raised when no factory is known for the requested product family."""

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(
            f"Failed to create abstract factory: unsupported family '{family}'"
        )
