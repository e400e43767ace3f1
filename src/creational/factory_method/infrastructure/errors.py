"""Error types raised by factory method infrastructure."""

from creational.core.errors import CreationalError


class InstantiationError(CreationalError):
    """Raised when a descriptor cannot be resolved or its product cannot be built."""

    def __init__(self, descriptor: str, reason: str) -> None:
        self.descriptor = descriptor
        self.reason = reason
        super().__init__(f"Failed to instantiate product '{descriptor}': {reason}")


class DuplicateRegistrationError(CreationalError):
    """Raised when a product name is registered twice in one registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Failed to register product: name '{name}' is already registered"
        )


class InvalidRegistrationError(CreationalError):
    """Raised when a constructor cannot be registered under the requested name."""

    def __init__(self, name: str | None, reason: str) -> None:
        self.name = name
        self.reason = reason
        target = f"'{name}'" if name is not None else "without a name"
        super().__init__(f"Failed to register product {target}: {reason}")
