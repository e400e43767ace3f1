"""AbstractFactoryObserver port: domain events emitted while selecting a family."""

from typing import Protocol


class AbstractFactoryObserver(Protocol):
    """Observer port for abstract factory domain events.

    Implementations may log to structlog or record for tests.
    """

    def factory_selected(self, family: str, factory: str) -> None: ...
