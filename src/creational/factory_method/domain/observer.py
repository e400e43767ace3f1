"""FactoryObserver port: domain events emitted while constructing products."""

from typing import Protocol


class FactoryObserver(Protocol):
    """Observer port for factory method domain events.

    Implementations may log to structlog or record for tests.
    """

    def product_created(self, factory: str, product_type: str) -> None: ...

    def instantiation_failed(self, descriptor: str, reason: str) -> None: ...
