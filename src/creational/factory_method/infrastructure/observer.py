"""Structlog implementation of the FactoryObserver port."""

import structlog


class StructlogFactoryObserver:
    """Delegates factory method domain events to structlog.

    Satisfies the FactoryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def product_created(self, factory: str, product_type: str) -> None:
        self._log.debug(
            "factory.product_created",
            factory=factory,
            product_type=product_type,
        )

    def instantiation_failed(self, descriptor: str, reason: str) -> None:
        self._log.error(
            "factory.instantiation_failed",
            descriptor=descriptor,
            reason=reason,
        )
