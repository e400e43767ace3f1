"""Structlog implementation of the AbstractFactoryObserver port."""

import structlog


class StructlogAbstractFactoryObserver:
    """Delegates abstract factory domain events to structlog.

    Satisfies the AbstractFactoryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def factory_selected(self, family: str, factory: str) -> None:
        self._log.debug(
            "abstract_factory.factory_selected",
            family=family,
            factory=factory,
        )
