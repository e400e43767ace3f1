"""RegistryProductFactory: builds the product named by the caller's descriptor."""

from typing import overload

from creational.factory_method.domain.factory import Descriptor
from creational.factory_method.domain.observer import FactoryObserver
from creational.factory_method.domain.product import Product
from creational.factory_method.infrastructure.errors import InstantiationError
from creational.factory_method.infrastructure.registry import (
    ProductRegistry,
    describe,
)


class RegistryProductFactory:
    """Creates products by looking their constructor up in a ProductRegistry.

    Satisfies the ReflectiveFactory protocol structurally. Nothing is cached:
    each call returns a freshly constructed instance.
    """

    def __init__(self, registry: ProductRegistry, observer: FactoryObserver) -> None:
        self._registry = registry
        self._observer = observer

    @overload
    def create_product[P: Product](self, descriptor: type[P]) -> P: ...

    @overload
    def create_product(self, descriptor: str) -> Product: ...

    def create_product(self, descriptor: Descriptor) -> Product:
        """Resolve descriptor, invoke its zero-argument constructor, return the result.

        Raises:
            InstantiationError: if descriptor is unknown, the constructor fails,
                the constructed instance is not exactly the requested type, or it
                is not a product at all (for example None).
        """
        try:
            product = self._instantiate(descriptor)
        except InstantiationError as exc:
            self._observer.instantiation_failed(
                descriptor=exc.descriptor, reason=exc.reason
            )
            raise

        self._observer.product_created(
            factory=type(self).__name__, product_type=type(product).__name__
        )
        return product

    def _instantiate(self, descriptor: Descriptor) -> Product:
        constructor = self._registry.resolve(descriptor)
        try:
            product = constructor()
        except Exception as exc:
            raise InstantiationError(
                descriptor=describe(descriptor),
                reason=f"{type(exc).__name__}: {exc}",
            ) from exc

        if isinstance(constructor, type) and type(product) is not constructor:
            raise InstantiationError(
                descriptor=describe(descriptor),
                reason=f"constructor returned {type(product).__name__}",
            )
        if not isinstance(getattr(type(product), "label", None), str):
            raise InstantiationError(
                descriptor=describe(descriptor),
                reason=f"constructor returned {type(product).__name__}, not a product",
            )
        return product
