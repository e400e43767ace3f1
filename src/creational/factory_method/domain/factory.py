"""Factory Protocols: structural interfaces for the two factory method variants."""

from typing import Protocol

from creational.factory_method.domain.product import Product

type Descriptor = str | type[Product]


class Factory(Protocol):
    """Constructs a new Product whose concrete type is fixed by the factory class."""

    def create_product(self) -> Product: ...


class ReflectiveFactory(Protocol):
    """Constructs a new Product whose concrete type is chosen by the caller.

    `descriptor` is either a registered product name or the product class itself.
    Implementations raise InstantiationError instead of returning None.
    """

    def create_product(self, descriptor: Descriptor) -> Product: ...
