"""AbstractFactory Protocol: structural interface for constructing a product family."""

from typing import Protocol

from creational.abstract_factory.domain.product import ProductA, ProductB


class AbstractFactory(Protocol):
    """Constructs a ProductA and a ProductB belonging to the same family.

    Every product returned by one factory carries the factory's `family` tag.
    """

    family: str

    def get_product_a(self) -> ProductA: ...

    def get_product_b(self) -> ProductB: ...
