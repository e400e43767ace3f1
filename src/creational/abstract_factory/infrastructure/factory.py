"""Concrete AbstractFactory realizations, one per product family."""

from creational.abstract_factory.domain.product import ProductA, ProductB
from creational.abstract_factory.infrastructure.products import (
    ProductA1,
    ProductA2,
    ProductB1,
    ProductB2,
)


class ProductAB1Factory:
    """Creates the family "1" pair: ProductA1 and ProductB1."""

    family = "1"

    def get_product_a(self) -> ProductA:
        return ProductA1()

    def get_product_b(self) -> ProductB:
        return ProductB1()


class ProductAB2Factory:
    """Creates the family "2" pair: ProductA2 and ProductB2."""

    family = "2"

    def get_product_a(self) -> ProductA:
        return ProductA2()

    def get_product_b(self) -> ProductB:
        return ProductB2()
