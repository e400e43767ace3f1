"""Factories bound to a single concrete product when the class is defined."""

from creational.factory_method.domain.product import Product
from creational.factory_method.infrastructure.products import ProductA, ProductB


class ProductAFactory:
    """Creates a new ProductA on every call."""

    def create_product(self) -> Product:
        return ProductA()


class ProductBFactory:
    """Creates a new ProductB on every call."""

    def create_product(self) -> Product:
        return ProductB()
