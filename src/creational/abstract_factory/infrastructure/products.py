"""Concrete products for families "1" and "2"."""

from typing import ClassVar


class ProductA1:
    family: ClassVar[str] = "1"


class ProductA2:
    family: ClassVar[str] = "2"


class ProductB1:
    family: ClassVar[str] = "1"


class ProductB2:
    family: ClassVar[str] = "2"
