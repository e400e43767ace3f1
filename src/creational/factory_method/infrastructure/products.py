"""Concrete products shared by the static and registry-backed factories."""

from typing import ClassVar


class ProductA:
    label: ClassVar[str] = "A"


class ProductB:
    label: ClassVar[str] = "B"
