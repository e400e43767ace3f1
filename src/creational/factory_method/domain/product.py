"""Product Protocol: the capability every factory method returns."""

from typing import ClassVar, Protocol


class Product(Protocol):
    """A product built by a factory method. `label` names the concrete product."""

    label: ClassVar[str]
