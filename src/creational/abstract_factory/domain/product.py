"""ProductA and ProductB Protocols: the two capabilities every family provides."""

from typing import ClassVar, Protocol


class ProductA(Protocol):
    """First product of a family. `family` tags which family it belongs to."""

    family: ClassVar[str]


class ProductB(Protocol):
    """Second product of a family. `family` tags which family it belongs to."""

    family: ClassVar[str]
