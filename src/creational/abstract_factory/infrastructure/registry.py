"""AbstractFactory registry: maps a family tag to the factory that builds it."""

from collections.abc import Callable

from creational.abstract_factory.domain.factory import AbstractFactory
from creational.abstract_factory.domain.observer import AbstractFactoryObserver
from creational.abstract_factory.infrastructure.errors import FamilyNotSupportedError
from creational.abstract_factory.infrastructure.factory import (
    ProductAB1Factory,
    ProductAB2Factory,
)

_FACTORIES: dict[str, Callable[[], AbstractFactory]] = {
    ProductAB1Factory.family: ProductAB1Factory,
    ProductAB2Factory.family: ProductAB2Factory,
}


def supported_families() -> list[str]:
    """Return the family tags that create_abstract_factory accepts, sorted."""
    return sorted(_FACTORIES)


def create_abstract_factory(
    family: str, observer: AbstractFactoryObserver
) -> AbstractFactory:
    """Return a new AbstractFactory for the given family tag.

    Raises:
        FamilyNotSupportedError: if family is not a known family tag.
    """
    try:
        constructor = _FACTORIES[family]
    except KeyError:
        raise FamilyNotSupportedError(family=family) from None

    factory = constructor()
    observer.factory_selected(family=family, factory=type(factory).__name__)
    return factory
