"""ProductRegistry: maps product descriptors to zero-argument constructors."""

from collections.abc import Callable

from creational.factory_method.domain.factory import Descriptor
from creational.factory_method.domain.product import Product
from creational.factory_method.infrastructure.errors import (
    DuplicateRegistrationError,
    InstantiationError,
    InvalidRegistrationError,
)
from creational.factory_method.infrastructure.products import ProductA, ProductB

type ProductConstructor = Callable[[], Product]


def describe(descriptor: Descriptor) -> str:
    """Render a descriptor for error messages and log events."""
    if isinstance(descriptor, type):
        return f"{descriptor.__module__}.{descriptor.__qualname__}"
    return descriptor


class ProductRegistry:
    """Name-keyed table of product constructors.

    Populate once at startup. After that the registry is only read, so lookups
    from several threads need no locking.
    """

    def __init__(self) -> None:
        self._constructors: dict[str, ProductConstructor] = {}

    def register(
        self, constructor: ProductConstructor, name: str | None = None
    ) -> None:
        """Register constructor under name, defaulting to constructor.__name__.

        A class is only registered under its own __name__, so a name descriptor
        always builds the class it names. Other callables may use any name.

        Raises:
            InvalidRegistrationError: if no name is given and constructor has no
                __name__, or if a class is registered under a different name.
            DuplicateRegistrationError: if name is already registered.
        """
        own_name = getattr(constructor, "__name__", None)
        key = name if name is not None else own_name
        if key is None:
            raise InvalidRegistrationError(
                name=None,
                reason="constructor has no __name__, pass name explicitly",
            )
        if isinstance(constructor, type) and key != own_name:
            raise InvalidRegistrationError(
                name=key,
                reason=f"class {own_name} must be registered as '{own_name}'",
            )
        if key in self._constructors:
            raise DuplicateRegistrationError(name=key)
        self._constructors[key] = constructor

    def names(self) -> list[str]:
        return sorted(self._constructors)

    def __contains__(self, descriptor: object) -> bool:
        if isinstance(descriptor, type):
            return any(c is descriptor for c in self._constructors.values())
        return isinstance(descriptor, str) and descriptor in self._constructors

    def resolve(self, descriptor: Descriptor) -> ProductConstructor:
        """
        Return the constructor for a registered name or a registered class.

        A class descriptor matches by identity.

        Raises:
            InstantiationError: if descriptor is neither a str nor a class, or if
                nothing is registered for it.
        """
        if isinstance(descriptor, type):
            if descriptor in self:
                return descriptor
            raise InstantiationError(
                descriptor=describe(descriptor),
                reason="product type is not registered",
            )

        if not isinstance(descriptor, str):
            raise InstantiationError(
                descriptor=repr(descriptor), reason="unsupported descriptor"
            )

        constructor = self._constructors.get(descriptor)
        if constructor is None:
            raise InstantiationError(
                descriptor=descriptor, reason="unknown product type"
            )
        return constructor


def default_registry() -> ProductRegistry:
    """Return a new registry holding every built-in product."""
    registry = ProductRegistry()
    registry.register(ProductA)
    registry.register(ProductB)
    return registry
