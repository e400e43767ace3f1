"""Tests for ProductRegistry registration and lookup."""

import functools

import pytest

from creational.factory_method.domain.product import Product
from creational.factory_method.infrastructure.errors import (
    DuplicateRegistrationError,
    InstantiationError,
    InvalidRegistrationError,
)
from creational.factory_method.infrastructure.products import ProductA, ProductB
from creational.factory_method.infrastructure.registry import (
    ProductRegistry,
    default_registry,
    describe,
)


def make_widget() -> Product:
    return ProductA()


class TestRegister:
    def test_default_name_is_constructor_name(self) -> None:
        registry = ProductRegistry()

        registry.register(ProductA)

        assert registry.names() == ["ProductA"]

    def test_explicit_name_is_used_for_plain_callables(self) -> None:
        registry = ProductRegistry()

        registry.register(make_widget, name="widget")

        assert "widget" in registry
        assert "make_widget" not in registry

    def test_class_under_its_own_name_is_accepted(self) -> None:
        registry = ProductRegistry()

        registry.register(ProductA, name="ProductA")

        assert registry.resolve("ProductA") is ProductA

    def test_class_under_another_name_raises_invalid_registration_error(
        self,
    ) -> None:
        registry = ProductRegistry()

        with pytest.raises(InvalidRegistrationError) as exc_info:
            registry.register(ProductA, name="ProductB")

        assert str(exc_info.value).startswith("Failed to ")
        assert "ProductB" in str(exc_info.value)
        assert "ProductB" not in registry

    def test_unnamed_callable_without_name_raises_invalid_registration_error(
        self,
    ) -> None:
        registry = ProductRegistry()
        constructor = functools.partial(ProductA)

        with pytest.raises(InvalidRegistrationError) as exc_info:
            registry.register(constructor)

        assert exc_info.value.name is None
        assert registry.names() == []

    def test_unnamed_callable_with_explicit_name_is_accepted(self) -> None:
        registry = ProductRegistry()

        registry.register(functools.partial(ProductA), name="partial-a")

        assert registry.names() == ["partial-a"]

    def test_duplicate_name_raises_duplicate_registration_error(self) -> None:
        registry = ProductRegistry()
        registry.register(ProductA)

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register(make_widget, name="ProductA")

        assert str(exc_info.value).startswith("Failed to ")
        assert "ProductA" in str(exc_info.value)

    def test_duplicate_registration_keeps_original_constructor(self) -> None:
        registry = ProductRegistry()
        registry.register(ProductA)

        with pytest.raises(DuplicateRegistrationError):
            registry.register(make_widget, name="ProductA")

        assert registry.resolve("ProductA") is ProductA


class TestResolve:
    def test_resolves_registered_name(self) -> None:
        assert default_registry().resolve("ProductB") is ProductB

    def test_resolves_registered_class_by_identity(self) -> None:
        assert default_registry().resolve(ProductA) is ProductA

    def test_unknown_name_raises_instantiation_error(self) -> None:
        with pytest.raises(InstantiationError) as exc_info:
            default_registry().resolve("NoSuchType")

        assert exc_info.value.descriptor == "NoSuchType"

    def test_unregistered_class_raises_instantiation_error(self) -> None:
        registry = ProductRegistry()
        registry.register(ProductA)

        with pytest.raises(InstantiationError) as exc_info:
            registry.resolve(ProductB)

        assert "ProductB" in exc_info.value.descriptor

    @pytest.mark.parametrize("descriptor", [["ProductA"], None, 42])
    def test_unsupported_descriptor_raises_instantiation_error(
        self, descriptor: object
    ) -> None:
        with pytest.raises(InstantiationError) as exc_info:
            default_registry().resolve(descriptor)  # type: ignore[arg-type]

        assert exc_info.value.descriptor == repr(descriptor)
        assert exc_info.value.reason == "unsupported descriptor"


class TestContains:
    def test_contains_registered_class(self) -> None:
        assert ProductA in default_registry()

    def test_does_not_contain_unregistered_class(self) -> None:
        assert Product not in default_registry()

    def test_does_not_contain_unhashable_descriptor(self) -> None:
        assert ["ProductA"] not in default_registry()


class TestDefaultRegistry:
    def test_holds_built_in_products(self) -> None:
        assert default_registry().names() == ["ProductA", "ProductB"]

    def test_returns_independent_registries(self) -> None:
        first = default_registry()
        second = default_registry()

        first.register(make_widget, name="extra")

        assert "extra" not in second


class TestDescribe:
    def test_string_descriptor_is_unchanged(self) -> None:
        assert describe("ProductA") == "ProductA"

    def test_class_descriptor_is_fully_qualified(self) -> None:
        assert (
            describe(ProductA)
            == "creational.factory_method.infrastructure.products.ProductA"
        )
