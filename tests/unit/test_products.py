"""Tests for the simple product factory."""

from __future__ import annotations

import pytest

from blueprints.application import LookupPolicy, create_product, product_registry
from blueprints.contracts import Product
from blueprints.domain.exceptions import UnknownKeyError
from blueprints.domain.products import Product1, Product2, RefusalProduct


class TestCreateProduct:
    """Tests for create_product with the default lenient registry."""

    def test_p1_and_p2_behave_differently(self) -> None:
        p1 = create_product("p1")
        p2 = create_product("p2")

        assert isinstance(p1, Product1)
        assert isinstance(p2, Product2)
        assert p1.operation1() != p2.operation1()
        assert p1.operation2() != p2.operation2()

    @pytest.mark.parametrize("key", ["unknown", "", "p3"])
    def test_unknown_key_returns_refusal_product(self, key: str) -> None:
        product = create_product(key)

        assert isinstance(product, RefusalProduct)
        assert product.operation1() == "Sorry, operation1 is not permitted!"
        assert product.operation2() == "Sorry, operation2 is not permitted!"

    @pytest.mark.parametrize("key", ["p1", "p2", "other"])
    def test_every_product_satisfies_protocol(self, key: str) -> None:
        assert isinstance(create_product(key), Product)

    def test_products_are_deterministic(self) -> None:
        product = create_product("p1")
        assert product.operation1() == product.operation1()


class TestStrictProductRegistry:
    """Tests for the product registry in strict mode."""

    def test_strict_registry_raises_for_unknown_key(self) -> None:
        registry = product_registry(LookupPolicy.STRICT)

        with pytest.raises(UnknownKeyError):
            create_product("unknown", registry)

    def test_strict_registry_still_creates_known_products(self) -> None:
        registry = product_registry(LookupPolicy.STRICT)
        assert isinstance(create_product("p2", registry), Product2)
