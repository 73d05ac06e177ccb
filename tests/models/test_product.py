"""Tests for dropcatalog/models/product.py"""

import pytest

from dropcatalog.models import Catalog, FilterSpec, NormalizedRow, Product, Variant


class TestVariant:
    def test_create_with_defaults(self):
        variant = Variant(sku="A-1")
        assert variant.option1 == ""
        assert variant.option2 == ""
        assert variant.inventory_quantity == 0


class TestProduct:
    def test_default_values(self):
        product = Product(handle="a")
        assert product.images == []
        assert product.variants == []
        assert product.drop is None
        assert product.title == ""

    def test_lists_are_not_shared(self):
        first = Product(handle="a")
        second = Product(handle="b")
        first.images.append("x.jpg")
        assert second.images == []

    def test_raises_on_empty_handle(self):
        with pytest.raises(ValueError, match="handle is required"):
            Product(handle="")


class TestNormalizedRow:
    def test_raises_on_empty_handle(self):
        with pytest.raises(ValueError, match="handle is required"):
            NormalizedRow(handle="")


class TestCatalog:
    def test_get_by_handle(self):
        catalog = Catalog(products=[Product(handle="a"), Product(handle="b")])
        assert catalog.get("b").handle == "b"
        assert catalog.get("missing") is None

    def test_len(self):
        assert len(Catalog()) == 0
        assert len(Catalog(products=[Product(handle="a")])) == 1


class TestFilterSpec:
    def test_defaults_select_everything(self):
        spec = FilterSpec()
        assert spec.drop is None
        assert spec.category is None
        assert spec.color is None

    def test_is_immutable(self):
        spec = FilterSpec(drop="1")
        with pytest.raises(AttributeError):
            spec.drop = "2"
