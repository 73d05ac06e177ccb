"""Tests for dropcatalog/catalog/normalizer.py"""

import logging

import pytest

from dropcatalog.catalog.normalizer import (
    RowNormalizer,
    normalize_row,
    normalize_rows,
    parse_inventory_quantity,
    parse_leading_int,
)


class TestParseLeadingInt:
    @pytest.mark.parametrize("value,expected", [
        ("12", 12),
        (" 7 pcs", 7),
        ("3.9", 3),
        ("-2", -2),
        ("0", 0),
        (5, 5),
        (4.0, 4),
    ])
    def test_parses(self, value, expected):
        assert parse_leading_int(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "  ", float("nan"), True])
    def test_not_a_number(self, value):
        assert parse_leading_int(value) is None


class TestParseInventoryQuantity:
    def test_text_takes_precedence(self):
        assert parse_inventory_quantity("12", 99) == 12

    def test_unparseable_text_falls_back_to_number(self):
        assert parse_inventory_quantity("", 99) == 99

    def test_both_absent_is_zero(self):
        assert parse_inventory_quantity(None, None) == 0

    def test_absent_text_falls_back_to_number(self):
        assert parse_inventory_quantity(None, 5) == 5

    def test_zero_text_is_authoritative(self):
        assert parse_inventory_quantity("0", 99) == 0

    def test_numeric_string_in_number_column(self):
        assert parse_inventory_quantity(None, "8") == 8

    def test_float_number_is_truncated(self):
        assert parse_inventory_quantity("n/a", 3.7) == 3

    def test_non_numeric_number_column_is_zero(self):
        assert parse_inventory_quantity("n/a", "lots") == 0


class TestNormalizeRow:
    def test_full_row(self, row_factory):
        row = normalize_row(row_factory(
            "tee-01", title="Tee", body="<p>Soft</p>", type="T-Shirt", tags="a, b",
            img="tee.jpg", sku="T-M", opt1="M", opt2="Black", qty_text="3",
            price="20", drop="2",
        ))
        assert row.handle == "tee-01"
        assert row.title == "Tee"
        assert row.body_html == "<p>Soft</p>"
        assert row.product_type == "T-Shirt"
        assert row.tags == "a, b"
        assert row.price == "20"
        assert row.image == "tee.jpg"
        assert row.variant.sku == "T-M"
        assert row.variant.option1 == "M"
        assert row.variant.option2 == "Black"
        assert row.variant.inventory_quantity == 3
        assert row.drop == "2"

    def test_missing_handle_is_skipped(self, row_factory):
        assert normalize_row(row_factory(None, title="Orphan")) is None
        assert normalize_row(row_factory("", title="Orphan")) is None
        assert normalize_row(row_factory("   ", title="Orphan")) is None
        assert normalize_row({"Title": "No handle column"}) is None

    def test_missing_handle_is_logged(self, row_factory, caplog):
        with caplog.at_level(logging.WARNING, logger="dropcatalog"):
            normalize_row(row_factory(None, title="Orphan"))
        assert "Skipping row without Handle" in caplog.text
        assert "Orphan" in caplog.text

    def test_empty_image_is_excluded(self, row_factory):
        assert normalize_row(row_factory("a", img="")).image is None
        assert normalize_row(row_factory("a")).image is None

    def test_variant_requires_sku(self, row_factory):
        assert normalize_row(row_factory("a", sku="", opt1="M")).variant is None
        assert normalize_row(row_factory("a", opt1="M")).variant is None

    def test_options_default_to_empty(self, row_factory):
        variant = normalize_row(row_factory("a", sku="A-1")).variant
        assert variant.option1 == ""
        assert variant.option2 == ""
        assert variant.inventory_quantity == 0

    @pytest.mark.parametrize("drop", [None, "", "3", 3, 2.5])
    def test_drop_is_passed_through(self, row_factory, drop):
        assert normalize_row(row_factory("a", drop=drop)).drop == drop

    def test_handle_kept_untrimmed(self, row_factory):
        assert normalize_row(row_factory(" A ")).handle == " A "

    def test_numeric_handle_becomes_text(self, row_factory):
        assert normalize_row(row_factory(42)).handle == "42"

    def test_custom_columns(self):
        columns = {
            "handle": "id", "title": "name", "body_html": "body", "product_type": "kind",
            "tags": "labels", "image": "picture", "sku": "sku", "option1": "size",
            "option2": "colour", "inventory_qty_text": "qty", "inventory_qty_number": "qty_n",
            "price": "price", "drop": "release",
        }
        row = normalize_row(
            {"id": "x", "name": "X", "picture": "x.jpg", "sku": "X-1", "colour": "Red", "release": "4"},
            columns,
        )
        assert row.handle == "x"
        assert row.image == "x.jpg"
        assert row.variant.option2 == "Red"
        assert row.drop == "4"


class TestRowNormalizer:
    def test_counts_skipped_rows(self, sheet_rows):
        normalizer = RowNormalizer()
        rows = list(normalizer.normalize(sheet_rows))
        assert len(rows) == 5
        assert normalizer.skipped == 1

    def test_preserves_order(self, sheet_rows):
        handles = [row.handle for row in normalize_rows(sheet_rows)]
        assert handles == [
            "levis-501-0001", "levis-501-0001", "nike-tee-0002",
            "carhartt-jacket-0003", "nike-tee-0004",
        ]
