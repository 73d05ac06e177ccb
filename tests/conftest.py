"""Shared test fixtures."""

import pytest

from dropcatalog.models import Product, Variant


def make_row(handle="A", **fields):
    """Build a raw sheet row using the Shopify import headers."""
    headers = {
        "title": "Title",
        "body": "Body (HTML)",
        "type": "Type",
        "tags": "Tags",
        "img": "Image Src",
        "sku": "Variant SKU",
        "opt1": "Option1 Value",
        "opt2": "Option2 Value",
        "qty_text": "Variant Inventory Qty",
        "qty_number": "Variant Inventory Quantity",
        "price": "Variant Price",
        "drop": "Drop #",
    }
    row = {"Handle": handle}
    for name, value in fields.items():
        row[headers[name]] = value
    return row


@pytest.fixture
def row_factory():
    """Return the raw row builder."""
    return make_row


@pytest.fixture
def scenario_rows():
    """Two rows for product A (same image, two SKUs) and one unsorted product B."""
    return [
        make_row("A", drop="1", img="x.jpg", sku="A-1", opt2="Red"),
        make_row("A", drop="1", img="x.jpg", sku="A-2", opt2="Red"),
        make_row("B", drop="", img="y.jpg", sku="B-1", opt2="Blue"),
    ]


@pytest.fixture
def sheet_rows():
    """A realistic slice of the product import sheet."""
    return [
        make_row("levis-501-0001", title="Levi's 501", body="<p>Classic <b>denim</b></p>",
                 type="Jeans", tags="denim, vintage", img="https://cdn.example.com/0001a.jpg",
                 sku="0001-30", opt1="30", opt2="Blue", qty_text="2", price="45", drop="1"),
        make_row("levis-501-0001", img="https://cdn.example.com/0001b.jpg",
                 sku="0001-32", opt1="32", opt2="Blue", qty_text="1"),
        make_row("nike-tee-0002", title="Nike Tee", type="T-Shirt", tags="sport",
                 img="https://cdn.example.com/0002a.jpg", sku="0002-M", opt1="M",
                 opt2="Black", qty_number=3, price="20", drop="2"),
        make_row("carhartt-jacket-0003", title="Carhartt Jacket", type="Jacket",
                 img="https://cdn.example.com/0003a.jpg", sku="0003-L", opt1="L",
                 opt2="Black", qty_text="1", price="80", drop="1"),
        make_row("nike-tee-0004", title="Nike Tee Red", type="T-Shirt",
                 img="https://cdn.example.com/0004a.jpg", sku="0004-S", opt1="S",
                 opt2="Red", qty_text="4", price="20"),
        make_row(None, title="Orphan row", sku="X-1"),
    ]


@pytest.fixture
def products():
    """Hand-built products across drops, categories and colors."""
    return [
        Product(handle="p1", product_type="Jeans", drop="1",
                variants=[Variant(sku="p1-30", option1="30", option2="Blue")]),
        Product(handle="p2", product_type="T-Shirt", drop="2",
                variants=[Variant(sku="p2-M", option1="M", option2="Black")]),
        Product(handle="p3", product_type="Jacket", drop="1",
                variants=[Variant(sku="p3-L", option1="L", option2="Black")]),
        Product(handle="p4", product_type="T-Shirt", drop=None,
                variants=[Variant(sku="p4-S", option1="S", option2="Red"),
                          Variant(sku="p4-M", option1="M", option2="Black")]),
        Product(handle="p5", product_type="Jeans", drop="",
                variants=[]),
    ]
