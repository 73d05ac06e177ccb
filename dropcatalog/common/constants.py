"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Filter value selecting products without a drop number
UNSORTED = "unsorted"

# Logical field -> sheet column header (Shopify product import layout)
DEFAULT_COLUMNS = {
    "handle": "Handle",
    "title": "Title",
    "body_html": "Body (HTML)",
    "product_type": "Type",
    "tags": "Tags",
    "image": "Image Src",
    "sku": "Variant SKU",
    "option1": "Option1 Value",
    "option2": "Option2 Value",
    "inventory_qty_text": "Variant Inventory Qty",
    "inventory_qty_number": "Variant Inventory Quantity",
    "price": "Variant Price",
    "drop": "Drop #",
}

# Environment variable holding the Google Sheets API key
API_KEY_ENV_VAR = "GOOGLE_SHEETS_API_KEY"
