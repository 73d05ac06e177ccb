"""
Data models for the drop catalog.

This module contains pure data classes with no business logic.
"""

from .product import (
    Catalog,
    DropGroup,
    FacetResult,
    FilterSpec,
    NormalizedRow,
    Product,
    SizeMatchEntry,
    Variant,
)

__all__ = [
    'Variant',
    'NormalizedRow',
    'Product',
    'DropGroup',
    'Catalog',
    'FilterSpec',
    'FacetResult',
    'SizeMatchEntry',
]
