"""
Catalog engine.

Modules:
    normalizer - Sheet row -> NormalizedRow projection
    aggregator - Product grouping and drop index
    facets     - Drop / category / color filtering with facet counts
    size_match - Size-match view with generated size-chart galleries
"""

from .aggregator import (
    CatalogAccumulator,
    aggregate,
    build_catalog,
    drop_key,
    is_unsorted,
)
from .facets import filter_products, matches
from .normalizer import (
    RowNormalizer,
    normalize_row,
    normalize_rows,
    parse_inventory_quantity,
)
from .size_match import build_size_match, generate_image_urls

__all__ = [
    # Normalizer
    'RowNormalizer',
    'normalize_row',
    'normalize_rows',
    'parse_inventory_quantity',
    # Aggregator
    'CatalogAccumulator',
    'aggregate',
    'build_catalog',
    'drop_key',
    'is_unsorted',
    # Facets
    'filter_products',
    'matches',
    # Size match
    'build_size_match',
    'generate_image_urls',
]
