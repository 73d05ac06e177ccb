"""
Catalog Aggregator

Folds normalized rows into unique products (keyed by handle) and derives
the drop index from the result.

Grouping rules:
- the first row for a handle fixes title, body, type, tags, price and drop
- image references are appended once each, in first-seen order
- every row with variant data appends a variant (no SKU dedup)

Drop index:
- products with a None or "" drop are counted as unsorted
- everything else is counted under the drop's string form
- drops are ordered by their leading integer; keys without one go last
"""

from __future__ import annotations

import logging
from collections import Counter
from functools import reduce
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..common.text_utils import cell_text
from ..models import Catalog, DropGroup, NormalizedRow, Product
from .normalizer import RowNormalizer, parse_leading_int

logger = logging.getLogger(__name__)


def is_unsorted(drop: Any) -> bool:
    """True when a product has no drop assigned."""
    return drop is None or drop == ""


def drop_key(drop: Any) -> str:
    """String form of a drop number, used for grouping and filtering."""
    return cell_text(drop)


def drop_sort_key(key: str) -> Tuple[int, int, str]:
    """
    Sort key for drop keys.

    Numeric keys first, ascending by leading integer; non-numeric keys after
    them. Ties fall back to plain string order.
    """
    number = parse_leading_int(key)
    if number is None:
        return (1, 0, key)
    return (0, number, key)


class CatalogAccumulator:
    """
    Accumulator for a single reduction pass over normalized rows.

    Products are kept in a dict keyed by handle; dict insertion order gives
    the first-occurrence order used for rendering.
    """

    def __init__(self):
        self.products: Dict[str, Product] = {}
        self.rows_seen = 0

    def add(self, row: NormalizedRow) -> CatalogAccumulator:
        self.rows_seen += 1

        product = self.products.get(row.handle)
        if product is None:
            product = Product(
                handle=row.handle,
                title=row.title,
                body_html=row.body_html,
                product_type=row.product_type,
                tags=row.tags,
                price=row.price,
                drop=row.drop,
            )
            self.products[row.handle] = product

        if row.image and row.image not in product.images:
            product.images.append(row.image)

        if row.variant is not None:
            product.variants.append(row.variant)

        return self

    def drop_index(self) -> Tuple[List[DropGroup], int]:
        """Count products per drop; returns (sorted drop groups, unsorted count)."""
        counts: Counter = Counter()
        unsorted_count = 0

        for product in self.products.values():
            if is_unsorted(product.drop):
                unsorted_count += 1
            else:
                counts[drop_key(product.drop)] += 1

        drops = [DropGroup(drop=key, count=count) for key, count in counts.items()]
        drops.sort(key=lambda group: drop_sort_key(group.drop))
        return drops, unsorted_count

    def build(self, skipped_rows: int = 0) -> Catalog:
        drops, unsorted_count = self.drop_index()
        return Catalog(
            products=list(self.products.values()),
            drops=drops,
            unsorted_count=unsorted_count,
            skipped_rows=skipped_rows,
        )


def aggregate(rows: Iterable[NormalizedRow], skipped_rows: int = 0) -> Catalog:
    """
    Aggregate normalized rows into a catalog.

    Args:
        rows: Normalized rows in sheet order
        skipped_rows: Malformed rows already dropped upstream (reported on the catalog)

    Returns:
        Catalog with products in first-occurrence order and the drop index
    """
    accumulator = reduce(lambda acc, row: acc.add(row), rows, CatalogAccumulator())
    catalog = accumulator.build(skipped_rows=skipped_rows)

    logger.info(
        "Aggregated %d products from %d rows (%d drops, %d unsorted)",
        len(catalog.products), accumulator.rows_seen,
        len(catalog.drops), catalog.unsorted_count,
    )
    return catalog


def build_catalog(
    raw_rows: Iterable[Dict[str, Any]],
    columns: Optional[Dict[str, str]] = None,
) -> Catalog:
    """
    Normalize and aggregate raw sheet rows in one pass.

    Args:
        raw_rows: Rows keyed by column header, in sheet order
        columns: Logical field -> header mapping (defaults to Shopify import headers)

    Returns:
        Catalog (empty for empty input)
    """
    normalizer = RowNormalizer(columns)
    catalog = aggregate(normalizer.normalize(raw_rows))
    catalog.skipped_rows = normalizer.skipped

    if normalizer.skipped:
        logger.warning("Skipped %d rows without a handle", normalizer.skipped)

    return catalog
