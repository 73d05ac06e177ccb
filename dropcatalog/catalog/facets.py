"""
Facet Filter

Applies drop / category / color selections to the product list and computes
the count shown next to every facet option.

A facet option's count is the number of products matching all the *other*
active selections plus that option. Options are collected from the whole
catalog so they stay listed (with a 0 count) as the selection narrows.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..common.constants import UNSORTED
from ..models import FacetResult, FilterSpec, Product
from .aggregator import drop_key, drop_sort_key, is_unsorted


def _active(value: Optional[str]) -> bool:
    return value is not None and value != ""


def matches_drop(product: Product, drop: Optional[str]) -> bool:
    if not _active(drop):
        return True
    if drop == UNSORTED:
        return is_unsorted(product.drop)
    return not is_unsorted(product.drop) and drop_key(product.drop) == drop


def matches_category(product: Product, category: Optional[str]) -> bool:
    if not _active(category):
        return True
    return product.product_type == category


def matches_color(product: Product, color: Optional[str]) -> bool:
    if not _active(color):
        return True
    return any(variant.option2 == color for variant in product.variants)


def matches(product: Product, spec: FilterSpec) -> bool:
    """True when the product satisfies every active selection."""
    return (
        matches_drop(product, spec.drop)
        and matches_category(product, spec.category)
        and matches_color(product, spec.color)
    )


def _unique(values: Iterable[str]) -> List[str]:
    seen = {}
    for value in values:
        if value and value not in seen:
            seen[value] = None
    return list(seen)


def drop_candidates(products: Sequence[Product]) -> List[str]:
    """Drop keys in drop-index order, followed by "unsorted"."""
    keys = _unique(drop_key(p.drop) for p in products if not is_unsorted(p.drop))
    return sorted(keys, key=drop_sort_key) + [UNSORTED]


def category_candidates(products: Sequence[Product]) -> List[str]:
    """Distinct non-empty categories, first occurrence first."""
    return _unique(p.product_type for p in products)


def color_candidates(products: Sequence[Product]) -> List[str]:
    """Distinct non-empty variant colors, first occurrence first."""
    return _unique(v.option2 for p in products for v in p.variants)


def _facet_counts(
    products: Sequence[Product],
    spec: FilterSpec,
    facet: str,
    candidates: List[str],
    predicate: Callable[[Product, Optional[str]], bool],
) -> Dict[str, int]:
    # Drop this facet's own selection; keep the others
    others = replace(spec, **{facet: None})
    base = [p for p in products if matches(p, others)]
    return {value: sum(1 for p in base if predicate(p, value)) for value in candidates}


def filter_products(products: Sequence[Product], spec: Optional[FilterSpec] = None) -> FacetResult:
    """
    Filter products and compute facet counts.

    Args:
        products: Full catalog product list (unfiltered)
        spec: Active selections; None selects everything

    Returns:
        FacetResult with the filtered products (catalog order) and the
        drop, category and color count tables
    """
    spec = spec or FilterSpec()

    return FacetResult(
        products=[p for p in products if matches(p, spec)],
        drop_counts=_facet_counts(
            products, spec, 'drop', drop_candidates(products), matches_drop
        ),
        category_counts=_facet_counts(
            products, spec, 'category', category_candidates(products), matches_category
        ),
        color_counts=_facet_counts(
            products, spec, 'color', color_candidates(products), matches_color
        ),
    )
