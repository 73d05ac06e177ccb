"""
Size Match View

Groups rows by handle for the size-match page: each product shows only the
variants that carry a size, and a gallery of size-chart shots generated from
the product's first image (photos are named ...a.jpg, ...b.jpg, ...e.jpg, ...).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..models import NormalizedRow, SizeMatchEntry

BASE_SUFFIX = 'a.jpg'
FIRST_CHART_SUFFIX = 'b.jpg'
FIRST_EXTRA_LETTER = 'e'


def generate_image_urls(base_url: Optional[str], count: int) -> List[str]:
    """
    Build the size-chart gallery for a product.

    Args:
        base_url: First image of the product (ends in "a.jpg")
        count: Number of images wanted (one per sized variant, at least 1)

    Returns:
        [base with b.jpg, base with e.jpg, base with f.jpg, ...]
        or [] when there is no base image
    """
    if not base_url:
        return []

    urls = [base_url.replace(BASE_SUFFIX, FIRST_CHART_SUFFIX)]
    for i in range(1, count):
        letter = chr(ord(FIRST_EXTRA_LETTER) + i - 1)
        urls.append(base_url.replace(BASE_SUFFIX, f"{letter}.jpg"))
    return urls


def build_size_match(rows: Iterable[NormalizedRow]) -> List[SizeMatchEntry]:
    """
    Build size-match entries in first-occurrence order.

    Args:
        rows: Normalized rows in sheet order

    Returns:
        One entry per handle with its sized variants and generated gallery
    """
    entries: Dict[str, SizeMatchEntry] = {}
    base_images: Dict[str, Optional[str]] = {}

    for row in rows:
        entry = entries.get(row.handle)
        if entry is None:
            entry = SizeMatchEntry(handle=row.handle, title=row.title)
            entries[row.handle] = entry
            base_images[row.handle] = row.image

        if row.variant is not None and row.variant.option1:
            entry.variants.append(row.variant)

    for handle, entry in entries.items():
        entry.images = generate_image_urls(base_images[handle], max(1, len(entry.variants)))

    return list(entries.values())
