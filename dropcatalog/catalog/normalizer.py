"""
Row Normalizer

Projects loosely-typed sheet rows onto NormalizedRow:
- handle is required, rows without one are dropped
- image only when non-empty
- variant only when the SKU is non-empty
- inventory quantity from the text column, falling back to the numeric column
- drop number passed through untouched
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Iterable, Iterator, Optional

from ..common.constants import DEFAULT_COLUMNS
from ..common.text_utils import cell_text
from ..models import NormalizedRow, Variant

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value.

    "12" -> 12, " 7 pcs" -> 7, "3.9" -> 3, "" / "abc" / None -> None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    match = _LEADING_INT.match(cell_text(value))
    if not match:
        return None
    return int(match.group(1))


def _parse_number(value: Any) -> Optional[int]:
    """Whole-value numeric parse for the numeric quantity column."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return int(number) if math.isfinite(number) else None


def parse_inventory_quantity(qty_text: Any, qty_number: Any) -> int:
    """
    Resolve a variant's inventory quantity.

    The text column wins whenever it parses as an integer (including 0).
    Otherwise the numeric column is used, and 0 when neither is usable.
    """
    quantity = parse_leading_int(qty_text)
    if quantity is not None:
        return quantity

    quantity = _parse_number(qty_number)
    if quantity is not None:
        return quantity

    return 0


def normalize_row(
    raw: Dict[str, Any],
    columns: Optional[Dict[str, str]] = None,
) -> Optional[NormalizedRow]:
    """
    Normalize one sheet row.

    Args:
        raw: Row keyed by column header
        columns: Logical field -> header mapping (defaults to Shopify import headers)

    Returns:
        NormalizedRow, or None if the row has no handle
    """
    cols = columns or DEFAULT_COLUMNS

    def get(field_name: str) -> Any:
        return raw.get(cols[field_name])

    handle = cell_text(get("handle"))
    if not handle.strip():
        logger.warning("Skipping row without %s: %s", cols["handle"], _describe(raw, cols))
        return None

    image = cell_text(get("image"))

    variant = None
    sku = cell_text(get("sku"))
    if sku:
        variant = Variant(
            sku=sku,
            option1=cell_text(get("option1")),
            option2=cell_text(get("option2")),
            inventory_quantity=parse_inventory_quantity(
                get("inventory_qty_text"), get("inventory_qty_number")
            ),
        )

    return NormalizedRow(
        handle=handle,
        title=cell_text(get("title")),
        body_html=cell_text(get("body_html")),
        product_type=cell_text(get("product_type")),
        tags=cell_text(get("tags")),
        price=cell_text(get("price")),
        image=image or None,
        variant=variant,
        drop=get("drop"),
    )


class RowNormalizer:
    """
    Normalizes a sequence of sheet rows, counting the ones it drops.

    Usage:
        normalizer = RowNormalizer()
        rows = list(normalizer.normalize(raw_rows))
        print(normalizer.skipped)
    """

    def __init__(self, columns: Optional[Dict[str, str]] = None):
        self.columns = columns or DEFAULT_COLUMNS
        self.skipped = 0

    def normalize(self, raws: Iterable[Dict[str, Any]]) -> Iterator[NormalizedRow]:
        for raw in raws:
            row = normalize_row(raw, self.columns)
            if row is None:
                self.skipped += 1
                continue
            yield row


def normalize_rows(
    raws: Iterable[Dict[str, Any]],
    columns: Optional[Dict[str, str]] = None,
) -> Iterator[NormalizedRow]:
    """Yield normalized rows, skipping malformed ones."""
    return RowNormalizer(columns).normalize(raws)


def _describe(raw: Dict[str, Any], cols: Dict[str, str]) -> str:
    """Short identification of a row for diagnostics."""
    parts = []
    for field_name in ("title", "sku", "image"):
        value = raw.get(cols[field_name])
        if value:
            parts.append(f"{cols[field_name]}={str(value)[:60]!r}")
    return ", ".join(parts) or "(empty row)"
