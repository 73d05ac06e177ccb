"""
Text Utilities

Helper functions for turning sheet cells and product fields into display text.
"""

import math
import re
from typing import Any, List

from bs4 import BeautifulSoup


def cell_text(value: Any) -> str:
    """
    Render a sheet cell as text.

    None becomes "", integral floats drop their fraction (1.0 -> "1").
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def split_tags(tags: str) -> List[str]:
    """
    Split a comma-separated tag string.

    Args:
        tags: Tags cell, e.g. "denim, vintage,90s"

    Returns:
        Trimmed, non-empty tags in original order
    """
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(',') if tag.strip()]


def short_id(handle: str) -> str:
    """Last dash-separated segment of a handle ("levis-501-0042" -> "0042")."""
    return handle.rsplit('-', 1)[-1]


def html_to_text(markup: str) -> str:
    """
    Strip Body (HTML) down to plain text.

    Block elements are separated by spaces and whitespace runs are collapsed.
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, 'html.parser')
    text = soup.get_text(separator=' ')
    return re.sub(r'\s+', ' ', text).strip()
