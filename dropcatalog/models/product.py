"""
Catalog data models.

Pure data classes for representing sheet rows after normalization and the
catalog built from them. No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

# Drop numbers come out of the sheet as text, but hand-built rows and
# numeric CSV cells can carry ints or floats.
DropValue = Optional[Union[str, int, float]]


@dataclass
class Variant:
    """Purchasable SKU with size/color options."""
    sku: str
    option1: str = ""          # Size
    option2: str = ""          # Color
    inventory_quantity: int = 0


@dataclass
class NormalizedRow:
    """
    Canonical projection of one sheet row.

    Carries the product-level fields (only used when the handle is first seen),
    the optional image reference and the optional variant.
    """
    handle: str
    title: str = ""
    body_html: str = ""
    product_type: str = ""
    tags: str = ""
    price: str = ""
    image: Optional[str] = None
    variant: Optional[Variant] = None
    drop: DropValue = None

    def __post_init__(self):
        if not self.handle:
            raise ValueError("Row handle is required")


@dataclass
class Product:
    """
    Unique product, keyed by handle.

    Scalar fields come from the first row seen for the handle.
    Images are unique and in first-seen order; variants are kept as listed.
    """

    handle: str
    title: str = ""
    body_html: str = ""
    product_type: str = ""     # Category ("Type" column)
    tags: str = ""             # Comma-separated tag string
    price: str = ""
    drop: DropValue = None     # Drop number, None/"" when unsorted

    images: List[str] = field(default_factory=list)
    variants: List[Variant] = field(default_factory=list)

    def __post_init__(self):
        if not self.handle:
            raise ValueError("Product handle is required")


@dataclass
class DropGroup:
    """Drop key and the number of distinct products assigned to it."""
    drop: str
    count: int


@dataclass
class Catalog:
    """Result of one aggregation pass over the sheet."""
    products: List[Product] = field(default_factory=list)
    drops: List[DropGroup] = field(default_factory=list)
    unsorted_count: int = 0
    skipped_rows: int = 0

    def get(self, handle: str) -> Optional[Product]:
        for product in self.products:
            if product.handle == handle:
                return product
        return None

    def __len__(self) -> int:
        return len(self.products)


@dataclass(frozen=True)
class FilterSpec:
    """
    Active filter selections, owned by the caller.

    None (or an empty string) means the facet is not filtered.
    ``drop`` is a drop key or the literal "unsorted".
    """
    drop: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None


@dataclass
class FacetResult:
    """Filtered products plus per-value counts for every facet."""
    products: List[Product] = field(default_factory=list)
    drop_counts: Dict[str, int] = field(default_factory=dict)
    category_counts: Dict[str, int] = field(default_factory=dict)
    color_counts: Dict[str, int] = field(default_factory=dict)


@dataclass
class SizeMatchEntry:
    """Product as shown in the size-match view."""
    handle: str
    title: str = ""
    images: List[str] = field(default_factory=list)
    variants: List[Variant] = field(default_factory=list)
