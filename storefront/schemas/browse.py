"""
==============================================================================
Browse Schemas Module
==============================================================================

Everything a UI layer needs to draw the catalog page: product cards, result
count, empty/has-more signals and facet options with their active state.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProductCard(BaseModel):
    """One product card."""
    name: str
    brand: str
    url: str
    image: str = Field(description="Image URL; the placeholder when the product has none")
    image_fallback: str = Field(description="Image to show if the image URL fails to load")
    price_text: str = Field(description="Formatted price, 'from '-prefixed for starting prices")
    tag: str = Field(description="Variant count ('3 options') or the category name")


class FacetOption(BaseModel):
    """A category pill or brand dropdown entry. ``value`` None is the 'All' sentinel."""
    label: str
    value: Optional[str] = None
    active: bool = False


class PriceOption(BaseModel):
    """A price bracket pill."""
    label: str
    index: int = Field(ge=0)
    active: bool = False


class Facets(BaseModel):
    """Filter option lists for pills and the brand dropdown."""
    categories: List[FacetOption]
    brands: List[FacetOption]
    price_ranges: List[PriceOption]


class QuerySnapshot(BaseModel):
    """Query selections a view was rendered for."""
    search: str
    category: Optional[str] = None
    brand: Optional[str] = None
    price_range_index: int
    sort: str
    page: int


class CatalogView(BaseModel):
    """Rendered catalog page."""
    success: bool = Field(default=True)
    total: int = Field(ge=0, description="Filtered result count before paging")
    result_label: str
    is_empty: bool
    has_more: bool
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    query: QuerySnapshot
    products: List[ProductCard]
    facets: Facets
