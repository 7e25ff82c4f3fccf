"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas using Pydantic for validation.

This package provides:
- Browse: Catalog page view, product cards and facet options

==============================================================================
"""

from .browse import (
    CatalogView,
    FacetOption,
    Facets,
    PriceOption,
    ProductCard,
    QuerySnapshot,
)

__all__ = [
    "CatalogView",
    "FacetOption",
    "Facets",
    "PriceOption",
    "ProductCard",
    "QuerySnapshot",
]
