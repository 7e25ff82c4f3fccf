"""
==============================================================================
Browse Package - Filtering, Sorting and Pagination
==============================================================================

Maps the mutable query state onto the visible subset of the catalog.

Modules:
--------
- query: QueryState and SortOrder
- price_ranges: Price bracket list
- engine: Pure filter + sort pipeline
- pagination: Visible window of the filtered result
- debounce: Cancellable delayed execution for typed search
- presenter: View models for the UI layer
- controller: Sequences mutate -> recompute -> render

==============================================================================
"""

from .query import QueryState, SortOrder
from .price_ranges import PRICE_RANGES, PriceRange, resolve_price_range
from .engine import FilterEngine, filter_products
from .pagination import PAGE_SIZE, PageWindow, visible
from .debounce import Debouncer
from .presenter import CatalogPresenter, filter_brand_options, format_currency
from .controller import BrowseController

__all__ = [
    "QueryState",
    "SortOrder",
    "PRICE_RANGES",
    "PriceRange",
    "resolve_price_range",
    "FilterEngine",
    "filter_products",
    "PAGE_SIZE",
    "PageWindow",
    "visible",
    "Debouncer",
    "CatalogPresenter",
    "filter_brand_options",
    "format_currency",
    "BrowseController",
]
