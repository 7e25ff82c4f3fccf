"""
==============================================================================
Filter Engine Module
==============================================================================

Pure mapping of (catalog, query) to the ordered sequence of matching products.

Pipeline:
---------
1. Category  - exact, case-sensitive match
2. Brand     - exact, case-sensitive match
3. Price     - half-open bracket [min, max), skipped for the "All" bracket
4. Search    - lower-cased substring of name, brand, category or any material
5. Sort      - stable; price ascending/descending, or brand then name

The cheap exact-match predicates run before the substring search. The set
of survivors does not depend on that order.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

from storefront.catalog import Product, ProductCatalog, collation_key

from .price_ranges import PRICE_RANGES, PriceRange, resolve_price_range
from .query import QueryState, SortOrder


# Module logger
logger = logging.getLogger(__name__)

Predicate = Callable[[Product], bool]


# =============================================================================
# PREDICATES
# =============================================================================

def matches_search(product: Product, needle: str) -> bool:
    """True if lower-cased ``needle`` occurs in any searchable field."""
    return (
        needle in product.name.lower()
        or needle in product.brand.lower()
        or needle in product.category.lower()
        or any(needle in material.lower() for material in product.material)
    )


def build_predicates(
    query: QueryState,
    ranges: Sequence[PriceRange] = PRICE_RANGES,
) -> List[Predicate]:
    """Predicates for every active constraint in ``query``, cheapest first."""
    predicates: List[Predicate] = []

    if query.category is not None:
        category = query.category
        predicates.append(lambda p: p.category == category)

    if query.brand is not None:
        brand = query.brand
        predicates.append(lambda p: p.brand == brand)

    price_range = resolve_price_range(query.price_range_index, ranges)
    if price_range is not None:
        predicates.append(lambda p: price_range.contains(p.price))

    if query.search:
        needle = query.search.lower()
        predicates.append(lambda p: matches_search(p, needle))

    return predicates


# =============================================================================
# SORTING
# =============================================================================

def _brand_name_key(product: Product) -> Tuple:
    return collation_key(product.brand), collation_key(product.name)


def sort_products(products: List[Product], sort: SortOrder) -> List[Product]:
    """Return ``products`` ordered by ``sort``. Ties keep their input order."""
    if sort == SortOrder.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort == SortOrder.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    return sorted(products, key=_brand_name_key)


# =============================================================================
# ENGINE
# =============================================================================

def filter_products(
    catalog: ProductCatalog,
    query: QueryState,
    ranges: Sequence[PriceRange] = PRICE_RANGES,
) -> List[Product]:
    """
    Derive the full filtered, sorted result set from scratch.

    Does not read ``query.page`` and never mutates ``query`` or ``catalog``.

    Args:
        catalog: Loaded product catalog
        query: Current selections
        ranges: Price bracket list ``query.price_range_index`` refers to

    Returns:
        Matching products in display order

    Raises:
        AppException: INVALID_PRICE_RANGE for an unknown bracket index
    """
    predicates = build_predicates(query, ranges)
    results = [
        product for product in catalog.products
        if all(predicate(product) for predicate in predicates)
    ]
    return sort_products(results, query.sort)


class FilterEngine:
    """
    Filter engine bound to one catalog, memoizing the latest result.

    Paging through results does not change the filter key, so "load more"
    reuses the previous result instead of filtering again.

    Example:
        >>> engine = FilterEngine(catalog)
        >>> products = engine.filter(QueryState(category="Shoes"))
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        ranges: Sequence[PriceRange] = PRICE_RANGES,
    ) -> None:
        self._catalog = catalog
        self._ranges = ranges
        self._last_key: Optional[Tuple[Hashable, ...]] = None
        self._last_result: List[Product] = []

    def filter(self, query: QueryState) -> List[Product]:
        key = query.filter_key()
        if key != self._last_key:
            self._last_result = filter_products(self._catalog, query, self._ranges)
            self._last_key = key
            logger.debug(f"Filtered {len(self._last_result)} of {len(self._catalog)} products")
        return list(self._last_result)
