"""
==============================================================================
Catalog Presenter Module
==============================================================================

Translates filter/pagination output into the view models a UI renders.

A failure while building one card is logged and replaced by a placeholder
card; it never prevents the rest of the page from rendering.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from storefront.catalog import Product, ProductCatalog
from storefront.schemas.browse import (
    CatalogView,
    FacetOption,
    Facets,
    PriceOption,
    ProductCard,
    QuerySnapshot,
)

from .pagination import PageWindow
from .price_ranges import PRICE_RANGES, PriceRange
from .query import QueryState


# Module logger
logger = logging.getLogger(__name__)

PriceFormatter = Callable[[float], str]

ALL_CATEGORIES_LABEL = "All"
ALL_BRANDS_LABEL = "All Brands"


def format_currency(amount: float, symbol: str = "¥") -> str:
    """Default price formatter: symbol, thousands separators, no decimals."""
    return f"{symbol}{amount:,.0f}"


def result_label(total: int) -> str:
    """'1 product' / 'N products'."""
    return f"{total} product{'' if total == 1 else 's'}"


def filter_brand_options(brands: Sequence[str], text: str) -> List[str]:
    """Brands containing ``text`` case-insensitively, as the dropdown's search box shows them."""
    needle = text.strip().lower()
    if not needle:
        return list(brands)
    return [brand for brand in brands if needle in brand.lower()]


class CatalogPresenter:
    """
    Builds CatalogView objects for one catalog.

    Attributes:
        _catalog: Catalog supplying facet lists
        _format_price: External price formatter
        _image_placeholder: Image used when a product image is missing or broken
        _ranges: Price bracket list for the price pills

    Example:
        >>> presenter = CatalogPresenter(catalog)
        >>> view = presenter.render(query, window, page_size=48)
        >>> view.result_label
        '3 products'
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        format_price: Optional[PriceFormatter] = None,
        image_placeholder: str = "",
        ranges: Sequence[PriceRange] = PRICE_RANGES,
    ) -> None:
        self._catalog = catalog
        self._format_price = format_price or format_currency
        self._image_placeholder = image_placeholder
        self._ranges = ranges

    # =========================================================================
    # CARDS
    # =========================================================================

    def price_text(self, product: Product) -> str:
        formatted = self._format_price(product.price)
        return f"from {formatted}" if product.price_max else formatted

    @staticmethod
    def tag(product: Product) -> str:
        count = product.variant_count
        if count is not None:
            return f"{count} options"
        return product.category

    def card(self, product: Product) -> ProductCard:
        """Build the card for one product."""
        return ProductCard(
            name=product.name,
            brand=product.brand,
            url=product.url,
            image=product.image or self._image_placeholder,
            image_fallback=self._image_placeholder,
            price_text=self.price_text(product),
            tag=self.tag(product),
        )

    def placeholder_card(self, product: Product) -> ProductCard:
        """Minimal card for a product whose regular card failed to build."""
        return ProductCard(
            name=product.name,
            brand=product.brand,
            url=product.url,
            image=self._image_placeholder,
            image_fallback=self._image_placeholder,
            price_text=str(product.price),
            tag=product.category,
        )

    def cards(self, products: Sequence[Product]) -> List[ProductCard]:
        cards = []
        for product in products:
            try:
                cards.append(self.card(product))
            except (ValueError, TypeError) as e:
                logger.warning(f"⚠️ Could not render '{product.name}': {e}")
                cards.append(self.placeholder_card(product))
        return cards

    # =========================================================================
    # FACETS
    # =========================================================================

    def category_options(self, active: Optional[str]) -> List[FacetOption]:
        options = [FacetOption(label=ALL_CATEGORIES_LABEL, active=active is None)]
        options.extend(
            FacetOption(label=category, value=category, active=category == active)
            for category in self._catalog.categories
        )
        return options

    def brand_options(self, active: Optional[str], text: str = "") -> List[FacetOption]:
        options = [FacetOption(label=ALL_BRANDS_LABEL, active=active is None)]
        options.extend(
            FacetOption(label=brand, value=brand, active=brand == active)
            for brand in filter_brand_options(self._catalog.brands, text)
        )
        return options

    def price_options(self, active: int) -> List[PriceOption]:
        return [
            PriceOption(label=price_range.label, index=index, active=index == active)
            for index, price_range in enumerate(self._ranges)
        ]

    def facets(self, query: QueryState) -> Facets:
        return Facets(
            categories=self.category_options(query.category),
            brands=self.brand_options(query.brand),
            price_ranges=self.price_options(query.price_range_index),
        )

    # =========================================================================
    # PAGE
    # =========================================================================

    def render(self, query: QueryState, window: PageWindow, page_size: int) -> CatalogView:
        """Render the visible window plus count, signals and facets."""
        return CatalogView(
            total=window.total,
            result_label=result_label(window.total),
            is_empty=window.total == 0,
            has_more=window.has_more,
            page=query.page,
            page_size=page_size,
            query=QuerySnapshot(
                search=query.search,
                category=query.category,
                brand=query.brand,
                price_range_index=query.price_range_index,
                sort=query.sort.value,
                page=query.page,
            ),
            products=self.cards(window.items),
            facets=self.facets(query),
        )
