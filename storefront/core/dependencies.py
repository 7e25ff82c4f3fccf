"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for catalog access and browse query parsing.

Dependency Hierarchy:
--------------------
    ┌─────────────────┐      ┌─────────────────┐
    │ require_catalog │      │ get_app_settings│
    └────────┬────────┘      └────────┬────────┘
             │                        │
             └───────────┬────────────┘
                         │
                ┌────────▼────────┐
                │  get_presenter  │
                └─────────────────┘

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(
        query: QueryState = Depends(get_browse_query),
        catalog: ProductCatalog = Depends(require_catalog),
    ):
        ...

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Query
from fastapi.requests import HTTPConnection

from storefront.browse import CatalogPresenter, QueryState, SortOrder, format_currency
from storefront.catalog import ProductCatalog, get_catalog
from storefront.config import Settings, get_settings
from storefront.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_app_settings(connection: HTTPConnection) -> Settings:
    """
    Settings the running application was built with.

    Works for both HTTP and WebSocket routes. Falls back to the global
    settings when the app carries none.
    """
    return getattr(connection.app.state, "settings", None) or get_settings()


def require_catalog() -> ProductCatalog:
    """
    Loaded product catalog.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup did not load a catalog
    """
    catalog = get_catalog()
    if catalog is None:
        logger.error("Catalog requested before it was loaded")
        raise exceptions.catalog_not_loaded()
    return catalog


def build_presenter(catalog: ProductCatalog, settings: Settings) -> CatalogPresenter:
    """Presenter configured from settings."""
    symbol = settings.currency_symbol
    return CatalogPresenter(
        catalog,
        format_price=lambda amount: format_currency(amount, symbol),
        image_placeholder=settings.image_placeholder,
    )


def get_presenter(
    catalog: ProductCatalog = Depends(require_catalog),
    settings: Settings = Depends(get_app_settings),
) -> CatalogPresenter:
    return build_presenter(catalog, settings)


def get_browse_query(
    search: str = Query("", max_length=200, description="Substring search"),
    category: Optional[str] = Query(None, description="Exact category"),
    brand: Optional[str] = Query(None, description="Exact brand"),
    price_range: int = Query(0, ge=0, description="Price bracket index (0 = All)"),
    sort: str = Query(SortOrder.PRICE_ASC.value, description="price_asc, price_desc or brand_name"),
    page: int = Query(1, ge=1, le=10_000, description="Pages revealed"),
) -> QueryState:
    """
    Build a QueryState from request query parameters.

    Empty category/brand mean "All"; unknown sort values mean brand/name order.
    """
    return QueryState(
        search=search.strip(),
        category=category or None,
        brand=brand or None,
        price_range_index=price_range,
        sort=SortOrder(sort),
        page=page,
    )
