"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Stateless browsing of the product catalog: every request carries the full
query (search, filters, sort, page) and gets back a rendered catalog page.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from storefront.browse import (
    PRICE_RANGES,
    CatalogPresenter,
    FilterEngine,
    QueryState,
    visible,
)
from storefront.catalog import ProductCatalog
from storefront.config import Settings
from storefront.core.dependencies import (
    get_app_settings,
    get_browse_query,
    get_presenter,
    require_catalog,
)
from storefront.schemas.browse import CatalogView


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, catalog: ProductCatalog, presenter: CatalogPresenter):
        self._catalog = catalog
        self._presenter = presenter

    def browse(self, query: QueryState, page_size: int) -> CatalogView:
        """Filter, sort and window the catalog for one query."""
        filtered = FilterEngine(self._catalog).filter(query)
        window = visible(filtered, query.page, page_size)
        return self._presenter.render(query, window, page_size)

    def get_facets(self) -> dict:
        """Get category, brand and price bracket options."""
        return {
            "success": True,
            "categories": list(self._catalog.categories),
            "brands": list(self._catalog.brands),
            "price_ranges": [
                {"index": index, "label": price_range.label}
                for index, price_range in enumerate(PRICE_RANGES)
            ],
        }

    def search_brands(self, text: str) -> dict:
        """Brand dropdown entries matching the dropdown's search box."""
        options = self._presenter.brand_options(None, text)
        return {
            "success": True,
            "query": text,
            "brands": [option.model_dump() for option in options],
        }

    def get_stats(self) -> dict:
        """Get catalog statistics."""
        return {
            "success": True,
            "stats": self._catalog.get_stats()
        }


def get_controller(
    catalog: ProductCatalog = Depends(require_catalog),
    presenter: CatalogPresenter = Depends(get_presenter),
) -> ProductController:
    return ProductController(catalog, presenter)


@router.get("", response_model=CatalogView)
async def browse_products(
    query: QueryState = Depends(get_browse_query),
    controller: ProductController = Depends(get_controller),
    settings: Settings = Depends(get_app_settings),
):
    """Search, filter, sort and page through the catalog."""
    return controller.browse(query, settings.page_size)


@router.get("/facets")
async def get_facets(controller: ProductController = Depends(get_controller)):
    """Get all filter options."""
    return controller.get_facets()


@router.get("/brands")
async def search_brands(
    q: str = Query("", max_length=100),
    controller: ProductController = Depends(get_controller),
):
    """Filter the brand dropdown list."""
    return controller.search_brands(q)


@router.get("/stats")
async def get_catalog_stats(controller: ProductController = Depends(get_controller)):
    """Get catalog statistics."""
    return controller.get_stats()
