"""
==============================================================================
Catalog API Router
==============================================================================

Mounts the catalog browsing REST surface:

    /api/v1/health     liveness, readiness and catalog status
    /api/v1/products   browse view, facets, brand search, stats

Interactive browsing lives on the WebSocket router (/ws/browse).

==============================================================================
"""

from fastapi import APIRouter

from storefront.api.v1 import health, products


API_PREFIX = "/api/v1"


class CatalogAPIRouter:
    """Versioned REST routes for the catalog browser."""

    def __init__(self, prefix: str = API_PREFIX):
        self._router = APIRouter(prefix=prefix)
        for module in (health, products):
            self._router.include_router(module.router)

    @property
    def router(self) -> APIRouter:
        return self._router


api_router = CatalogAPIRouter().router
