"""
==============================================================================
Catalog Package - Product Dataset
==============================================================================

Read-only product catalog with derived category and brand facets.

Classes:
--------
- Product: Pydantic model for products
- CatalogDocument: Pydantic model for the dataset document
- ProductCatalog: Catalog store loaded once at startup

==============================================================================
"""

from .models import CatalogDocument, Product
from .collation import collation_key
from .catalog import ProductCatalog, get_catalog, init_catalog

__all__ = [
    "Product",
    "CatalogDocument",
    "ProductCatalog",
    "collation_key",
    "get_catalog",
    "init_catalog",
]
