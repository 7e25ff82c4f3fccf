"""
==============================================================================
Product Catalog Module
==============================================================================

Read-only product catalog loaded once from a JSON document.

Features:
---------
- JSON-based product dataset with a curated category list
- Facet values (categories, brands) derived once at load
- Catalog statistics for health and admin views

JSON Structure:
--------------
{
  "categories": ["Bags", "Shoes", ...],
  "products": [
    {
      "name": "Tote", "brand": "Acme", "category": "Bags",
      "material": ["Leather"], "price": 4000, "priceMax": false,
      "variants": [...], "url": "https://...", "image": "https://..."
    },
    ...
  ]
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from storefront.core import exceptions

from .collation import sorted_distinct
from .models import CatalogDocument, Product


# Module logger
logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Immutable product catalog with derived facet values.

    The category list is taken verbatim from the dataset so pills keep their
    curated order, even for categories without products. The brand list is
    every distinct brand in the catalog, sorted, regardless of any filter.

    Attributes:
        products: All products in load order
        categories: Declared categories in dataset order
        brands: Distinct brands in collation order

    Example:
        >>> catalog = ProductCatalog(Path("data/products.json"))
        >>> catalog.brands
        ('Acme', 'Zed')
    """

    def __init__(self, products_file: Optional[Path] = None) -> None:
        """
        Initialize catalog, loading it from ``products_file`` when given.

        Args:
            products_file: Path to products.json
        """
        self._products_file = products_file
        self._products: Tuple[Product, ...] = ()
        self._categories: Tuple[str, ...] = ()
        self._brands: Tuple[str, ...] = ()

        if products_file is not None:
            self._load()

    @classmethod
    def from_document(cls, data: Mapping[str, Any]) -> ProductCatalog:
        """Build a catalog from an already parsed dataset document."""
        catalog = cls()
        catalog._populate(CatalogDocument.model_validate(data))
        return catalog

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> Tuple[Product, ...]:
        """Get all products."""
        return self._products

    @property
    def categories(self) -> Tuple[str, ...]:
        """Get declared categories."""
        return self._categories

    @property
    def brands(self) -> Tuple[str, ...]:
        """Get all brands."""
        return self._brands

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # LOADING
    # =========================================================================

    def _load(self) -> None:
        """Load products from JSON file. Any failure is fatal."""
        path = str(self._products_file)
        try:
            with self._products_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
            document = CatalogDocument.model_validate(data)
        except FileNotFoundError as e:
            logger.error(f"Products file not found: {path}")
            raise exceptions.catalog_load_failed(path, "file not found") from e
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            raise exceptions.catalog_load_failed(path, f"invalid JSON: {e}") from e
        except ValidationError as e:
            logger.error(f"Malformed dataset in {path}: {e.error_count()} errors")
            raise exceptions.catalog_load_failed(path, "malformed dataset") from e

        self._populate(document)

    def _populate(self, document: CatalogDocument) -> None:
        self._products = tuple(document.products)
        self._categories = tuple(document.categories)
        self._brands = tuple(sorted_distinct(p.brand for p in self._products))

        logger.info(
            f"✅ Loaded {len(self._products)} products, "
            f"{len(self._categories)} categories, {len(self._brands)} brands"
        )

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        per_category = Counter(p.category for p in self._products)

        return {
            "total_products": len(self._products),
            "total_categories": len(self._categories),
            "total_brands": len(self._brands),
            "categories": {
                category: per_category.get(category, 0)
                for category in self._categories
            },
        }


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(products_file: Path) -> ProductCatalog:
    """
    Initialize the global catalog instance.

    Args:
        products_file: Path to products JSON file

    Returns:
        Initialized ProductCatalog instance

    Raises:
        AppException: CATALOG_LOAD_FAILED when the dataset cannot be read
    """
    global _catalog_instance
    _catalog_instance = ProductCatalog(products_file)
    return _catalog_instance
