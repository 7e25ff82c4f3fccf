"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample datasets, catalog, settings and test client fixtures.

==============================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from storefront.catalog import ProductCatalog
from storefront.config import Settings
from storefront.main import Application


# ============================================================================
# DATASET FIXTURES
# ============================================================================

def make_product(name: str, brand: str, category: str, price: int, **extra: Any) -> Dict[str, Any]:
    """Build one product record in dataset shape."""
    slug = name.lower().replace(" ", "-")
    product = {
        "name": name,
        "brand": brand,
        "category": category,
        "material": [],
        "price": price,
        "priceMax": False,
        "url": f"https://shop.example/{slug}",
        "image": f"https://shop.example/img/{slug}.jpg",
    }
    product.update(extra)
    return product


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """Three-product dataset; Hats is declared but has no products."""
    return {
        "categories": ["Bags", "Shoes", "Hats"],
        "products": [
            make_product("Canvas Tote", "Acme", "Bags", 4000, material=["Cotton"]),
            make_product(
                "Trail Runner", "Zed", "Shoes", 20000,
                material=["Mesh", "Rubber"],
                priceMax=True,
                variants=[{"size": "S"}, {"size": "M"}],
            ),
            make_product("Leather Loafer", "Acme", "Shoes", 4000, material=["Leather"]),
        ],
    }


@pytest.fixture
def catalog(sample_document: Dict[str, Any]) -> ProductCatalog:
    """Catalog built from the sample dataset."""
    return ProductCatalog.from_document(sample_document)


@pytest.fixture
def large_catalog() -> ProductCatalog:
    """100 products in one category with distinct prices."""
    products: List[Dict[str, Any]] = [
        make_product(f"Item {i:03d}", f"Brand {i % 7}", "Bulk", 1000 + i)
        for i in range(100)
    ]
    return ProductCatalog.from_document({"categories": ["Bulk"], "products": products})


@pytest.fixture
def products_file(tmp_path: Path, sample_document: Dict[str, Any]) -> Path:
    """Sample dataset written to disk."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def settings(products_file: Path) -> Settings:
    """Settings pointing at the sample dataset."""
    return Settings(
        products_file=str(products_file),
        search_debounce_ms=200,
        image_placeholder="placeholder.svg",
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client running the full application lifespan."""
    app = Application(settings).app

    with TestClient(app) as test_client:
        yield test_client
