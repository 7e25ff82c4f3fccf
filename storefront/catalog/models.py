"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for the static product dataset.

==============================================================================
"""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Products are loaded once and never mutated, so the model is frozen.

    Attributes:
        name: Product display name
        brand: Brand / maker
        category: Category name, one of the dataset's declared categories
        material: Materials, searched alongside name/brand/category
        price: Whole currency amount; a "starting from" value when price_max is set
        price_max: True when price is the lowest of several prices
        variants: Opaque variant descriptors (only their count is shown)
        url: Product page link
        image: Product image URL
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    name: str = Field(..., description="Product name")
    brand: str = Field(default="", description="Brand name")
    category: str = Field(default="", description="Category name")
    material: Tuple[str, ...] = Field(default=(), description="Materials")
    price: int = Field(..., ge=0, description="Price in whole currency units")
    price_max: bool = Field(
        default=False,
        alias="priceMax",
        description="Price is a 'starting from' amount"
    )
    variants: Optional[Tuple[Any, ...]] = Field(default=None, description="Variants")
    url: str = Field(default="", description="Product page URL")
    image: str = Field(default="", description="Product image URL")

    @property
    def variant_count(self) -> Optional[int]:
        """Number of variants, or None when the product declares none."""
        if self.variants is None:
            return None
        return len(self.variants)


class CatalogDocument(BaseModel):
    """Shape of the dataset document: products plus the curated category list."""

    model_config = ConfigDict(extra="ignore")

    products: List[Product]
    categories: List[str] = Field(default_factory=list)
