"""
==============================================================================
Query State Module
==============================================================================

Mutable record of the current search, filter, sort and page selections.

Every filter or search mutation resets ``page`` to 1 so a stale page offset
is never applied to a shrunk result set. Sorting keeps the page.

==============================================================================
"""

from __future__ import annotations

import enum
from typing import Hashable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SortOrder(str, enum.Enum):
    """Result ordering. Unknown values fall back to brand/name ordering."""

    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    BRAND_NAME = "brand_name"

    @classmethod
    def _missing_(cls, value: object) -> SortOrder:
        return cls.BRAND_NAME


class QueryState(BaseModel):
    """
    Current browse selections; the single source of truth for what is shown.

    Attributes:
        search: Trimmed, case-insensitive substring query ("" = no filter)
        category: Exact category, or None for all categories
        brand: Exact brand, or None for all brands
        price_range_index: Index into the price bracket list (0 = All)
        sort: Result ordering
        page: 1-indexed number of pages revealed
    """

    model_config = ConfigDict(validate_assignment=True)

    search: str = ""
    category: Optional[str] = None
    brand: Optional[str] = None
    price_range_index: int = Field(default=0, ge=0)
    sort: SortOrder = SortOrder.PRICE_ASC
    page: int = Field(default=1, ge=1)

    # =========================================================================
    # FILTER MUTATIONS (reset page)
    # =========================================================================

    def set_search(self, text: str) -> None:
        self.search = text.strip()
        self.page = 1

    def toggle_category(self, category: Optional[str]) -> None:
        """Select ``category``; selecting the active one again clears it."""
        category = category or None
        self.category = None if category == self.category else category
        self.page = 1

    def set_brand(self, brand: Optional[str]) -> None:
        self.brand = brand or None
        self.page = 1

    def toggle_price_range(self, index: int) -> None:
        """Select bracket ``index``; selecting the active one again returns to All."""
        self.price_range_index = 0 if index == self.price_range_index else index
        self.page = 1

    # =========================================================================
    # NON-FILTER MUTATIONS
    # =========================================================================

    def set_sort(self, sort: str) -> None:
        self.sort = SortOrder(sort)

    def next_page(self) -> None:
        self.page += 1

    def filter_key(self) -> Tuple[Hashable, ...]:
        """Snapshot of everything that determines the filtered sequence."""
        return (
            self.search,
            self.category,
            self.brand,
            self.price_range_index,
            self.sort,
        )
