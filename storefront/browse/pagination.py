"""
Incremental reveal of a filtered result set.

The window is always a prefix of the filtered sequence, so each "load more"
appends to what is already shown.
"""

from typing import List, NamedTuple, Sequence

from storefront.catalog import Product


PAGE_SIZE = 48


class PageWindow(NamedTuple):
    """The visible prefix of a result set."""

    items: List[Product]
    has_more: bool
    total: int


def visible(
    filtered: Sequence[Product],
    page: int,
    page_size: int = PAGE_SIZE,
) -> PageWindow:
    """
    Slice the first ``page * page_size`` products of ``filtered``.

    Args:
        filtered: Full filtered, sorted result set
        page: 1-indexed number of pages revealed
        page_size: Products per page

    Returns:
        PageWindow with the visible prefix and whether more remain
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    items = list(filtered[:page * page_size])
    return PageWindow(items=items, has_more=len(items) < len(filtered), total=len(filtered))
