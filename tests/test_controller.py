"""
==============================================================================
Browse Controller Tests
==============================================================================

Tests for interaction sequencing: mutate, recompute, render.

==============================================================================
"""

import asyncio

import pytest
from pydantic import ValidationError

from storefront.browse import BrowseController
from storefront.catalog import ProductCatalog
from storefront.core.exceptions import AppException


class TestInteractions:
    """Tests for synchronous interactions."""

    def test_initial_render(self, catalog: ProductCatalog):
        """Test the first render shows everything by ascending price."""
        view = BrowseController(catalog).render()
        assert view.total == 3
        assert [c.name for c in view.products] == ["Canvas Tote", "Leather Loafer", "Trail Runner"]

    def test_load_more_grows_window(self, large_catalog: ProductCatalog):
        """Test load more appends a page until everything is visible."""
        controller = BrowseController(large_catalog)
        first = controller.render()
        second = controller.load_more()
        assert len(second.products) == 96
        assert second.products[:48] == first.products
        third = controller.load_more()
        assert len(third.products) == 100
        assert third.has_more is False

    def test_load_more_stops_at_end(self, large_catalog: ProductCatalog):
        """Test load more is a no-op when nothing is hidden."""
        controller = BrowseController(large_catalog)
        for _ in range(5):
            view = controller.load_more()
        assert controller.query.page == 3
        assert len(view.products) == 100

    @pytest.mark.parametrize("mutate", [
        lambda c: c.search("item 0"),
        lambda c: c.select_category("Bulk"),
        lambda c: c.select_brand("Brand 3"),
        lambda c: c.select_price_range(1),
    ])
    def test_filter_mutation_resets_page(self, large_catalog: ProductCatalog, mutate):
        """Test any filter change returns to the first page."""
        controller = BrowseController(large_catalog)
        controller.load_more()
        assert controller.query.page == 2

        view = mutate(controller)
        assert controller.query.page == 1
        assert len(view.products) == min(48, view.total)

    def test_sort_keeps_page(self, large_catalog: ProductCatalog):
        """Test reordering keeps the revealed pages."""
        controller = BrowseController(large_catalog)
        controller.load_more()
        view = controller.select_sort("price_desc")
        assert controller.query.page == 2
        assert len(view.products) == 96
        assert view.products[0].name == "Item 099"

    def test_category_pill_toggles(self, catalog: ProductCatalog):
        """Test clicking the active category pill clears it."""
        controller = BrowseController(catalog)
        assert controller.select_category("Shoes").total == 2
        assert controller.select_category("Shoes").total == 3

    def test_invalid_price_range_leaves_state(self, catalog: ProductCatalog):
        """Test a rejected bracket does not alter the query."""
        controller = BrowseController(catalog)
        with pytest.raises(AppException):
            controller.select_price_range(42)
        assert controller.query.price_range_index == 0

    def test_mistyped_value_leaves_state(self, large_catalog: ProductCatalog):
        """Test a wrongly typed selection is rejected without touching the query."""
        controller = BrowseController(large_catalog)
        controller.load_more()
        with pytest.raises(ValidationError):
            controller.select_category(5)
        with pytest.raises(ValidationError):
            controller.select_brand(["Acme"])
        assert controller.query.category is None
        assert controller.query.brand is None
        assert controller.query.page == 2

    def test_brand_list_constant(self, catalog: ProductCatalog):
        """Test the brand list does not narrow with filters."""
        controller = BrowseController(catalog)
        before = controller.render().facets.brands
        after = controller.select_category("Bags").facets.brands
        assert [o.label for o in before] == [o.label for o in after]


class TestDebouncedSearch:
    """Tests for the debounced search path."""

    def test_only_final_query_applied(self, catalog: ProductCatalog):
        """Test a keystroke burst renders once with the final text."""
        views = []

        async def scenario():
            controller = BrowseController(catalog, debounce_seconds=0.01)
            controller.search_debounced("z", views.append)
            controller.search_debounced("ac", views.append)
            controller.search_debounced("  acme ", views.append)
            await asyncio.sleep(0.1)
            return controller

        controller = asyncio.run(scenario())
        assert len(views) == 1
        assert views[0].query.search == "acme"
        assert views[0].total == 2
        assert controller.query.search == "acme"

    def test_close_cancels_pending_search(self, catalog: ProductCatalog):
        """Test closing drops a pending search."""
        views = []

        async def scenario():
            controller = BrowseController(catalog, debounce_seconds=0.01)
            controller.search_debounced("acme", views.append)
            controller.close()
            await asyncio.sleep(0.05)
            return controller

        controller = asyncio.run(scenario())
        assert views == []
        assert controller.query.search == ""
