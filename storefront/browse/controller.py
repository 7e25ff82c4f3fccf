"""
==============================================================================
Browse Controller Module
==============================================================================

Owns one QueryState and sequences every interaction as:

    mutate state -> recompute filtered sequence -> slice window -> render

Interactions are handled one at a time; each returns the freshly rendered
view before the next one is processed. Typed search goes through a
Debouncer so a burst of keystrokes results in a single render.

==============================================================================
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence, Union

from storefront.catalog import ProductCatalog
from storefront.schemas.browse import CatalogView

from .debounce import Debouncer
from .engine import FilterEngine
from .pagination import PAGE_SIZE, visible
from .presenter import CatalogPresenter
from .price_ranges import PRICE_RANGES, PriceRange, resolve_price_range
from .query import QueryState


# Module logger
logger = logging.getLogger(__name__)

RenderCallback = Callable[[CatalogView], Union[None, Awaitable[Any]]]


class BrowseController:
    """
    Stateful shell around the pure filter engine and pagination window.

    Attributes:
        query: Current selections (mutated only by this controller)

    Example:
        >>> controller = BrowseController(catalog)
        >>> view = controller.select_category("Shoes")
        >>> view = controller.load_more()
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        page_size: int = PAGE_SIZE,
        presenter: Optional[CatalogPresenter] = None,
        debounce_seconds: float = 0.25,
        ranges: Sequence[PriceRange] = PRICE_RANGES,
        query: Optional[QueryState] = None,
    ) -> None:
        self.query = query or QueryState()
        self._catalog = catalog
        self._ranges = ranges
        self._page_size = page_size
        self._engine = FilterEngine(catalog, ranges)
        self._presenter = presenter or CatalogPresenter(catalog, ranges=ranges)
        self._debouncer = Debouncer(debounce_seconds)

    @property
    def presenter(self) -> CatalogPresenter:
        return self._presenter

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self) -> CatalogView:
        """Recompute and render the current state."""
        filtered = self._engine.filter(self.query)
        window = visible(filtered, self.query.page, self._page_size)
        return self._presenter.render(self.query, window, self._page_size)

    # =========================================================================
    # INTERACTIONS
    # =========================================================================

    def search(self, text: str) -> CatalogView:
        self.query.set_search(text)
        logger.debug(f"Search: {self.query.search!r}")
        return self.render()

    def search_debounced(self, text: str, on_render: RenderCallback) -> None:
        """
        Apply ``text`` once typing has paused, then pass the view to ``on_render``.

        A newer call before the delay elapses replaces this one.
        """
        self._debouncer.schedule(self._apply_search, text, on_render)

    async def _apply_search(self, text: str, on_render: RenderCallback) -> None:
        result = on_render(self.search(text))
        if inspect.isawaitable(result):
            await result

    def select_category(self, category: Optional[str]) -> CatalogView:
        self.query.toggle_category(category)
        return self.render()

    def select_brand(self, brand: Optional[str]) -> CatalogView:
        self.query.set_brand(brand)
        return self.render()

    def select_price_range(self, index: int) -> CatalogView:
        resolve_price_range(index, self._ranges)
        self.query.toggle_price_range(index)
        return self.render()

    def select_sort(self, sort: str) -> CatalogView:
        self.query.set_sort(sort)
        return self.render()

    def load_more(self) -> CatalogView:
        """Reveal the next page, if anything remains hidden."""
        filtered = self._engine.filter(self.query)
        if visible(filtered, self.query.page, self._page_size).has_more:
            self.query.next_page()
        else:
            logger.debug("Load more ignored: all results visible")
        return self.render()

    def close(self) -> None:
        """Cancel any pending debounced search."""
        self._debouncer.cancel()
