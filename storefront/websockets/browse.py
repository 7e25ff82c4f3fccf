"""
==============================================================================
Browse WebSocket Module
==============================================================================

Interactive catalog browsing over a WebSocket connection. Each connection
owns one BrowseController, so its query state lives exactly as long as the
connection.

Protocol:
---------
1. Client connects; server sends {"type": "init", "view": {...}}
2. Client sends interactions:
   - {"type": "search", "value": "acm"}       (debounced)
   - {"type": "category", "value": "Shoes"}   (same value again clears it)
   - {"type": "brand", "value": "Acme"}       (null for all brands)
   - {"type": "price_range", "index": 2}      (same index again clears it)
   - {"type": "sort", "value": "price_desc"}
   - {"type": "load_more"}
   - {"type": "brand_search", "value": "ac"}
   - {"type": "stop"}
3. Server answers with {"type": "view"}, {"type": "brands"} or {"type": "error"}

==============================================================================
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from storefront.browse import PRICE_RANGES, BrowseController
from storefront.catalog import ProductCatalog
from storefront.config import Settings
from storefront.core import exceptions
from storefront.core.dependencies import build_presenter, get_app_settings, require_catalog
from storefront.core.exceptions import AppException
from storefront.schemas.browse import CatalogView


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter()


class BrowseWebSocketHandler:
    """
    Handler for catalog browsing WebSocket connections.

    Manages the lifecycle of a browsing session including:
    - Initial render
    - Dispatching interactions to the controller
    - Debounced search delivery
    - Cancelling pending work on disconnect
    """

    def __init__(self, websocket: WebSocket, catalog: ProductCatalog, settings: Settings):
        self._websocket = websocket
        self._controller = BrowseController(
            catalog,
            page_size=settings.page_size,
            presenter=build_presenter(catalog, settings),
            debounce_seconds=settings.search_debounce_seconds,
        )

    async def send_view(self, view: CatalogView, message_type: str = "view") -> None:
        """Send a rendered page to the client."""
        await self._websocket.send_json({
            "type": message_type,
            "view": view.model_dump(mode="json"),
        })

    async def send_error(self, error: AppException) -> None:
        """Send error message to client."""
        await self._websocket.send_json({
            "type": "error",
            "code": error.code,
            "message": error.message,
        })

    async def handle_message(self, data: Any) -> None:
        """Apply one interaction and send the resulting view."""
        if not isinstance(data, dict):
            raise exceptions.invalid_message(type(data).__name__)

        message_type = data.get("type")
        controller = self._controller

        if message_type == "search":
            controller.search_debounced(str(data.get("value") or ""), self.send_view)
            return

        if message_type == "brand_search":
            options = controller.presenter.brand_options(
                controller.query.brand, str(data.get("value") or "")
            )
            await self._websocket.send_json({
                "type": "brands",
                "brands": [option.model_dump() for option in options],
            })
            return

        try:
            view = self._apply(message_type, data)
        except ValidationError as e:
            reason = e.errors()[0]["msg"] if e.error_count() else str(e)
            raise exceptions.invalid_value(message_type, reason) from e

        await self.send_view(view)

    def _apply(self, message_type: Optional[str], data: dict) -> CatalogView:
        controller = self._controller

        if message_type == "category":
            return controller.select_category(data.get("value"))
        if message_type == "brand":
            return controller.select_brand(data.get("value"))
        if message_type == "price_range":
            try:
                index = int(data.get("index", 0))
            except (TypeError, ValueError):
                raise exceptions.invalid_price_range(-1, len(PRICE_RANGES)) from None
            return controller.select_price_range(index)
        if message_type == "sort":
            return controller.select_sort(str(data.get("value", "")))
        if message_type == "load_more":
            return controller.load_more()
        raise exceptions.invalid_message(message_type)

    async def run(self) -> None:
        """Main handler loop."""
        await self._websocket.accept()
        logger.info("🛍️ Browse WebSocket connected")

        try:
            await self.send_view(self._controller.render(), "init")

            while True:
                data = await self._websocket.receive_json()

                if isinstance(data, dict) and data.get("type") == "stop":
                    logger.info("🛑 Client requested stop")
                    await self._websocket.close()
                    break

                try:
                    await self.handle_message(data)
                except AppException as e:
                    logger.warning(f"Rejected message: {e.message}")
                    await self.send_error(e)

        except WebSocketDisconnect:
            logger.info("🛍️ Client disconnected")
        except Exception as e:
            logger.error(f"WebSocket error: {e!r}")
            try:
                await self.send_error(exceptions.internal_error())
                await self._websocket.close(code=1011)
            except (RuntimeError, WebSocketDisconnect):
                logger.debug("Could not report error, connection already closed")
        finally:
            self._controller.close()
            logger.info("✅ Browse WebSocket closed")


@router.websocket("/ws/browse")
async def websocket_browse(
    websocket: WebSocket,
    catalog: ProductCatalog = Depends(require_catalog),
    settings: Settings = Depends(get_app_settings),
):
    """Interactive catalog browsing via WebSocket."""
    handler = BrowseWebSocketHandler(websocket, catalog, settings)
    await handler.run()
