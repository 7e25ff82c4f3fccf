"""
==============================================================================
WebSocket Package
==============================================================================

Real-time WebSocket handlers.

Handlers:
---------
- browse: Interactive catalog browsing with debounced search

==============================================================================
"""

from .browse import router as browse_router

__all__ = ["browse_router"]
