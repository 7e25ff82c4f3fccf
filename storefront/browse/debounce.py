"""
==============================================================================
Debounce Module
==============================================================================

Cancellable delayed execution for bursty input such as search keystrokes.

Scheduling a new call cancels the pending one, so at most one task is
outstanding per Debouncer and only the last call of a burst runs.

==============================================================================
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional


# Module logger
logger = logging.getLogger(__name__)


def _log_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.warning(f"Debounced call failed: {error!r}")


class Debouncer:
    """
    Runs a callback once input has been quiet for ``delay`` seconds.

    Must be used from within a running event loop.

    Example:
        >>> debouncer = Debouncer(0.25)
        >>> debouncer.schedule(apply_search, "acm")
        >>> debouncer.schedule(apply_search, "acme")  # cancels "acm"
    """

    def __init__(self, delay: float) -> None:
        """
        Args:
            delay: Quiescence interval in seconds
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        """Check if a scheduled call has not run yet."""
        return self._task is not None and not self._task.done()

    async def _run_later(self, callback: Callable[..., Any], args: tuple) -> None:
        await asyncio.sleep(self._delay)
        result = callback(*args)
        if inspect.isawaitable(result):
            await result

    def schedule(self, callback: Callable[..., Any], *args: Any) -> asyncio.Task:
        """
        Schedule ``callback(*args)``, replacing any pending call.

        ``callback`` may be a plain function or a coroutine function.

        Returns:
            The asyncio Task for the new call
        """
        if self.pending:
            self._task.cancel()
            logger.debug("Superseded pending debounced call")

        self._task = asyncio.create_task(self._run_later(callback, args))
        self._task.add_done_callback(_log_failure)
        return self._task

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self.pending:
            self._task.cancel()
            logger.debug("Cancelled pending debounced call")
        self._task = None
