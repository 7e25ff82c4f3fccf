"""
==============================================================================
Debouncer Tests
==============================================================================

Tests for cancellable delayed execution.

==============================================================================
"""

import asyncio
import logging

import pytest

from storefront.browse import Debouncer


class TestDebouncer:
    """Tests for Debouncer scheduling and cancellation."""

    def test_burst_runs_only_last_call(self):
        """Test superseded calls never run."""
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01)
            debouncer.schedule(calls.append, "a")
            debouncer.schedule(calls.append, "ac")
            task = debouncer.schedule(calls.append, "acme")
            await task

        asyncio.run(scenario())
        assert calls == ["acme"]

    def test_at_most_one_pending(self):
        """Test scheduling cancels the outstanding task."""
        async def scenario():
            debouncer = Debouncer(1.0)
            first = debouncer.schedule(lambda: None)
            second = debouncer.schedule(lambda: None)
            await asyncio.sleep(0)
            assert first.cancelled()
            assert not second.done()
            assert debouncer.pending
            debouncer.cancel()
            assert not debouncer.pending

        asyncio.run(scenario())

    def test_cancel_drops_pending_call(self):
        """Test a cancelled call never runs."""
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01)
            debouncer.schedule(calls.append, "acme")
            debouncer.cancel()
            await asyncio.sleep(0.05)

        asyncio.run(scenario())
        assert calls == []

    def test_spaced_calls_all_run(self):
        """Test calls separated by more than the delay each run."""
        calls = []

        async def scenario():
            debouncer = Debouncer(0.01)
            await debouncer.schedule(calls.append, "a")
            await debouncer.schedule(calls.append, "b")

        asyncio.run(scenario())
        assert calls == ["a", "b"]

    def test_async_callback_awaited(self):
        """Test coroutine callbacks are awaited."""
        calls = []

        async def record(value):
            await asyncio.sleep(0)
            calls.append(value)

        async def scenario():
            await Debouncer(0).schedule(record, "done")

        asyncio.run(scenario())
        assert calls == ["done"]

    def test_negative_delay_rejected(self):
        """Test delays must be non-negative."""
        with pytest.raises(ValueError):
            Debouncer(-1)

    def test_callback_failure_logged(self, caplog):
        """Test a failing callback is logged instead of left unretrieved."""
        def fail(value):
            raise RuntimeError(f"socket closed before {value}")

        async def scenario():
            Debouncer(0).schedule(fail, "acme")
            await asyncio.sleep(0.05)

        with caplog.at_level(logging.WARNING, logger="storefront.browse.debounce"):
            asyncio.run(scenario())

        assert "socket closed before acme" in caplog.text
