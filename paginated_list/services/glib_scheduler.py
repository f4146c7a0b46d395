"""Scheduler bridging the GTK main loop and a background asyncio loop."""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Callable, Coroutine, Set

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib

logger = logging.getLogger("PaginatedList.GLibScheduler")


class GLibScheduler:
    """Runs pagination coroutines on a dedicated asyncio loop thread.

    Deferred callbacks wait for the GTK main loop to go idle, which is
    after the pending frame has been drawn.
    """

    def __init__(self, name: str = "paginated-list-loop"):
        self._loop = asyncio.new_event_loop()
        self._futures: Set[concurrent.futures.Future] = set()
        self._idle_sources: Set[int] = set()
        self._lock = threading.Lock()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(self._on_future_done)

    def _on_future_done(self, future: concurrent.futures.Future) -> None:
        with self._lock:
            self._futures.discard(future)
        if not future.cancelled() and future.exception() is not None:
            logger.error(f"Pagination task failed: {future.exception()}")

    def defer(self, callback: Callable[[], None]) -> None:
        source_id = 0

        def on_idle():
            self._idle_sources.discard(source_id)
            callback()
            return False  # Don't repeat

        source_id = GLib.idle_add(on_idle)
        self._idle_sources.add(source_id)

    def call(self, callback: Callable[..., None], *args) -> None:
        """Run ``callback`` on the loop thread that owns the state."""
        self._loop.call_soon_threadsafe(callback, *args)

    def cancel_all(self) -> None:
        for source_id in list(self._idle_sources):
            GLib.source_remove(source_id)
        self._idle_sources.clear()
        with self._lock:
            futures = list(self._futures)
        for future in futures:
            future.cancel()

    def shutdown(self) -> None:
        self.cancel_all()
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=1.0)
        logger.debug("Pagination loop stopped")
