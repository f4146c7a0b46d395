"""Scheduler running pagination work on an asyncio event loop."""

import asyncio
import logging
from typing import Any, Callable, Coroutine, Optional, Set

logger = logging.getLogger("PaginatedList.AsyncioScheduler")


class AsyncioScheduler:
    """Spawns tasks and deferred callbacks on one event loop.

    The loop defaults to the running loop at first use.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._tasks: Set[asyncio.Task] = set()
        self._handles: Set[asyncio.Handle] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = self.loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def defer(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the next loop iteration."""
        handle = None

        def run():
            self._handles.discard(handle)
            callback()

        handle = self.loop.call_soon(run)
        self._handles.add(handle)

    def cancel_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        for task in list(self._tasks):
            task.cancel()
        logger.debug("Cancelled pending pagination work")

    @property
    def pending(self) -> int:
        return len(self._tasks)

    @property
    def deferred(self) -> int:
        return len(self._handles)

    async def join(self) -> None:
        """Wait until deferred callbacks and spawned tasks have settled."""
        await asyncio.sleep(0)
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
            await asyncio.sleep(0)
