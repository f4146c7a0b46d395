"""Pagination state management for infinite scroll."""

import asyncio
import inspect
import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from paginated_list.core.errors import FetchTimeoutError, describe_error
from paginated_list.core.protocols import FetchMoreItems, Listener

logger = logging.getLogger("PaginatedList.PaginationState")

T = TypeVar("T")


class PaginationState(Generic[T]):
    """Loaded items, page counters and loading/error flags for one list.

    Every mutation is followed by a synchronous notification to the
    registered listeners, which re-read the properties below.

    A ``reset()`` while a fetch is in flight fences that fetch off: when it
    settles, its items, its error and its final notification are dropped.
    """

    def __init__(self, fetch_timeout: Optional[float] = None):
        self.fetch_timeout = fetch_timeout
        self._listeners: List[Listener] = []
        self._generation = 0
        self._items: List[T] = []
        self._is_loading = False
        self._current_page = 1
        self._total_pages = 1
        self._error: Optional[str] = None

    @property
    def items(self) -> List[T]:
        return self._items

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def has_error(self) -> bool:
        return self._error is not None

    @property
    def has_more_pages(self) -> bool:
        return self._current_page <= self._total_pages

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _notify_listeners(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Pagination listener %r failed", listener)

    def set_total_pages(self, pages: int) -> None:
        self._total_pages = pages
        self._notify_listeners()

    def set_initial_page(self, page: int) -> None:
        """Only meaningful before the first fetch; later calls move the cursor."""
        self._current_page = page
        self._notify_listeners()

    async def load_next_page(self, fetch_data: FetchMoreItems[T]) -> None:
        """Fetch ``current_page`` and append its items.

        No-op while a fetch is in flight or once every page is loaded.
        Failures are recorded in ``error`` and never raised; the same page
        is requested again on the next call.
        """
        # Guard and flag are set before the first await.
        if self._is_loading or self._current_page > self._total_pages:
            return

        generation = self._generation
        page = self._current_page
        self._is_loading = True
        self._error = None
        self._notify_listeners()

        try:
            new_items = await self._fetch(fetch_data, page)
        except Exception as e:
            if generation == self._generation:
                self._error = describe_error(e)
            logger.warning(f"Failed to load page {page}: {describe_error(e)}")
        else:
            if generation == self._generation:
                self._items.extend(new_items)
                self._current_page += 1
                logger.debug(f"Loaded page {page} ({len(new_items)} items)")
            else:
                logger.info(f"Discarding page {page}: state was reset during fetch")
        finally:
            if generation == self._generation:
                self._is_loading = False
                self._notify_listeners()

    async def _fetch(self, fetch_data: FetchMoreItems[T], page: int) -> List[T]:
        result = fetch_data(page)
        if inspect.isawaitable(result):
            if self.fetch_timeout is None:
                result = await result
            else:
                try:
                    result = await asyncio.wait_for(result, self.fetch_timeout)
                except asyncio.TimeoutError:
                    raise FetchTimeoutError(page, self.fetch_timeout) from None
        return list(_as_sequence(result))

    def reset(self) -> None:
        """Back to construction defaults; initial and total pages must be reapplied."""
        self._generation += 1
        self._items = []
        self._current_page = 1
        self._total_pages = 1
        self._is_loading = False
        self._error = None
        self._notify_listeners()


def _as_sequence(result) -> Sequence:
    if result is None or isinstance(result, (str, bytes)):
        raise TypeError(
            f"fetch function must return a sequence of items, got {type(result).__name__}"
        )
    return result
