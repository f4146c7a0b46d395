"""Binds a PaginationState to its fetch function and scroll feed."""

import logging
from typing import Generic, Optional, TypeVar

from paginated_list.config.settings import ListSettings
from paginated_list.core.protocols import FetchMoreItems, Scheduler
from paginated_list.managers.pagination_state import PaginationState
from paginated_list.managers.scroll_trigger import should_trigger_load

logger = logging.getLogger("PaginatedList.PaginationController")

T = TypeVar("T")


class PaginationController(Generic[T]):
    """Decides when the state loads its next page.

    Triggers come from the initial attach, from scroll observations and
    from explicit ``load_more``/``refresh`` calls. All state work runs
    through ``scheduler``, so the state only ever sees one thread.
    """

    def __init__(
        self,
        fetch_data: FetchMoreItems[T],
        scheduler: Scheduler,
        settings: Optional[ListSettings] = None,
    ):
        self.fetch_data = fetch_data
        self.scheduler = scheduler
        self.settings = settings or ListSettings()
        self.state: PaginationState[T] = PaginationState(
            fetch_timeout=self.settings.fetch_timeout
        )
        self._total_pages_from_api = self.settings.total_pages_from_api
        self._attached = False
        self._apply_initial_settings()

    def _apply_initial_settings(self) -> None:
        self.state.set_initial_page(self.settings.initial_page)
        self.state.set_total_pages(self._total_pages_from_api)

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """Schedule the initial load after the first snapshot is observable."""
        if self._attached:
            return
        self._attached = True
        self.scheduler.defer(self.load_more)

    def load_more(self) -> None:
        self.scheduler.spawn(self.state.load_next_page(self.fetch_data))

    def on_scroll(self, current_offset: float, max_offset: float) -> bool:
        if not should_trigger_load(
            current_offset,
            max_offset,
            self.state.has_more_pages,
            self.state.is_loading,
            self.settings.trigger_distance,
        ):
            return False

        logger.debug(
            f"Near bottom ({current_offset:.0f}/{max_offset:.0f}), "
            f"loading page {self.state.current_page}"
        )
        self.load_more()
        return True

    def update_total_pages(self, total_pages: int) -> None:
        """Apply a changed total from the data source; does not trigger a load."""
        if total_pages == self._total_pages_from_api:
            return
        self._total_pages_from_api = total_pages
        self.state.set_total_pages(total_pages)

    def refresh(self) -> None:
        """Drop loaded pages and start again from the initial page."""
        self.state.reset()
        self._apply_initial_settings()
        self.load_more()

    def dispose(self) -> None:
        self.scheduler.cancel_all()
        self.state.clear_listeners()
