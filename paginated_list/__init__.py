"""Incremental (infinite scroll) pagination for GTK4 lists."""

from paginated_list.config.settings import ListSettings
from paginated_list.managers.footer_resolver import FooterSlot, resolve_footer
from paginated_list.managers.pagination_controller import PaginationController
from paginated_list.managers.pagination_state import PaginationState
from paginated_list.managers.scroll_trigger import TRIGGER_DISTANCE, should_trigger_load
from paginated_list.services.asyncio_scheduler import AsyncioScheduler

__version__ = "0.1.0"

__all__ = [
    "AsyncioScheduler",
    "FooterSlot",
    "ListSettings",
    "PaginationController",
    "PaginationState",
    "TRIGGER_DISTANCE",
    "resolve_footer",
    "should_trigger_load",
]
