"""Manager classes for pagination state."""

from .footer_resolver import FooterSlot, resolve_footer
from .pagination_controller import PaginationController
from .pagination_state import PaginationState
from .scroll_trigger import TRIGGER_DISTANCE, max_scroll_offset, should_trigger_load

__all__ = [
    "FooterSlot",
    "PaginationController",
    "PaginationState",
    "TRIGGER_DISTANCE",
    "max_scroll_offset",
    "resolve_footer",
    "should_trigger_load",
]
