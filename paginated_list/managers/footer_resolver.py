"""Chooses which placeholder occupies the slot after the last loaded item."""

from enum import Enum

from paginated_list.managers.pagination_state import PaginationState


class FooterSlot(Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    END = "end"
    NONE = "none"


def resolve_footer(
    state: PaginationState,
    has_error_widget: bool,
    has_empty_widget: bool,
) -> FooterSlot:
    """Loading, then error, then empty; error wins over empty so failures stay visible."""
    if state.is_loading:
        return FooterSlot.LOADING
    if state.has_error and has_error_widget:
        return FooterSlot.ERROR
    if not state.items and has_empty_widget:
        return FooterSlot.EMPTY
    if not state.has_more_pages:
        return FooterSlot.END
    return FooterSlot.NONE
