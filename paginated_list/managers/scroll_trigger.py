"""Near-bottom detection for infinite scrolling."""

TRIGGER_DISTANCE = 200.0


def should_trigger_load(
    current_offset: float,
    max_offset: float,
    has_more_pages: bool,
    is_loading: bool,
    trigger_distance: float = TRIGGER_DISTANCE,
) -> bool:
    """True when the view is within ``trigger_distance`` of its end and a fetch may start."""
    if not has_more_pages or is_loading:
        return False
    return max_offset - current_offset <= trigger_distance


def max_scroll_offset(upper: float, page_size: float) -> float:
    """Largest reachable scroll value of an adjustment."""
    return max(0.0, upper - page_size)
