"""Error types raised inside the pagination core."""


class FetchTimeoutError(Exception):
    """A fetch did not settle within the configured timeout."""

    def __init__(self, page: int, timeout: float):
        self.page = page
        self.timeout = timeout
        super().__init__(f"Fetching page {page} timed out after {timeout:g}s")


def describe_error(error: BaseException) -> str:
    """Human-readable description stored in ``PaginationState.error``."""
    message = str(error)
    return message if message else type(error).__name__
