"""GTK widgets."""

from .auto_paginated_list import AutoPaginatedList

__all__ = ["AutoPaginatedList"]
