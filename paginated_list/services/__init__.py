"""Schedulers that run pagination work."""

from .asyncio_scheduler import AsyncioScheduler

__all__ = ["AsyncioScheduler"]
