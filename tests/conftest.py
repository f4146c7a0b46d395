"""Pytest configuration and shared fixtures."""

import asyncio
from pathlib import Path
from typing import Dict, List, Optional

import pytest


class FakePageSource:
    """Async fetch function recording every page it was asked for."""

    def __init__(self, page_size: int = 10, failures: Optional[Dict[int, Exception]] = None):
        self.page_size = page_size
        self.failures = dict(failures or {})
        self.calls: List[int] = []

    async def __call__(self, page: int) -> List[str]:
        self.calls.append(page)
        await asyncio.sleep(0)
        if page in self.failures:
            raise self.failures.pop(page)
        return [f"item-{page}-{index}" for index in range(self.page_size)]


class RecordingScheduler:
    """Scheduler that records work instead of running it."""

    def __init__(self):
        self.spawned = []
        self.deferred = []
        self.cancelled = 0

    def spawn(self, coro) -> None:
        self.spawned.append(coro)
        coro.close()

    def defer(self, callback) -> None:
        self.deferred.append(callback)

    def call(self, callback, *args) -> None:
        callback(*args)

    def cancel_all(self) -> None:
        self.cancelled += 1

    def shutdown(self) -> None:
        self.cancel_all()


@pytest.fixture
def page_source() -> FakePageSource:
    return FakePageSource()


@pytest.fixture
def recording_scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def gtk():
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
    except ValueError:
        pytest.skip("GTK 4 is not installed")
    from gi.repository import Gtk

    if not Gtk.init_check():
        pytest.skip("No display available for GTK widgets")
    return Gtk
