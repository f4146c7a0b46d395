"""Demo application showing an AutoPaginatedList of generated items."""

import asyncio
import logging
from typing import List, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, Gtk

from paginated_list.components.auto_paginated_list import AutoPaginatedList
from paginated_list.config.settings import ListSettings, SettingsManager

logger = logging.getLogger("PaginatedList.DemoApp")

DEMO_SETTINGS = ListSettings(items_per_page=10, initial_page=1, total_pages_from_api=5)


class DemoItemSource:
    """Simulated remote API returning "Item N" strings."""

    def __init__(self, items_per_page: int = 10, delay: float = 2.0):
        self.items_per_page = items_per_page
        self.delay = delay

    async def fetch_items(self, page: int) -> List[str]:
        await asyncio.sleep(self.delay)
        start = (page - 1) * self.items_per_page
        return [f"Item {start + index + 1}" for index in range(self.items_per_page)]


def build_item_row(item: str) -> Gtk.Widget:
    label = Gtk.Label(label=item, xalign=0)
    label.set_margin_start(12)
    label.set_margin_end(12)
    label.set_margin_top(10)
    label.set_margin_bottom(10)
    return label


def build_placeholder(text: str) -> Gtk.Widget:
    label = Gtk.Label(label=text)
    label.set_margin_top(12)
    label.set_margin_bottom(12)
    return label


class DemoApp(Adw.Application):
    """Main application"""

    def __init__(self, settings_manager: Optional[SettingsManager] = None):
        super().__init__(
            application_id="org.paginatedlist.Demo",
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )
        self.settings_manager = settings_manager or SettingsManager()
        self.window: Optional[Adw.ApplicationWindow] = None

    def do_activate(self):
        if self.window is not None:
            self.window.present()
            return

        settings = self.settings_manager.settings
        pagination = settings.pagination
        if not self.settings_manager.config_path.exists():
            pagination = DEMO_SETTINGS

        source = DemoItemSource(items_per_page=pagination.items_per_page)
        paginated_list = AutoPaginatedList(
            fetch_data=source.fetch_items,
            item_builder=build_item_row,
            settings=pagination,
            error_widget=build_placeholder("Error loading data"),
            empty_widget=build_placeholder("No items found"),
            separator_builder=lambda index: Gtk.Separator(),
        )

        toolbar = Adw.ToolbarView()
        header = Adw.HeaderBar()
        header.set_title_widget(Gtk.Label(label="Paginated List Example"))
        refresh_button = Gtk.Button(icon_name="view-refresh-symbolic")
        refresh_button.connect("clicked", lambda *_: paginated_list.refresh())
        header.pack_end(refresh_button)
        toolbar.add_top_bar(header)
        toolbar.set_content(paginated_list)

        self.window = Adw.ApplicationWindow(application=self)
        self.window.set_default_size(
            settings.window.default_width, settings.window.default_height
        )
        self.window.set_content(toolbar)
        self.window.present()
        logger.info(
            f"Demo list ready ({pagination.total_pages_from_api} pages of "
            f"{pagination.items_per_page})"
        )


def main(argv=None) -> int:
    app = DemoApp()
    return app.run(argv)
