"""Scrollable list that loads further pages as the user nears the end."""

import logging
from typing import Any, Callable, Dict, List, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

from paginated_list.config.settings import ListSettings
from paginated_list.core.protocols import FetchMoreItems, ItemBuilder
from paginated_list.managers.footer_resolver import FooterSlot, resolve_footer
from paginated_list.managers.pagination_controller import PaginationController
from paginated_list.managers.scroll_trigger import max_scroll_offset
from paginated_list.services.glib_scheduler import GLibScheduler

logger = logging.getLogger("PaginatedList.AutoPaginatedList")


class AutoPaginatedList(Gtk.Box):
    """GTK4 infinite-scroll list.

    Example:
        AutoPaginatedList(
            fetch_data=fetch_items,
            item_builder=lambda item: Gtk.Label(label=item),
            settings=ListSettings(items_per_page=10, total_pages_from_api=5),
            error_widget=Gtk.Label(label="Error loading data"),
            empty_widget=Gtk.Label(label="No items found"),
        )
    """

    def __init__(
        self,
        fetch_data: FetchMoreItems[Any],
        item_builder: ItemBuilder,
        settings: Optional[ListSettings] = None,
        loading_widget: Optional[Gtk.Widget] = None,
        error_widget: Optional[Gtk.Widget] = None,
        empty_widget: Optional[Gtk.Widget] = None,
        padding: int = 0,
        propagate_natural_height: bool = False,
        separator_builder: Optional[Callable[[int], Gtk.Widget]] = None,
        scheduler: Optional[GLibScheduler] = None,
    ):
        """Create the list.

        Args:
            fetch_data: Returns the items of a page number
            item_builder: Builds the row widget for one item
            settings: Page size, initial page, total pages, trigger distance
            loading_widget: Shown while a page is loading (spinner by default)
            error_widget: Shown after a failed fetch
            empty_widget: Shown when nothing has been loaded
            padding: Margin around the list, in pixels
            propagate_natural_height: Size to content instead of expanding
            separator_builder: Builds the separator placed before row ``index + 1``
            scheduler: Loop that runs the fetches; one is created if omitted
        """
        super().__init__(orientation=Gtk.Orientation.VERTICAL)
        self.item_builder = item_builder
        self.separator_builder = separator_builder
        self.has_error_widget = error_widget is not None
        self.has_empty_widget = empty_widget is not None

        self._owns_scheduler = scheduler is None
        self.scheduler = scheduler or GLibScheduler()
        self.controller: PaginationController[Any] = PaginationController(
            fetch_data, self.scheduler, settings
        )
        self.state = self.controller.state

        self._rendered_items: Optional[List[Any]] = None
        self._rendered_count = 0
        self._sync_pending = False
        self._disposed = False

        self.set_margin_start(padding)
        self.set_margin_end(padding)
        self.set_margin_top(padding)
        self.set_margin_bottom(padding)

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_propagate_natural_height(propagate_natural_height)
        self.scrolled.set_vexpand(not propagate_natural_height)

        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        if separator_builder is not None:
            self.listbox.set_header_func(self._update_row_header)
        content.append(self.listbox)

        self.footer = Gtk.Stack()
        self.footer.set_vhomogeneous(False)
        self._footer_pages: Dict[FooterSlot, Gtk.Widget] = {
            FooterSlot.LOADING: loading_widget or self._default_loading_widget(),
            FooterSlot.ERROR: error_widget or Gtk.Box(),
            FooterSlot.EMPTY: empty_widget or Gtk.Box(),
            FooterSlot.END: Gtk.Box(),
            FooterSlot.NONE: Gtk.Box(),
        }
        for slot, widget in self._footer_pages.items():
            self.footer.add_named(widget, slot.value)
        content.append(self.footer)

        self.scrolled.set_child(content)
        self.append(self.scrolled)

        vadj = self.scrolled.get_vadjustment()
        vadj.connect("value-changed", self._on_scroll_changed)
        # Content growth re-evaluates the trigger so a short list keeps filling.
        vadj.connect("changed", self._on_scroll_changed)

        self.state.add_listener(self._on_state_changed)
        self.connect("map", self._on_map)
        self.connect("destroy", lambda *_: self.dispose_pagination())

        self._sync()

    @staticmethod
    def _default_loading_widget() -> Gtk.Widget:
        spinner = Gtk.Spinner()
        spinner.set_halign(Gtk.Align.CENTER)
        spinner.set_margin_top(12)
        spinner.set_margin_bottom(12)
        spinner.start()
        return spinner

    def _on_map(self, widget) -> None:
        self.controller.attach()

    def _on_scroll_changed(self, adjustment: Gtk.Adjustment) -> None:
        if self._disposed or not self.controller.attached:
            return
        self.controller.on_scroll(
            adjustment.get_value(),
            max_scroll_offset(adjustment.get_upper(), adjustment.get_page_size()),
        )

    def _on_state_changed(self) -> None:
        # Runs on the loop thread; rendering belongs to the GTK thread.
        if self._sync_pending:
            return
        self._sync_pending = True
        GLib.idle_add(self._sync)

    def _sync(self) -> bool:
        self._sync_pending = False
        if self._disposed:
            return False

        items = self.state.items
        if items is not self._rendered_items:
            self._clear_rows()
            self._rendered_items = items

        snapshot = list(items)
        for item in snapshot[self._rendered_count:]:
            self.listbox.append(self.item_builder(item))
        self._rendered_count = len(snapshot)

        slot = resolve_footer(self.state, self.has_error_widget, self.has_empty_widget)
        self.footer.set_visible_child_name(slot.value)
        return False  # Don't repeat

    def _clear_rows(self) -> None:
        while True:
            row = self.listbox.get_row_at_index(0)
            if row is None:
                break
            self.listbox.remove(row)
        self._rendered_count = 0

    def _update_row_header(self, row: Gtk.ListBoxRow, before: Optional[Gtk.ListBoxRow]) -> None:
        if before is None:
            row.set_header(None)
            return
        if row.get_header() is None:
            row.set_header(self.separator_builder(row.get_index() - 1))

    @property
    def footer_slot(self) -> FooterSlot:
        return FooterSlot(self.footer.get_visible_child_name())

    def set_total_pages_from_api(self, total_pages: int) -> None:
        self.scheduler.call(self.controller.update_total_pages, total_pages)

    def load_more(self) -> None:
        """Retry or request the next page without scrolling."""
        self.controller.load_more()

    def refresh(self) -> None:
        self.scheduler.call(self.controller.refresh)

    def dispose_pagination(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.controller.dispose()
        if self._owns_scheduler:
            self.scheduler.shutdown()
        logger.debug("Paginated list disposed")
