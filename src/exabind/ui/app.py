"""Textual TUI application for browsing a keymap."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.events import Key
from textual.widgets import Static

from ..keymap import KeyMap
from ..keys import ModifierKey
from .controller import BrowserSnapshot, KeymapBrowser

FILTER_KEYS: dict[str, ModifierKey] = {
    "c": ModifierKey.LEFT_CONTROL,
    "a": ModifierKey.LEFT_ALT,
    "s": ModifierKey.LEFT_SHIFT,
    "m": ModifierKey.LEFT_META,
}


class CategoriesView(Static):
    can_focus = True


class ExabindTuiApp(App[None]):
    """Textual frontend listing categories and their shortcuts."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #panes {
        height: 1fr;
        layout: horizontal;
    }

    #categories {
        width: auto;
        min-width: 24;
        border: round $accent;
    }

    #shortcuts {
        width: 1fr;
        border: round $accent;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
    }
    """

    def __init__(self, keymap: KeyMap) -> None:
        super().__init__()
        self.browser = KeymapBrowser(keymap)
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def compose(self) -> ComposeResult:
        with Horizontal(id="panes"):
            yield CategoriesView(id="categories")
            yield Static(id="shortcuts")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.query_one("#categories", CategoriesView).focus()
        self._refresh_view()

    def on_key(self, event: Key) -> None:
        key = event.key
        if key in {"down", "j"}:
            self.browser.next_category()
        elif key in {"up", "k"}:
            self.browser.previous_category()
        elif key == "escape":
            self.browser.deselect_category()
        elif key in FILTER_KEYS:
            self.browser.toggle_filter(FILTER_KEYS[key])
        elif key == "q":
            self._quit_requested = True
            self.exit()
            event.stop()
            return
        else:
            return

        self._refresh_view()
        event.stop()

    def _refresh_view(self) -> None:
        snapshot = self.browser.snapshot()
        self.query_one("#categories", Static).update(self._render_categories(snapshot))
        self.query_one("#shortcuts", Static).update(self._render_shortcuts(snapshot))
        self.query_one("#status", Static).update(
            Text(f"keymap={snapshot.keymap_name} categories={len(snapshot.categories)} | {snapshot.status}")
        )

    def _render_categories(self, snapshot: BrowserSnapshot) -> Table:
        table = Table(box=None, show_header=False, expand=True)
        table.add_column("category")
        table.add_column("count", justify="right")
        for category in snapshot.categories:
            style = "reverse" if category.selected else ""
            table.add_row(Text(category.name), str(category.count), style=style)
        return table

    def _render_shortcuts(self, snapshot: BrowserSnapshot) -> Table:
        title = snapshot.selected_category or "select a category"
        table = Table(title=Text(title), expand=True)
        table.add_column("action")
        table.add_column("shortcut")
        for bound in snapshot.shortcuts:
            table.add_row(Text(bound.label), Text(str(bound.shortcut)), style="" if bound.enabled else "dim")
        return table
