"""TUI entrypoint."""

from __future__ import annotations

from .keymap import KeyMap
from .ui.app import ExabindTuiApp


def run_tui(keymap: KeyMap) -> None:
    app = ExabindTuiApp(keymap)
    app.run()
