"""Locate and read the shortcuts file."""

from __future__ import annotations

import logging
from pathlib import Path

from .kde import parse_kglobalshortcuts
from .keymap import KeyMap

DEFAULT_SHORTCUTS_FILE = "~/.config/kglobalshortcutsrc"
logger = logging.getLogger(__name__)


def resolve_shortcuts_path(path: str | Path | None = None) -> Path:
    resolved = Path(path if path is not None else DEFAULT_SHORTCUTS_FILE).expanduser()
    if not resolved.is_file():
        raise FileNotFoundError(
            f"shortcuts file not found at: {resolved}\n"
            "provide a path with --shortcuts-file or place the file at the default location"
        )
    return resolved


def load_keymap(path: str | Path | None = None) -> KeyMap:
    """Read and parse a shortcuts file, defaulting to the user's KDE config."""
    resolved = resolve_shortcuts_path(path)
    logger.info("loading shortcuts from %s", resolved)
    text = resolved.read_text(encoding="utf-8")
    return parse_kglobalshortcuts(text)
