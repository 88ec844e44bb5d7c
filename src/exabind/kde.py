"""Build a keymap from KDE's kglobalshortcutsrc."""

from __future__ import annotations

import logging

from .grammar import parse_lines, resolve_categories
from .keymap import KeyMap
from .keystrokes import parse_shortcuts
from .shortcut import Action

KEYMAP_NAME = "KDE"
logger = logging.getLogger(__name__)


def parse_kglobalshortcuts(text: str) -> KeyMap:
    """Parse a complete kglobalshortcutsrc document.

    Raises KeymapParseError when the document breaks the line grammar.
    Entries without any usable binding are skipped; the default binding
    column is never used.
    """
    records = parse_lines(text)
    actions: dict[str, list[Action]] = {}

    for category, record in resolve_categories(records):
        shortcuts = parse_shortcuts(record.shortcut_field)
        if not shortcuts:
            logger.debug("skipping unbound action %r in %r", record.id, category)
            continue
        # sections sharing a label merge into one category
        actions.setdefault(category, []).append(Action(record.label, tuple(shortcuts)))

    keymap = KeyMap(KEYMAP_NAME, actions)
    logger.info(
        "parsed %d actions in %d categories from %d records",
        sum(count for _category, count in keymap.categories()),
        len(keymap),
        len(records),
    )
    return keymap
