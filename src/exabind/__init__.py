"""exabind package."""

__all__ = [
    "Action",
    "KeyMap",
    "KeymapParseError",
    "Shortcut",
    "load_keymap",
    "parse_kglobalshortcuts",
]
__version__ = "0.1.0"

from .grammar import KeymapParseError
from .kde import parse_kglobalshortcuts
from .keymap import KeyMap
from .loader import load_keymap
from .shortcut import Action, Shortcut
