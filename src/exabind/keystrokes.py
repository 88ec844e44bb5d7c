"""Keystroke field tokenizing for kglobalshortcutsrc entries."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from .keys import CharKey, FunctionKey, KeyToken, MediaKey, ModifierKey, NamedKey
from .shortcut import Shortcut

logger = logging.getLogger(__name__)

BINDING_SEPARATOR = "\\t"
KEY_SEPARATOR = "+"
BACKSLASH_ESCAPE = "\\\\\\\\"
EMPTY_BINDING = "none"

# escaped backslash | binding separator | key separator | stray backslash | key text
_LEXEME = re.compile(
    rf"({re.escape(BACKSLASH_ESCAPE)})|({re.escape(BINDING_SEPARATOR)})|({re.escape(KEY_SEPARATOR)})"
    rf"|(\\)|([^{re.escape(KEY_SEPARATOR)}\\]+)"
)

KEY_ALIASES: MappingProxyType[str, KeyToken] = MappingProxyType(
    {
        "ctrl": ModifierKey.LEFT_CONTROL,
        "control": ModifierKey.LEFT_CONTROL,
        "alt": ModifierKey.LEFT_ALT,
        "shift": ModifierKey.LEFT_SHIFT,
        "super": ModifierKey.LEFT_SUPER,
        "hyper": ModifierKey.LEFT_HYPER,
        "meta": ModifierKey.LEFT_META,
        **{f"f{n}": FunctionKey(n) for n in range(1, 13)},
        "up": NamedKey.UP,
        "down": NamedKey.DOWN,
        "left": NamedKey.LEFT,
        "right": NamedKey.RIGHT,
        "home": NamedKey.HOME,
        "end": NamedKey.END,
        "pgup": NamedKey.PAGE_UP,
        "pgdown": NamedKey.PAGE_DOWN,
        "tab": NamedKey.TAB,
        "backtab": NamedKey.BACKTAB,
        "esc": NamedKey.ESCAPE,
        "del": NamedKey.DELETE,
        "ins": NamedKey.INSERT,
        "return": NamedKey.ENTER,
        "enter": NamedKey.ENTER,
        "backspace": NamedKey.BACKSPACE,
        "capslock": NamedKey.CAPS_LOCK,
        "scrolllock": NamedKey.SCROLL_LOCK,
        "num": NamedKey.NUM_LOCK,
        "print": NamedKey.PRINT_SCREEN,
        "pause": NamedKey.PAUSE,
        "menu": NamedKey.MENU,
        "space": CharKey(" "),
        "media play": MediaKey.PLAY,
        "media pause": MediaKey.PAUSE,
        "media stop": MediaKey.STOP,
        "media next": MediaKey.TRACK_NEXT,
        "media previous": MediaKey.TRACK_PREVIOUS,
        "volume up": MediaKey.RAISE_VOLUME,
        "volume down": MediaKey.LOWER_VOLUME,
        "volume mute": MediaKey.MUTE_VOLUME,
    }
)


def parse_shortcuts(field: str) -> list[Shortcut]:
    """Parse a shortcut field into its alternative bindings, dropping empty ones."""
    shortcuts: list[Shortcut] = []
    for words in split_bindings(field):
        tokens = [token for token in map(tokenize_key, words) if token is not None]
        if tokens:
            shortcuts.append(Shortcut(tuple(tokens)))
    return shortcuts


def tokenize_key(word: str) -> KeyToken | None:
    """Map one key word to its token, or None when the word is unknown or empty."""
    if not word or word.lower() == EMPTY_BINDING:
        return None
    if len(word) == 1:
        if word.isprintable():
            return CharKey(word)
        logger.debug("dropping non-printable key %r", word)
        return None

    token = KEY_ALIASES.get(word.lower())
    if token is None:
        logger.debug("dropping unrecognized key %r", word)
    return token


def split_bindings(field: str) -> list[list[str]]:
    """Split a shortcut field into bindings of raw key words.

    A word holding a backslash outside the escaped-backslash sequence can
    never name a key and is left out.
    """
    bindings: list[list[str]] = []
    words: list[str] = []
    word = ""
    stray_backslash = False

    for match in _LEXEME.finditer(field):
        escaped, binding_sep, key_sep, stray, text = match.groups()
        if binding_sep:
            if not stray_backslash:
                words.append(word)
            bindings.append(words)
            words, word, stray_backslash = [], "", False
        elif key_sep:
            if word == "" and not stray_backslash:
                # '+' where a key is expected is the plus key itself
                word = KEY_SEPARATOR
            else:
                if not stray_backslash:
                    words.append(word)
                word, stray_backslash = "", False
        elif stray:
            stray_backslash = True
        else:
            word += "\\" if escaped else text

    if not stray_backslash:
        words.append(word)
    bindings.append(words)
    return bindings
