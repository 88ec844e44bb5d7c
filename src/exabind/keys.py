"""Key identities that can appear in a shortcut."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


@dataclass(frozen=True)
class CharKey:
    """Character key, always stored lowercase."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"character key needs exactly one character: {self.char!r}")
        lowered = self.char.lower()
        # some characters lowercase to more than one code point
        if len(lowered) == 1:
            object.__setattr__(self, "char", lowered)


@dataclass(frozen=True)
class FunctionKey:
    """Function key F1..F12."""

    number: int

    def __post_init__(self) -> None:
        if not 1 <= self.number <= 12:
            raise ValueError(f"function key out of range: F{self.number}")


class ModifierKey(Enum):
    """Modifier keys, declared in canonical precedence order."""

    ISO_LEVEL_3_SHIFT = "iso-level-3-shift"
    ISO_LEVEL_5_SHIFT = "iso-level-5-shift"
    LEFT_HYPER = "left-hyper"
    RIGHT_HYPER = "right-hyper"
    LEFT_SUPER = "left-super"
    RIGHT_SUPER = "right-super"
    LEFT_META = "left-meta"
    RIGHT_META = "right-meta"
    LEFT_CONTROL = "left-control"
    RIGHT_CONTROL = "right-control"
    LEFT_ALT = "left-alt"
    RIGHT_ALT = "right-alt"
    LEFT_SHIFT = "left-shift"
    RIGHT_SHIFT = "right-shift"


class NamedKey(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    TAB = "tab"
    BACKTAB = "backtab"
    ESCAPE = "escape"
    DELETE = "delete"
    INSERT = "insert"
    ENTER = "enter"
    BACKSPACE = "backspace"
    CAPS_LOCK = "caps-lock"
    SCROLL_LOCK = "scroll-lock"
    NUM_LOCK = "num-lock"
    PRINT_SCREEN = "print-screen"
    PAUSE = "pause"
    MENU = "menu"


class MediaKey(Enum):
    PLAY = "play"
    PAUSE = "pause"
    PLAY_PAUSE = "play-pause"
    STOP = "stop"
    TRACK_NEXT = "track-next"
    TRACK_PREVIOUS = "track-previous"
    RAISE_VOLUME = "raise-volume"
    LOWER_VOLUME = "lower-volume"
    MUTE_VOLUME = "mute-volume"


KeyToken = CharKey | FunctionKey | ModifierKey | NamedKey | MediaKey

MODIFIER_PRECEDENCE: tuple[ModifierKey, ...] = tuple(ModifierKey)

_NAMED_LABELS = MappingProxyType(
    {
        NamedKey.UP: "↑",
        NamedKey.DOWN: "↓",
        NamedKey.LEFT: "←",
        NamedKey.RIGHT: "→",
        NamedKey.HOME: "Home",
        NamedKey.END: "End",
        NamedKey.PAGE_UP: "PgUp",
        NamedKey.PAGE_DOWN: "PgDn",
        NamedKey.TAB: "⇥",
        NamedKey.BACKTAB: "⇤",
        NamedKey.ESCAPE: "ESC",
        NamedKey.DELETE: "Del",
        NamedKey.INSERT: "Ins",
        NamedKey.ENTER: "⏎",
        NamedKey.BACKSPACE: "⌫",
        NamedKey.CAPS_LOCK: "CAPS",
        NamedKey.SCROLL_LOCK: "ScrL",
        NamedKey.NUM_LOCK: "NumLk",
        NamedKey.PRINT_SCREEN: "Prnt",
        NamedKey.PAUSE: "Paus",
        NamedKey.MENU: "Menu",
    }
)

_MEDIA_LABELS = MappingProxyType(
    {
        MediaKey.PLAY: "▶",
        MediaKey.PAUSE: "⏸",
        MediaKey.PLAY_PAUSE: "⏯",
        MediaKey.STOP: "⏹",
        MediaKey.TRACK_NEXT: "⏭",
        MediaKey.TRACK_PREVIOUS: "⏮",
        MediaKey.RAISE_VOLUME: "🔊",
        MediaKey.LOWER_VOLUME: "🔉",
        MediaKey.MUTE_VOLUME: "🔇",
    }
)

_MODIFIER_LABELS = MappingProxyType(
    {
        ModifierKey.ISO_LEVEL_3_SHIFT: "Iso3",
        ModifierKey.ISO_LEVEL_5_SHIFT: "Iso5",
        ModifierKey.LEFT_HYPER: "Hyp",
        ModifierKey.RIGHT_HYPER: "Hyp",
        ModifierKey.LEFT_SUPER: "⌘L",
        ModifierKey.RIGHT_SUPER: "⌘R",
        ModifierKey.LEFT_META: "Meta",
        ModifierKey.RIGHT_META: "Meta",
        ModifierKey.LEFT_CONTROL: "CTRL",
        ModifierKey.RIGHT_CONTROL: "CTRL",
        ModifierKey.LEFT_ALT: "ALT",
        ModifierKey.RIGHT_ALT: "ALT",
        ModifierKey.LEFT_SHIFT: "SHIFT",
        ModifierKey.RIGHT_SHIFT: "SHIFT",
    }
)


def is_modifier(token: KeyToken) -> bool:
    return isinstance(token, ModifierKey)


def format_key(token: KeyToken) -> str:
    """Render a key the way it is printed on a key cap."""
    if isinstance(token, FunctionKey):
        return f"F{token.number}"
    if isinstance(token, CharKey):
        if token.char == " ":
            return "␣"
        return token.char.upper()
    if isinstance(token, ModifierKey):
        return _MODIFIER_LABELS[token]
    if isinstance(token, NamedKey):
        return _NAMED_LABELS[token]
    if isinstance(token, MediaKey):
        return _MEDIA_LABELS[token]
    raise TypeError(f"not a key token: {token!r}")
