"""Shortcut and action values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .keys import MODIFIER_PRECEDENCE, KeyToken, ModifierKey, format_key, is_modifier


def canonicalize(tokens: Iterable[KeyToken]) -> tuple[KeyToken, ...]:
    """Order a key combination: modifiers first by precedence, then the rest as given."""
    modifiers: set[ModifierKey] = set()
    keys: list[KeyToken] = []
    for token in tokens:
        if is_modifier(token):
            modifiers.add(token)
        else:
            keys.append(token)

    ordered = [mod for mod in MODIFIER_PRECEDENCE if mod in modifiers]
    return (*ordered, *keys)


@dataclass(frozen=True)
class Shortcut:
    """One key combination bound to an action."""

    keys: tuple[KeyToken, ...]

    def __post_init__(self) -> None:
        keys = canonicalize(self.keys)
        if not keys:
            raise ValueError("empty shortcut")
        object.__setattr__(self, "keys", keys)

    def uses_modifier(self, modifier: ModifierKey) -> bool:
        return modifier in self.keys

    def __str__(self) -> str:
        return " ".join(format_key(key) for key in self.keys)


@dataclass(frozen=True)
class Action:
    """Named action reachable through one or more shortcuts."""

    name: str
    shortcuts: tuple[Shortcut, ...]

    def __post_init__(self) -> None:
        shortcuts = tuple(self.shortcuts)
        if not shortcuts:
            raise ValueError(f"action without shortcuts: {self.name}")
        object.__setattr__(self, "shortcuts", shortcuts)

    def __str__(self) -> str:
        return f"{self.name}: {', '.join(str(s) for s in self.shortcuts)}"
