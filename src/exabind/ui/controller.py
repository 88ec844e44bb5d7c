"""UI adapter that maps user input to keymap browsing state."""

from __future__ import annotations

from dataclasses import dataclass

from ..keymap import KeyMap
from ..keys import ModifierKey
from ..shortcut import Shortcut

FILTER_MODIFIERS: tuple[ModifierKey, ...] = (
    ModifierKey.LEFT_CONTROL,
    ModifierKey.LEFT_META,
    ModifierKey.LEFT_ALT,
    ModifierKey.LEFT_SHIFT,
)

_FILTER_ALIASES: dict[ModifierKey, ModifierKey] = {
    ModifierKey.LEFT_CONTROL: ModifierKey.LEFT_CONTROL,
    ModifierKey.RIGHT_CONTROL: ModifierKey.LEFT_CONTROL,
    ModifierKey.LEFT_META: ModifierKey.LEFT_META,
    ModifierKey.RIGHT_META: ModifierKey.LEFT_META,
    ModifierKey.LEFT_SUPER: ModifierKey.LEFT_META,
    ModifierKey.RIGHT_SUPER: ModifierKey.LEFT_META,
    ModifierKey.LEFT_ALT: ModifierKey.LEFT_ALT,
    ModifierKey.RIGHT_ALT: ModifierKey.LEFT_ALT,
    ModifierKey.LEFT_SHIFT: ModifierKey.LEFT_SHIFT,
    ModifierKey.RIGHT_SHIFT: ModifierKey.LEFT_SHIFT,
}


@dataclass(frozen=True)
class BoundShortcut:
    """One shortcut of an action, flagged by the active modifier filters."""

    label: str
    shortcut: Shortcut
    enabled: bool


@dataclass(frozen=True)
class CategorySnapshot:
    name: str
    count: int
    selected: bool


@dataclass(frozen=True)
class BrowserSnapshot:
    """Immutable UI state for rendering."""

    keymap_name: str
    categories: tuple[CategorySnapshot, ...]
    selected_category: str | None
    shortcuts: tuple[BoundShortcut, ...]
    filters: tuple[ModifierKey, ...]
    status: str


class KeymapBrowser:
    """Stateful adapter between UI events and the keymap query surface."""

    def __init__(self, keymap: KeyMap) -> None:
        self.keymap = keymap
        self._categories = sorted(keymap.categories(), key=lambda item: (item[0].casefold(), item[0]))
        self._current: int | None = None
        self._filters: set[ModifierKey] = set()
        self._status = "ready"

    @property
    def category_names(self) -> list[str]:
        return [name for name, _count in self._categories]

    @property
    def filters(self) -> tuple[ModifierKey, ...]:
        return tuple(mod for mod in FILTER_MODIFIERS if mod in self._filters)

    def category(self) -> str | None:
        if self._current is None:
            return None
        return self._categories[self._current][0]

    def next_category(self) -> str:
        if not self._categories:
            return self._set_status("no categories")
        if self._current is None or self._current == len(self._categories) - 1:
            self._current = 0
        else:
            self._current += 1
        return self._set_status(f"category {self.category()}")

    def previous_category(self) -> str:
        if not self._categories:
            return self._set_status("no categories")
        if self._current is None:
            self._current = 0
        elif self._current == 0:
            self._current = len(self._categories) - 1
        else:
            self._current -= 1
        return self._set_status(f"category {self.category()}")

    def deselect_category(self) -> str:
        self._current = None
        return self._set_status("ready")

    def toggle_filter(self, modifier: ModifierKey) -> str:
        target = _FILTER_ALIASES.get(modifier)
        if target is None:
            raise ValueError(f"cannot filter on modifier: {modifier.value}")

        if target in self._filters:
            self._filters.remove(target)
        else:
            self._filters.add(target)

        active = " ".join(mod.value for mod in self.filters)
        return self._set_status(f"filters: {active}" if active else "filters cleared")

    def filtered_actions(self) -> list[BoundShortcut]:
        category = self.category()
        if category is None:
            return []

        bound: list[BoundShortcut] = []
        for action in self.keymap.actions_by_category(category):
            for shortcut in action.shortcuts:
                bound.append(
                    BoundShortcut(
                        label=action.name,
                        shortcut=shortcut,
                        enabled=self._matches_filters(shortcut),
                    )
                )
        return bound

    def snapshot(self) -> BrowserSnapshot:
        categories = tuple(
            CategorySnapshot(name=name, count=count, selected=index == self._current)
            for index, (name, count) in enumerate(self._categories)
        )
        return BrowserSnapshot(
            keymap_name=self.keymap.name,
            categories=categories,
            selected_category=self.category(),
            shortcuts=tuple(self.filtered_actions()),
            filters=self.filters,
            status=self._status,
        )

    def _matches_filters(self, shortcut: Shortcut) -> bool:
        if not self._filters:
            return True
        return all(
            (mod in self._filters) == shortcut.uses_modifier(mod) for mod in FILTER_MODIFIERS
        )

    def _set_status(self, message: str) -> str:
        self._status = message
        return message
