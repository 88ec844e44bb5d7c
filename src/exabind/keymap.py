"""Immutable keymap model and its read-only query surface."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from .shortcut import Action


class KeyMap:
    """Actions grouped by category, as ingested from one shortcuts document.

    Category order is not part of the contract; callers that need a stable
    order sort the output of ``categories()`` themselves.
    """

    __slots__ = ("_name", "_actions")

    def __init__(self, name: str, actions: Mapping[str, Sequence[Action]]) -> None:
        frozen: dict[str, tuple[Action, ...]] = {}
        for category, category_actions in actions.items():
            items = tuple(category_actions)
            if not items:
                raise ValueError(f"empty category: {category}")
            frozen[category] = items

        self._name = str(name)
        self._actions: Mapping[str, tuple[Action, ...]] = MappingProxyType(frozen)

    @property
    def name(self) -> str:
        return self._name

    def categories(self) -> list[tuple[str, int]]:
        return [(category, len(actions)) for category, actions in self._actions.items()]

    def actions_by_category(self, category: str) -> tuple[Action, ...]:
        return self._actions.get(category, ())

    def actions(self) -> Iterator[Action]:
        for actions in self._actions.values():
            yield from actions

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"KeyMap(name={self._name!r}, categories={len(self._actions)})"

    def __str__(self) -> str:
        lines = [f"keymap name={self._name}:"]
        lines.extend(f"\t{action}" for action in self.actions())
        return "\n".join(lines)
