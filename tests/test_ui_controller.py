import pytest

from exabind.kde import parse_kglobalshortcuts
from exabind.keymap import KeyMap
from exabind.keys import ModifierKey
from exabind.ui.controller import KeymapBrowser

DOCUMENT = """\
[kwin]
close=Alt+F4,Alt+F4,Close Window
kill=Meta+Ctrl+Esc,Meta+Ctrl+Esc,Kill Window
zoom=Meta+-\\tCtrl+-,none,Zoom Out

[plasmashell]
_k_friendly_name=Plasma
dashboard=Ctrl+F12,Ctrl+F12,Show Desktop

[ksmserver]
_k_friendly_name=Session Management
lock=Meta+L,Meta+L,Lock Session
"""


def _new_browser() -> KeymapBrowser:
    return KeymapBrowser(parse_kglobalshortcuts(DOCUMENT))


def test_categories_are_sorted_case_insensitively() -> None:
    browser = _new_browser()
    assert browser.category_names == ["kwin", "Plasma", "Session Management"]

    snap = browser.snapshot()
    assert snap.keymap_name == "KDE"
    assert [(c.name, c.count) for c in snap.categories] == [
        ("kwin", 3),
        ("Plasma", 1),
        ("Session Management", 1),
    ]
    assert snap.selected_category is None
    assert snap.shortcuts == ()
    assert snap.status == "ready"


def test_next_and_previous_category_wrap_around() -> None:
    browser = _new_browser()

    assert browser.next_category() == "category kwin"
    assert browser.next_category() == "category Plasma"
    assert browser.next_category() == "category Session Management"
    assert browser.next_category() == "category kwin"
    assert browser.previous_category() == "category Session Management"

    browser.deselect_category()
    assert browser.category() is None
    assert browser.previous_category() == "category kwin"


def test_selected_category_is_flagged_in_snapshot() -> None:
    browser = _new_browser()
    browser.next_category()
    browser.next_category()

    snap = browser.snapshot()
    assert snap.selected_category == "Plasma"
    assert [c.selected for c in snap.categories] == [False, True, False]
    assert [b.label for b in snap.shortcuts] == ["Show Desktop"]


def test_filtered_actions_without_filters_enables_everything() -> None:
    browser = _new_browser()
    browser.next_category()

    bound = browser.filtered_actions()
    assert [b.label for b in bound] == ["Close Window", "Kill Window", "Zoom Out", "Zoom Out"]
    assert all(b.enabled for b in bound)


def test_modifier_filters_match_exactly() -> None:
    browser = _new_browser()
    browser.next_category()

    assert browser.toggle_filter(ModifierKey.LEFT_META) == "filters: left-meta"
    enabled = [(b.label, str(b.shortcut)) for b in browser.filtered_actions() if b.enabled]
    assert enabled == [("Zoom Out", "Meta -")]

    assert browser.toggle_filter(ModifierKey.RIGHT_CONTROL) == "filters: left-control left-meta"
    enabled = [b.label for b in browser.filtered_actions() if b.enabled]
    assert enabled == ["Kill Window"]
    assert browser.filters == (ModifierKey.LEFT_CONTROL, ModifierKey.LEFT_META)

    browser.toggle_filter(ModifierKey.LEFT_CONTROL)
    assert browser.toggle_filter(ModifierKey.LEFT_SUPER) == "filters cleared"
    assert all(b.enabled for b in browser.filtered_actions())


def test_toggle_filter_rejects_unsupported_modifier() -> None:
    browser = _new_browser()
    with pytest.raises(ValueError, match="cannot filter on modifier"):
        browser.toggle_filter(ModifierKey.LEFT_HYPER)


def test_empty_keymap_navigation() -> None:
    browser = KeymapBrowser(KeyMap("KDE", {}))
    assert browser.next_category() == "no categories"
    assert browser.previous_category() == "no categories"
    assert browser.category() is None
    assert browser.filtered_actions() == []
