import pytest

from exabind.keys import CharKey, FunctionKey, MODIFIER_PRECEDENCE, ModifierKey, NamedKey
from exabind.shortcut import Action, Shortcut, canonicalize

CTRL = ModifierKey.LEFT_CONTROL
ALT = ModifierKey.LEFT_ALT
META = ModifierKey.LEFT_META
SHIFT = ModifierKey.LEFT_SHIFT


def test_canonicalize_orders_modifiers_by_precedence() -> None:
    assert canonicalize([CTRL, META, CharKey("f")]) == (META, CTRL, CharKey("f"))
    assert canonicalize([CTRL, FunctionKey(7), SHIFT]) == (CTRL, SHIFT, FunctionKey(7))


def test_canonicalize_deduplicates_modifiers_and_keeps_key_order() -> None:
    tokens = [CharKey("a"), ALT, CharKey("b"), ALT, CTRL]
    assert canonicalize(tokens) == (CTRL, ALT, CharKey("a"), CharKey("b"))


def test_canonicalize_is_idempotent() -> None:
    samples = [
        [SHIFT, CharKey("x"), META, ALT, CTRL, CTRL],
        [NamedKey.DOWN, ModifierKey.RIGHT_ALT, ModifierKey.ISO_LEVEL_3_SHIFT],
        list(reversed(MODIFIER_PRECEDENCE)) + [FunctionKey(1)],
        [CharKey("q")],
    ]
    for tokens in samples:
        once = canonicalize(tokens)
        assert canonicalize(once) == once


def test_canonical_modifiers_follow_precedence() -> None:
    keys = canonicalize([*reversed(MODIFIER_PRECEDENCE), CharKey("z"), *MODIFIER_PRECEDENCE])
    assert keys[:-1] == MODIFIER_PRECEDENCE
    assert keys[-1] == CharKey("z")


def test_shortcut_canonicalizes_on_construction() -> None:
    shortcut = Shortcut((CharKey("f"), CTRL, META))
    assert shortcut.keys == (META, CTRL, CharKey("f"))
    assert shortcut == Shortcut((META, CTRL, CharKey("f")))


def test_shortcut_rejects_empty() -> None:
    with pytest.raises(ValueError, match="empty shortcut"):
        Shortcut(())


def test_shortcut_uses_modifier() -> None:
    shortcut = Shortcut((CTRL, ALT, NamedKey.ESCAPE))
    assert shortcut.uses_modifier(CTRL)
    assert shortcut.uses_modifier(ALT)
    assert not shortcut.uses_modifier(SHIFT)


def test_shortcut_and_action_rendering() -> None:
    first = Shortcut((CTRL, ALT, NamedKey.ESCAPE))
    second = Shortcut((META, ALT, NamedKey.DOWN))
    assert str(first) == "CTRL ALT ESC"

    action = Action("Kill Window", (first, second))
    assert str(action) == "Kill Window: CTRL ALT ESC, Meta ALT ↓"


def test_action_requires_shortcuts() -> None:
    with pytest.raises(ValueError, match="action without shortcuts"):
        Action("Switch to Desktop 10", ())


def test_action_stores_tuple() -> None:
    action = Action("Close", [Shortcut((ALT, FunctionKey(4)))])  # type: ignore[arg-type]
    assert isinstance(action.shortcuts, tuple)
