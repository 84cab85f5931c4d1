from typing import List, Tuple

import pytest

from linewrap.rules import (
    MAY_BREAK,
    NO_BREAK,
    BreakState,
    BreakStrength,
    Rules,
    breakclass,
)


def segments(rules: Rules, text: str) -> List[Tuple[str, int]]:
    return [(brk.text, brk.position) for brk in rules.breaks(text)]


@pytest.mark.parametrize(
    "char,cls",
    [
        ("a", "AL"),
        (" ", "SP"),
        ("\n", "LF"),
        ("(", "OP"),
        (")", "CP"),
        ("漢", "ID"),
        ("\u200b", "ZW"),
        # Thai letters need a dictionary to break properly, so they act as letters.
        ("\u0e01", "AL"),
    ],
)
def test_breakclass(char: str, cls: str) -> None:
    assert breakclass(char) == cls


def test_table_order() -> None:
    names = Rules().names
    assert names[0] == "LB2"
    assert names[-1] == "LB31"
    assert names.index("LB6") < names.index("spacesStop") < names.index("LB7")


def test_empty() -> None:
    assert list(Rules().breaks("")) == []


def test_break_after_space() -> None:
    assert segments(Rules(), "foo bar") == [("foo ", 4), ("bar", 7)]


def test_last_break_is_required() -> None:
    breaks = list(Rules().breaks("foo bar"))
    assert [brk.required for brk in breaks] == [False, True]


def test_newline_must_break() -> None:
    breaks = list(Rules().breaks("a\nb"))
    assert [(brk.text, brk.required) for brk in breaks] == [("a\n", True), ("b", True)]


def test_brackets() -> None:
    assert segments(Rules(), "(a b)") == [("(a ", 3), ("b)", 5)]


def test_no_break_after_opening_and_spaces() -> None:
    assert segments(Rules(), "( a") == [("( a", 3)]


def test_combining_marks_stay_attached() -> None:
    assert segments(Rules(), "e\u0301 x") == [("e\u0301 ", 3), ("x", 4)]


def test_ideographs_break_anywhere() -> None:
    assert segments(Rules(), "漢字") == [("漢", 1), ("字", 2)]


def test_regional_indicator_pairs() -> None:
    flags = "\U0001f1ef\U0001f1f5\U0001f1fa\U0001f1f8"
    assert [brk.position for brk in Rules().breaks(flags)] == [2, 4]


def test_replace() -> None:
    rules = Rules()
    rules.replace("LB18", lambda state: NO_BREAK)
    assert segments(rules, "foo bar") == [("foo bar", 7)]


def test_replace_does_not_leak_between_instances() -> None:
    rules = Rules()
    rules.replace("LB18", lambda state: NO_BREAK)
    assert segments(Rules(), "foo bar") == [("foo ", 4), ("bar", 7)]


def test_insert_before() -> None:
    rules = Rules()
    rules.insertBefore("LB2", "everywhere", lambda state: MAY_BREAK)
    assert rules.names[0] == "everywhere"
    assert [brk.position for brk in rules.breaks("abc")] == [1, 2, 3]


def test_unknown_rule() -> None:
    with pytest.raises(KeyError):
        Rules().replace("LB99", lambda state: NO_BREAK)
    with pytest.raises(KeyError):
        Rules().insertBefore("LB99", "mine", lambda state: NO_BREAK)


def test_duplicate_rule() -> None:
    with pytest.raises(KeyError):
        Rules().insertBefore("LB2", "LB31", lambda state: NO_BREAK)


def test_props_are_set_per_break() -> None:
    def tagspaces(state: BreakState) -> BreakStrength:
        if state.cur.cls == "SP":
            state.setProp("space", True)
        return BreakStrength.PASS

    rules = Rules()
    rules.insertBefore("LB18", "tagspaces", tagspaces)
    assert [brk.space for brk in rules.breaks("a b c")] == [True, True, False]
