from typing import List, Tuple

import pytest

from linewrap.rules import Rules
from linewrap.spacebreaker import (
    SpaceBreaker,
    isfancyspace,
    isspaceclass,
    isspaceseparator,
)


def positions(text: str) -> List[Tuple[int, bool]]:
    return [(brk.position, brk.space) for brk in SpaceBreaker().breaks(text)]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", []),
        (" 1", [(1, True), (2, False)]),
        ("a ", [(1, False), (2, True)]),
        ("a\u200bb", [(2, False), (3, False)]),
        ("\u2014  \u2014", [(4, False)]),
        ('utf8 base64" Default:', [(4, False), (5, True), (13, False), (21, False)]),
        ("   ", [(3, True)]),
    ],
)
def test_breaks(text: str, expected: List[Tuple[int, bool]]) -> None:
    assert positions(text) == expected


def test_run_of_spaces_is_one_break() -> None:
    breaks = list(SpaceBreaker().breaks("foo    bar"))
    assert [(brk.text, brk.space) for brk in breaks] == [
        ("foo", False),
        ("    ", True),
        ("bar", False),
    ]


def test_mixed_spaces_coalesce() -> None:
    breaks = list(SpaceBreaker().breaks("a \t\u3000b"))
    assert [(brk.text, brk.space) for brk in breaks] == [
        ("a", False),
        (" \t\u3000", True),
        ("b", False),
    ]


def test_ogham_space_mark() -> None:
    breaks = list(SpaceBreaker().breaks("foo\u1680bar"))
    assert [(brk.text, brk.space) for brk in breaks] == [
        ("foo", False),
        ("\u1680", True),
        ("bar", False),
    ]


def test_newline_does_not_start_a_run() -> None:
    breaks = list(SpaceBreaker().breaks(" a\nb"))
    assert [(brk.text, brk.space) for brk in breaks] == [
        (" ", True),
        ("a\n", False),
        ("b", False),
    ]


def test_uses_given_rules() -> None:
    rules = Rules()
    breaker = SpaceBreaker(rules)
    assert breaker.rules is rules
    assert "initialSpaces" in rules.names
    assert "spacesBreak" in rules.names


def test_calls_do_not_share_state() -> None:
    breaker = SpaceBreaker()
    assert [brk.space for brk in breaker.breaks("a  ")] == [False, True]
    assert [brk.space for brk in breaker.breaks("b")] == [False]


@pytest.mark.parametrize(
    "char,cls,expected",
    [
        (" ", "SP", True),
        ("\t", "BA", True),
        ("\u1680", "BA", True),
        ("\u3000", "BA", True),
        ("-", "HY", False),
        ("\u2010", "BA", False),
        ("\xa0", "GL", False),
    ],
)
def test_isfancyspace(char: str, cls: str, expected: bool) -> None:
    assert isfancyspace(char, cls) is expected


def test_predicates() -> None:
    assert isspaceclass("SP")
    assert not isspaceclass("BA")
    assert isspaceseparator("\u2003")
    assert not isspaceseparator("\t")
    assert not isspaceseparator("a")
