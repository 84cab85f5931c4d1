import unicodedata
from typing import Iterator, Optional

from .rules import (
    EOT,
    MAY_BREAK,
    MUST_BREAK,
    NO_BREAK,
    PASS,
    Break,
    BreakState,
    BreakStrength,
    Rules,
    breakclass,
)

# This bends the UAX #14 line breaking rules, so the result is NOT a conformant
# implementation. The point is to find runs of whitespace in the same pass
# that finds the break opportunities, so that each run comes out as a single
# break tagged as space. Whitespace here is defined in a very Western-European
# way, and isn't likely to be right for every language.

IN_RUN = "inRun"

# Line break classes that defer to their own rule before an ordinary space.
DEFERS_BEFORE_SPACE = {"ZW", "OP", "QU", "CL", "CP", "B2"}


def isspaceclass(cls: str) -> bool:
    return cls == "SP"


def isspaceseparator(char: str) -> bool:
    return len(char) == 1 and unicodedata.category(char) == "Zs"


def isfancyspace(char: str, cls: str) -> bool:
    if isspaceclass(cls):
        return True
    if cls != "BA":
        return False

    # Tabs, and things like U+1680 OGHAM SPACE MARK.
    return char == "\t" or isspaceseparator(char)


def initialSpaces(state: BreakState) -> BreakStrength:
    # Before LB2. Open a run if the text starts with spaces, and make sure a
    # run never survives past a character that isn't a space.
    if not state.cur.char:
        if isfancyspace(state.next.char, state.next.cls):
            state.extra[IN_RUN] = True
    elif not isfancyspace(state.cur.char, breakclass(state.cur.char)):
        state.extra[IN_RUN] = False
    return PASS


def trailingSpaces(state: BreakState) -> BreakStrength:
    # Replaces LB3. Spaces at the end still get tagged.
    if state.next.cls == EOT and state.pending > 0:
        if state.extra.get(IN_RUN):
            state.setProp("space", True)
        return MUST_BREAK
    return PASS


def spacesBreak(state: BreakState) -> BreakStrength:
    # Before spacesStop. Keep a run of spaces together, and tag it once it ends.
    if state.extra.get(IN_RUN):
        if not isfancyspace(state.next.char, state.next.cls):
            state.setProp("space", True)
            state.extra[IN_RUN] = False
            return MAY_BREAK
        return NO_BREAK
    return PASS


def spacesStart(state: BreakState) -> BreakStrength:
    # Replaces LB7. Break before a run of spaces.
    if state.next.cls in {"ZW", "ZWJ"}:
        return NO_BREAK

    if state.next.cls == "SP":
        if state.cur.cls in DEFERS_BEFORE_SPACE:
            return PASS
        state.extra[IN_RUN] = True
        return MAY_BREAK

    if isfancyspace(state.next.char, state.next.cls):
        state.extra[IN_RUN] = True
        return MAY_BREAK

    return PASS


def breakAfterSpace(state: BreakState) -> BreakStrength:
    # Replaces LB18.
    if state.cur.cls == "SP":
        state.setProp("space", True)
        return MAY_BREAK
    return PASS


class SpaceBreaker:
    def __init__(self, rules: Optional[Rules] = None) -> None:
        self.rules = rules if rules is not None else Rules()
        self.rules.insertBefore("LB2", "initialSpaces", initialSpaces)
        self.rules.replace("LB3", trailingSpaces)
        self.rules.insertBefore("spacesStop", "spacesBreak", spacesBreak)
        self.rules.replace("LB7", spacesStart)
        self.rules.replace("LB18", breakAfterSpace)

    def breaks(self, text: str) -> Iterator[Break]:
        return self.rules.breaks(text)
