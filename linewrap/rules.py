import unicodedata
from enum import Enum, auto
from functools import lru_cache
from typing import Any, Callable, Dict, Iterator, List, Tuple

from uniseg.linebreak import line_break


class BreakStrength(Enum):
    PASS = auto()
    NO_BREAK = auto()
    MAY_BREAK = auto()
    MUST_BREAK = auto()


PASS = BreakStrength.PASS
NO_BREAK = BreakStrength.NO_BREAK
MAY_BREAK = BreakStrength.MAY_BREAK
MUST_BREAK = BreakStrength.MUST_BREAK

# Pseudo-classes for the start and end of the text.
SOT = "sot"
EOT = "eot"

ZWJ_CHAR = "\u200d"

# Classes that reach across a following run of spaces (LB8, LB14 - LB17).
SPACE_CARRIERS = {"ZW", "OP", "QU", "CL", "CP", "B2"}

# Classes a combining mark can't attach to (LB9, LB10).
NO_ATTACH = {SOT, "BK", "CR", "LF", "NL", "SP", "ZW"}

# Classes that never allow a break before them, even after spaces.
NEVER_BEFORE = {"ZW", "WJ", "CL", "CP", "EX", "IS", "SY"}

HARD_BREAKS = {"BK", "CR", "LF", "NL"}
HANGUL = {"JL", "JV", "JT", "H2", "H3"}
ALPHA = {"AL", "HL"}
IDEOGRAPHIC = {"ID", "EB", "EM"}
AFFIXES = {"PR", "PO"}


@lru_cache(maxsize=4096)
def breakclass(char: str) -> str:
    prop = line_break(char)
    cls = str(getattr(prop, "name", prop))

    # LB1, resolve the classes that need context we don't have.
    if cls in {"AI", "SG", "XX"}:
        return "AL"
    if cls == "SA":
        return "CM" if unicodedata.category(char) in {"Mn", "Mc"} else "AL"
    if cls == "CJ":
        return "NS"
    return cls


def iswide(char: str) -> bool:
    return unicodedata.east_asian_width(char) in {"F", "W", "H"}


class Break:
    def __init__(
        self,
        text: str,
        position: int,
        *,
        space: bool = False,
        verbatim: bool = False,
        required: bool = False,
    ) -> None:
        self.text = text
        self.position = position
        self.space = space
        self.verbatim = verbatim
        self.required = required

    def __repr__(self) -> str:
        return "Break(text={!r}, position={}, space={}, verbatim={}, required={})".format(
            self.text, self.position, self.space, self.verbatim, self.required
        )


class CodePoint:
    def __init__(self, char: str, cls: str, index: int) -> None:
        self.char = char
        self.cls = cls
        self.index = index

    def __repr__(self) -> str:
        return f"CodePoint({self.char!r}, {self.cls}, {self.index})"


class BreakState:
    """
    Evaluation state for one pass over a string. Rules look at the pair
    (cur, next) and decide whether a break may happen between them. While
    inside a run of spaces that follows one of the SPACE_CARRIERS classes,
    cur keeps the class of the character before the spaces and spaces is set,
    so that the "X SP* ×" rules can be written pairwise.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.cur = CodePoint("", SOT, -1)
        self.next = self.__point(0)
        self.prevClass = SOT
        self.spaces = False
        self.regionalCount = 0
        self.lastBreak = 0

        # Scratch space for rule overlays, and properties for the pending break.
        self.extra: Dict[str, Any] = {}
        self.props: Dict[str, Any] = {}

    @property
    def pending(self) -> int:
        return self.next.index - self.lastBreak

    def setProp(self, name: str, value: Any) -> None:
        self.props[name] = value

    def __point(self, index: int) -> CodePoint:
        if index >= len(self.text):
            return CodePoint("", EOT, len(self.text))
        char = self.text[index]
        return CodePoint(char, breakclass(char), index)

    def advance(self) -> None:
        prev = self.cur
        cur = self.next
        spaces = False

        if cur.cls in {"CM", "ZWJ"}:
            if prev.cls in NO_ATTACH or self.spaces:
                # LB10, a mark with nothing to attach to acts like a letter.
                cur = CodePoint(cur.char, "AL", cur.index)
            else:
                # LB9, X CM* acts like X.
                cur = CodePoint(cur.char, prev.cls, cur.index)
        elif cur.cls == "SP" and (self.spaces or prev.cls in SPACE_CARRIERS):
            cur = CodePoint(cur.char, prev.cls, cur.index)
            spaces = True

        if self.next.cls == "RI":
            self.regionalCount += 1
        elif cur.cls != "RI":
            self.regionalCount = 0

        self.prevClass = prev.cls
        self.cur = cur
        self.spaces = spaces
        self.next = self.__point(cur.index + 1)


Rule = Callable[[BreakState], BreakStrength]


def noBreakAtStart(state: BreakState) -> BreakStrength:
    # LB2: sot ×
    if state.cur.cls == SOT:
        return NO_BREAK
    return PASS


def breakAtEnd(state: BreakState) -> BreakStrength:
    # LB3: ! eot
    if state.next.cls == EOT:
        return MUST_BREAK
    return PASS


def breakAfterHard(state: BreakState) -> BreakStrength:
    # LB4: BK !
    if state.cur.cls == "BK":
        return MUST_BREAK
    return PASS


def breakAfterNewline(state: BreakState) -> BreakStrength:
    # LB5: CR × LF, (CR | LF | NL) !
    if state.cur.cls == "CR" and state.next.cls == "LF":
        return NO_BREAK
    if state.cur.cls in {"CR", "LF", "NL"}:
        return MUST_BREAK
    return PASS


def noBreakBeforeNewline(state: BreakState) -> BreakStrength:
    # LB6: × (BK | CR | LF | NL)
    if state.next.cls in HARD_BREAKS:
        return NO_BREAK
    return PASS


def spacesStop(state: BreakState) -> BreakStrength:
    # End of an X SP* run, for the classes that reach across spaces.
    if not state.spaces or state.next.cls == "SP" or state.next.cls in NEVER_BEFORE:
        return PASS

    lead = state.cur.cls
    after = state.next.cls
    if lead == "OP":
        return NO_BREAK
    if lead == "QU" and after == "OP":
        return NO_BREAK
    if lead in {"CL", "CP"} and after == "NS":
        return NO_BREAK
    if lead == "B2" and after == "B2":
        return NO_BREAK
    return MAY_BREAK


def noBreakBeforeSpaces(state: BreakState) -> BreakStrength:
    # LB7: × SP, × ZW
    if state.next.cls in {"SP", "ZW"}:
        return NO_BREAK
    return PASS


def breakAfterZeroWidth(state: BreakState) -> BreakStrength:
    # LB8: ZW SP* ÷
    if state.cur.cls == "ZW":
        return NO_BREAK if state.next.cls == "SP" else MAY_BREAK
    return PASS


def noBreakAfterJoiner(state: BreakState) -> BreakStrength:
    # LB8a: ZWJ ×
    if state.cur.char == ZWJ_CHAR:
        return NO_BREAK
    return PASS


def noBreakBeforeMarks(state: BreakState) -> BreakStrength:
    # LB9: X (CM | ZWJ)* is treated as X.
    if (
        state.next.cls in {"CM", "ZWJ"}
        and state.cur.cls not in NO_ATTACH
        and not state.spaces
    ):
        return NO_BREAK
    return PASS


def wordJoiner(state: BreakState) -> BreakStrength:
    # LB11: × WJ, WJ ×
    if state.cur.cls == "WJ" or state.next.cls == "WJ":
        return NO_BREAK
    return PASS


def glueAfter(state: BreakState) -> BreakStrength:
    # LB12: GL ×
    if state.cur.cls == "GL":
        return NO_BREAK
    return PASS


def glueBefore(state: BreakState) -> BreakStrength:
    # LB12a: [^SP BA HY] × GL
    if (
        state.next.cls == "GL"
        and state.cur.cls not in {"SP", "BA", "HY"}
        and not state.spaces
    ):
        return NO_BREAK
    return PASS


def noBreakBeforeClosing(state: BreakState) -> BreakStrength:
    # LB13: × CL, × CP, × EX, × IS, × SY
    if state.next.cls in {"CL", "CP", "EX", "IS", "SY"}:
        return NO_BREAK
    return PASS


def afterOpening(state: BreakState) -> BreakStrength:
    # LB14: OP SP* ×
    if state.cur.cls == "OP":
        return NO_BREAK
    return PASS


def quoteBeforeOpening(state: BreakState) -> BreakStrength:
    # LB15: QU SP* × OP
    if state.cur.cls == "QU" and state.next.cls in {"SP", "OP"}:
        return NO_BREAK
    return PASS


def closingBeforeNonstarter(state: BreakState) -> BreakStrength:
    # LB16: (CL | CP) SP* × NS
    if state.cur.cls in {"CL", "CP"} and state.next.cls in {"SP", "NS"}:
        return NO_BREAK
    return PASS


def betweenDashes(state: BreakState) -> BreakStrength:
    # LB17: B2 SP* × B2
    if state.cur.cls == "B2" and state.next.cls in {"SP", "B2"}:
        return NO_BREAK
    return PASS


def breakAfterSpaces(state: BreakState) -> BreakStrength:
    # LB18: SP ÷
    if state.cur.cls == "SP":
        return MAY_BREAK
    return PASS


def quotes(state: BreakState) -> BreakStrength:
    # LB19: × QU, QU ×
    if state.cur.cls == "QU" or state.next.cls == "QU":
        return NO_BREAK
    return PASS


def contingent(state: BreakState) -> BreakStrength:
    # LB20: ÷ CB, CB ÷
    if state.cur.cls == "CB" or state.next.cls == "CB":
        return MAY_BREAK
    return PASS


def hyphensAndAfters(state: BreakState) -> BreakStrength:
    # LB21: × BA, × HY, × NS, BB ×
    if state.next.cls in {"BA", "HY", "NS"} or state.cur.cls == "BB":
        return NO_BREAK
    return PASS


def hebrewHyphen(state: BreakState) -> BreakStrength:
    # LB21a: HL (HY | BA) ×
    if state.prevClass == "HL" and state.cur.cls in {"HY", "BA"}:
        return NO_BREAK
    return PASS


def solidusHebrew(state: BreakState) -> BreakStrength:
    # LB21b: SY × HL
    if state.cur.cls == "SY" and state.next.cls == "HL":
        return NO_BREAK
    return PASS


def inseparable(state: BreakState) -> BreakStrength:
    # LB22: × IN
    if state.next.cls == "IN":
        return NO_BREAK
    return PASS


def lettersAndNumbers(state: BreakState) -> BreakStrength:
    # LB23: (AL | HL) × NU, NU × (AL | HL)
    if state.cur.cls in ALPHA and state.next.cls == "NU":
        return NO_BREAK
    if state.cur.cls == "NU" and state.next.cls in ALPHA:
        return NO_BREAK
    return PASS


def ideographicAffixes(state: BreakState) -> BreakStrength:
    # LB23a: PR × (ID | EB | EM), (ID | EB | EM) × PO
    if state.cur.cls == "PR" and state.next.cls in IDEOGRAPHIC:
        return NO_BREAK
    if state.cur.cls in IDEOGRAPHIC and state.next.cls == "PO":
        return NO_BREAK
    return PASS


def letterAffixes(state: BreakState) -> BreakStrength:
    # LB24: (PR | PO) × (AL | HL), (AL | HL) × (PR | PO)
    if state.cur.cls in AFFIXES and state.next.cls in ALPHA:
        return NO_BREAK
    if state.cur.cls in ALPHA and state.next.cls in AFFIXES:
        return NO_BREAK
    return PASS


def numbers(state: BreakState) -> BreakStrength:
    # LB25, pairwise form.
    cur = state.cur.cls
    after = state.next.cls
    if cur in {"CL", "CP", "NU"} and after in AFFIXES:
        return NO_BREAK
    if cur in AFFIXES and after in {"OP", "NU"}:
        return NO_BREAK
    if cur in {"HY", "IS", "NU", "SY"} and after == "NU":
        return NO_BREAK
    return PASS


def hangulSyllables(state: BreakState) -> BreakStrength:
    # LB26
    cur = state.cur.cls
    after = state.next.cls
    if cur == "JL" and after in {"JL", "JV", "H2", "H3"}:
        return NO_BREAK
    if cur in {"JV", "H2"} and after in {"JV", "JT"}:
        return NO_BREAK
    if cur in {"JT", "H3"} and after == "JT":
        return NO_BREAK
    return PASS


def hangulAffixes(state: BreakState) -> BreakStrength:
    # LB27
    if state.cur.cls in HANGUL and state.next.cls == "PO":
        return NO_BREAK
    if state.cur.cls == "PR" and state.next.cls in HANGUL:
        return NO_BREAK
    return PASS


def letters(state: BreakState) -> BreakStrength:
    # LB28: (AL | HL) × (AL | HL)
    if state.cur.cls in ALPHA and state.next.cls in ALPHA:
        return NO_BREAK
    return PASS


def infixLetters(state: BreakState) -> BreakStrength:
    # LB29: IS × (AL | HL)
    if state.cur.cls == "IS" and state.next.cls in ALPHA:
        return NO_BREAK
    return PASS


def parentheses(state: BreakState) -> BreakStrength:
    # LB30: (AL | HL | NU) × OP, CP × (AL | HL | NU), narrow brackets only.
    if (
        state.cur.cls in {"AL", "HL", "NU"}
        and state.next.cls == "OP"
        and not iswide(state.next.char)
    ):
        return NO_BREAK
    if (
        state.cur.cls == "CP"
        and state.next.cls in {"AL", "HL", "NU"}
        and not iswide(state.cur.char)
    ):
        return NO_BREAK
    return PASS


def regionalIndicators(state: BreakState) -> BreakStrength:
    # LB30a: pairs of regional indicators stay together.
    if (
        state.cur.cls == "RI"
        and state.next.cls == "RI"
        and state.regionalCount % 2 == 1
    ):
        return NO_BREAK
    return PASS


def emojiModifiers(state: BreakState) -> BreakStrength:
    # LB30b: EB × EM
    if state.cur.cls == "EB" and state.next.cls == "EM":
        return NO_BREAK
    return PASS


def breakEverywhere(state: BreakState) -> BreakStrength:
    # LB31: ALL ÷ ALL
    return MAY_BREAK


GENERIC_RULES: List[Tuple[str, Rule]] = [
    ("LB2", noBreakAtStart),
    ("LB3", breakAtEnd),
    ("LB4", breakAfterHard),
    ("LB5", breakAfterNewline),
    ("LB6", noBreakBeforeNewline),
    ("spacesStop", spacesStop),
    ("LB7", noBreakBeforeSpaces),
    ("LB8", breakAfterZeroWidth),
    ("LB8a", noBreakAfterJoiner),
    ("LB9", noBreakBeforeMarks),
    ("LB11", wordJoiner),
    ("LB12", glueAfter),
    ("LB12a", glueBefore),
    ("LB13", noBreakBeforeClosing),
    ("LB14", afterOpening),
    ("LB15", quoteBeforeOpening),
    ("LB16", closingBeforeNonstarter),
    ("LB17", betweenDashes),
    ("LB18", breakAfterSpaces),
    ("LB19", quotes),
    ("LB20", contingent),
    ("LB21", hyphensAndAfters),
    ("LB21a", hebrewHyphen),
    ("LB21b", solidusHebrew),
    ("LB22", inseparable),
    ("LB23", lettersAndNumbers),
    ("LB23a", ideographicAffixes),
    ("LB24", letterAffixes),
    ("LB25", numbers),
    ("LB26", hangulSyllables),
    ("LB27", hangulAffixes),
    ("LB28", letters),
    ("LB29", infixLetters),
    ("LB30", parentheses),
    ("LB30a", regionalIndicators),
    ("LB30b", emojiModifiers),
    ("LB31", breakEverywhere),
]


class Rules:
    """
    An ordered table of named line breaking rules, loosely following UAX #14.
    For each pair of adjacent code points the rules are consulted in order,
    and the first one that doesn't PASS decides. Rules can be inserted before
    or swapped out by name, which is how overlays customize the breaking
    without touching the rest of the table. Each instance gets its own copy of
    the table, and every call to breaks() gets its own evaluation state.
    """

    def __init__(self) -> None:
        self.__rules: List[Tuple[str, Rule]] = list(GENERIC_RULES)

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.__rules]

    def __find(self, name: str) -> int:
        for i, (ruleName, _) in enumerate(self.__rules):
            if ruleName == name:
                return i
        raise KeyError(f"Unknown rule {name}")

    def insertBefore(self, name: str, newName: str, rule: Rule) -> None:
        if newName in self.names:
            raise KeyError(f"Rule {newName} already exists")
        self.__rules.insert(self.__find(name), (newName, rule))

    def replace(self, name: str, rule: Rule) -> None:
        self.__rules[self.__find(name)] = (name, rule)

    def evaluate(self, state: BreakState) -> BreakStrength:
        for _, rule in self.__rules:
            strength = rule(state)
            if strength is not PASS:
                return strength
        return MAY_BREAK

    def breaks(self, text: str) -> Iterator[Break]:
        if not text:
            return

        state = BreakState(text)
        while True:
            strength = self.evaluate(state)

            # Never emit empty segments, a break right after another one is moot.
            if strength in {MAY_BREAK, MUST_BREAK} and state.pending > 0:
                position = state.next.index
                yield Break(
                    text[state.lastBreak:position],
                    position,
                    space=bool(state.props.get("space")),
                    required=strength is MUST_BREAK,
                )
                state.lastBreak = position
            state.props = {}

            if state.next.cls == EOT:
                return
            state.advance()
