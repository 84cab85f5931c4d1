import re
from enum import Enum, auto
from typing import Any, Callable, Optional, Pattern, Union

from .measure import WidthMeasurer, defaultlocale, iscjk
from .text import noescape

# Any run of line separators, along with the horizontal whitespace around it.
DEFAULT_NEWLINE: Pattern[str] = re.compile(
    r"[^\S\r\n\v\f\x85\u2028\u2029]*[\r\n\v\f\x85\u2028\u2029]+\s*"
)


class ConfigurationError(Exception):
    pass


class Overflow(Enum):
    # Let a word that is wider than the line run past the width, so that it is
    # not broken. This is the only way for long URLs to stay clickable.
    VISIBLE = auto()

    # Cut the word to size, drop the rest and end it with the ellipsis.
    CLIP = auto()

    # Split the word into pieces that fit, ending each but the last with the hyphen.
    ANYWHERE = auto()

    @classmethod
    def fromName(cls, name: str) -> "Overflow":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ConfigurationError(
                f'Invalid overflow type "{name}". Must be one of "visible", "clip", or "anywhere".'
            )


class WrapOptions:
    """
    Everything a Wrapper needs to know, validated once up front. Widths are
    in terminal cells and include the indentation. Options are read-only once
    built, so one instance can be shared between any number of wrappers.
    """

    def __init__(
        self,
        *,
        width: int = 80,
        indent: Union[int, str] = "",
        indent_char: str = " ",
        indent_first: bool = True,
        first_column: Optional[int] = None,
        newline: Union[None, str, Pattern[str]] = DEFAULT_NEWLINE,
        newline_replacement: str = " ",
        overflow: Overflow = Overflow.VISIBLE,
        ellipsis: str = "\u2026",
        hyphen: str = "-",
        locale: Optional[str] = None,
        include_styling_in_width: bool = False,
        cjk: Optional[bool] = None,
        escape: Callable[[str], str] = noescape,
        line_terminator: str = "\n",
        verbose: bool = False,
    ) -> None:
        if width <= 0:
            raise ConfigurationError(f"Width must be positive, got {width}")
        if not isinstance(overflow, Overflow):
            raise ConfigurationError(f'Invalid overflow style "{overflow}"')

        self.width = width
        self.indentFirst = indent_first
        self.firstColumn = first_column
        self.newline = re.compile(newline) if isinstance(newline, str) else newline
        self.newlineReplacement = newline_replacement
        self.overflow = overflow
        self.ellipsis = ellipsis
        self.hyphen = hyphen
        self.locale = locale or defaultlocale()
        self.cjk = iscjk(self.locale) if cjk is None else cjk
        self.includeStylingInWidth = include_styling_in_width
        self.escape = escape
        self.lineTerminator = line_terminator
        self.verbose = verbose

        self.measurer = WidthMeasurer(
            cjk=self.cjk, include_styling=include_styling_in_width
        )

        if isinstance(indent, int):
            if indent < 0:
                raise ConfigurationError(f"Indent must not be negative, got {indent}")
            self.indent = indent_char * indent
        else:
            self.indent = indent
        self.indentWidth = self.measurer.width(self.indent)

        # How far in the first line already starts.
        if indent_first or first_column is None:
            self.firstIndent = self.indentWidth
        else:
            self.firstIndent = first_column

        self.workingWidth = width - self.indentWidth
        if self.workingWidth <= 0:
            raise ConfigurationError(
                f"No space to wrap, incompatible width and indent: {self.workingWidth}"
            )

        self.replacementWidth = self.measurer.width(newline_replacement)
        if overflow == Overflow.CLIP:
            self.enderWidth = self.measurer.width(ellipsis)
        elif overflow == Overflow.ANYWHERE:
            self.enderWidth = self.measurer.width(hyphen)
        else:
            self.enderWidth = 0

        if (
            overflow == Overflow.CLIP
            and first_column is not None
            and first_column > width - self.enderWidth - 1
        ):
            raise ConfigurationError(
                f"First column {first_column} leaves no room for the ellipsis in width {width}"
            )

        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen"):
            raise AttributeError(f"WrapOptions are read-only, cannot set {name}")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return "WrapOptions(width={}, indent={!r}, overflow={}, locale={})".format(
            self.width, self.indent, self.overflow.name, self.locale
        )
