import sys
from typing import Callable, Iterator, Optional

from .chunker import Chunker
from .fragments import Fragment, FragmentSizer
from .options import WrapOptions

Trace = Callable[[str], None]


def nulltrace(message: str) -> None:
    pass


def stderrtrace(message: str) -> None:
    print(message, file=sys.stderr)


class LinePacker:
    def __init__(self, options: WrapOptions, *, trace: Optional[Trace] = None) -> None:
        self.options = options
        self.chunker = Chunker(options)
        self.sizer = FragmentSizer(options)
        self.trace = trace or nulltrace

    def fragments(self, text: str) -> Iterator[Fragment]:
        escape = self.options.escape
        first = True
        for brk in self.chunker.chunks(text):
            for frag in self.sizer.fragments(brk, first):
                # Widths were measured before escaping, so entities don't count.
                if not frag.verbatim:
                    frag.text = escape(frag.text)
                yield frag

            # Leading spaces never land on the first line, so the first word
            # is the one that gets its room.
            if not brk.space:
                first = False

    def lines(self, text: str) -> Iterator[str]:
        options = self.options
        if not text:
            if options.indentFirst:
                yield options.indent
            return

        line = options.indent if options.indentFirst else ""
        cur = options.firstIndent
        placed = False
        spaces = ""
        spacesWidth = 0

        for frag in self.fragments(text):
            if frag.space:
                # Spaces wait until there's something to put after them.
                spaces += frag.text
                spacesWidth += frag.width
                continue

            if not placed:
                # Beginning of line, always add something.
                if spaces:
                    self.trace(f"Dropping {spacesWidth} leading space cell(s)")
                line += frag.text
                cur += frag.width
                placed = True
            elif cur + spacesWidth + frag.width <= options.width:
                # Still room, add pending spaces then this fragment.
                line += spaces + frag.text
                cur += spacesWidth + frag.width
            else:
                # No room, finish the previous line and start a fresh one.
                self.trace(f"Line full at column {cur}: {line!r}")
                yield line
                if spaces:
                    self.trace(f"Dropping {spacesWidth} trailing space cell(s)")
                line = options.indent + frag.text
                cur = options.indentWidth + frag.width

            self.trace(f"Placed {frag!r}, now at column {cur}")
            spaces = ""
            spacesWidth = 0

        if placed:
            self.trace(f"Last line: {line!r}")
            yield line
