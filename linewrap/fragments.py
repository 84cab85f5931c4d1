from typing import Iterator

from .options import Overflow, WrapOptions
from .rules import Break


class Fragment:
    def __init__(
        self,
        text: str,
        width: int,
        *,
        space: bool = False,
        verbatim: bool = False,
    ) -> None:
        self.text = text
        self.width = width
        self.space = space
        self.verbatim = verbatim

    def __repr__(self) -> str:
        return "Fragment(text={!r}, width={}, space={}, verbatim={})".format(
            self.text, self.width, self.space, self.verbatim
        )


class FragmentSizer:
    def __init__(self, options: WrapOptions) -> None:
        self.options = options

    def available(self, first: bool) -> int:
        if first and not self.options.indentFirst:
            return self.options.width - self.options.firstIndent
        return self.options.workingWidth

    def fragments(self, brk: Break, first: bool = False) -> Iterator[Fragment]:
        measurer = self.options.measurer
        available = self.available(first)
        width = measurer.width(brk.text)

        if width <= available:
            yield Fragment(brk.text, width, space=brk.space, verbatim=brk.verbatim)
            return

        if brk.space:
            # More spaces than will fit on a line, collapse them.
            yield Fragment(
                self.options.newlineReplacement,
                self.options.replacementWidth,
                space=True,
            )
            return

        overflow = self.options.overflow
        if overflow == Overflow.VISIBLE:
            yield Fragment(brk.text, width, verbatim=brk.verbatim)
        elif overflow == Overflow.CLIP:
            # Keep what fits, and end with an ellipsis.
            room = available - self.options.enderWidth
            if room <= 0:
                yield Fragment(
                    self.options.ellipsis,
                    self.options.enderWidth,
                    verbatim=brk.verbatim,
                )
                return
            head = measurer.breakAt(brk.text, room)[0]
            yield Fragment(
                head.text + self.options.ellipsis,
                head.cells + self.options.enderWidth,
                verbatim=brk.verbatim,
            )
        else:
            # Might be more than one line long. Only the first piece can land
            # on a short first line, the rest get whole lines.
            text = brk.text
            room = max(available - self.options.enderWidth, 1)
            while True:
                head = measurer.breakAt(text, room)[0]
                if head.last:
                    yield Fragment(head.text, head.cells, verbatim=brk.verbatim)
                    return
                yield Fragment(
                    head.text + self.options.hyphen,
                    head.cells + self.options.enderWidth,
                    verbatim=brk.verbatim,
                )
                text = text[len(head.text):]
                room = max(self.options.workingWidth - self.options.enderWidth, 1)
