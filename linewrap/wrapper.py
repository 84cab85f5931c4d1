from typing import Any, Iterator, Optional

from .options import WrapOptions
from .packer import LinePacker, Trace, stderrtrace


class Wrapper:
    def __init__(
        self,
        options: Optional[WrapOptions] = None,
        *,
        trace: Optional[Trace] = None,
        **kwargs: Any,
    ) -> None:
        if options is not None and kwargs:
            raise TypeError("Pass either a WrapOptions or keyword options, not both")
        self.options = options if options is not None else WrapOptions(**kwargs)

        if trace is None and self.options.verbose:
            trace = stderrtrace
        self.__packer = LinePacker(self.options, trace=trace)

    def lines(self, text: str) -> Iterator[str]:
        return self.__packer.lines(text)

    def wrap(self, text: str) -> str:
        return self.options.lineTerminator.join(self.lines(text))


def wrap(text: str, **kwargs: Any) -> str:
    """
    Wrap text to fit a given width, using a one-off Wrapper built from the
    keyword options. The lines are joined with the line terminator and no
    terminator is added after the last one. For example:

        wrap("foo bar baz", width=8) == "foo bar\\nbaz"
    """
    return Wrapper(**kwargs).wrap(text)
