import locale
from typing import Iterator, List, NamedTuple, Tuple

import wcwidth

# Languages where East Asian Ambiguous characters are drawn double width.
CJK_LANGUAGES = {"zh", "ja", "ko"}


def defaultlocale() -> str:
    name, _ = locale.getlocale()
    return (name or "en").replace("_", "-")


def iscjk(localeName: str) -> bool:
    language = localeName.replace("_", "-").split("-")[0]
    return language.lower() in CJK_LANGUAGES


class Slice(NamedTuple):
    text: str
    cells: int
    last: bool


class WidthMeasurer:
    """
    Measures text in terminal cells. Text is walked as a series of units that
    are never split: grapheme clusters, measured with wcwidth, and terminal
    escape sequences. Escape sequences take up no room unless include_styling
    is set, in which case every character of them counts as a cell and they
    can be cut like any other text.
    """

    def __init__(self, *, cjk: bool = False, include_styling: bool = False) -> None:
        self.cjk = cjk
        self.includeStyling = include_styling
        self.__ambiguous = 2 if cjk else 1

    def units(self, text: str) -> Iterator[Tuple[str, int]]:
        for segment, isSequence in wcwidth.iter_sequences(text):
            if isSequence:
                if self.includeStyling:
                    for ch in segment:
                        yield (ch, 1)
                else:
                    yield (segment, 0)
                continue

            for cluster in wcwidth.iter_graphemes(segment):
                yield (cluster, self.clusterWidth(cluster))

    def clusterWidth(self, cluster: str) -> int:
        # A tab is a single cell wide for wrapping purposes.
        return wcwidth.width(cluster, tabsize=1, ambiguous_width=self.__ambiguous)

    def width(self, text: str) -> int:
        if text.isascii() and text.isprintable():
            return len(text)
        return sum(cells for _, cells in self.units(text))

    def breakAt(self, text: str, maxCells: int) -> List[Slice]:
        pieces: List[Tuple[str, int]] = []
        current: List[str] = []
        cells = 0
        visible = False

        for unit, unitCells in self.units(text):
            # Zero width units always stick to what came before them. Every
            # slice gets at least one visible unit, even if that unit alone is
            # wider than we were asked for.
            if visible and unitCells > 0 and cells + unitCells > maxCells:
                pieces.append(("".join(current), cells))
                current = []
                cells = 0
                visible = False

            current.append(unit)
            cells += unitCells
            if unitCells > 0:
                visible = True

        if current or not pieces:
            pieces.append(("".join(current), cells))

        return [
            Slice(piece, pieceCells, i == len(pieces) - 1)
            for i, (piece, pieceCells) in enumerate(pieces)
        ]
