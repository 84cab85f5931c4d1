import pytest

from linewrap.options import DEFAULT_NEWLINE, ConfigurationError, Overflow, WrapOptions


def test_defaults() -> None:
    options = WrapOptions(locale="en")
    assert options.width == 80
    assert options.indent == ""
    assert options.indentWidth == 0
    assert options.workingWidth == 80
    assert options.firstIndent == 0
    assert options.overflow is Overflow.VISIBLE
    assert options.enderWidth == 0
    assert options.newline is DEFAULT_NEWLINE
    assert options.newlineReplacement == " "
    assert options.replacementWidth == 1
    assert options.lineTerminator == "\n"
    assert options.cjk is False


def test_numeric_indent() -> None:
    options = WrapOptions(indent=2)
    assert options.indent == "  "
    assert options.indentWidth == 2
    assert options.workingWidth == 78


def test_indent_char() -> None:
    options = WrapOptions(indent=3, indent_char="-")
    assert options.indent == "---"


def test_string_indent() -> None:
    options = WrapOptions(width=10, indent="> ")
    assert options.indentWidth == 2
    assert options.workingWidth == 8


def test_first_column() -> None:
    options = WrapOptions(width=10, indent=2, indent_first=False, first_column=6)
    assert options.firstIndent == 6

    # Without a first column, the first line acts like it was indented already.
    options = WrapOptions(width=10, indent=2, indent_first=False)
    assert options.firstIndent == 2

    # The first column only matters if the first line isn't indented.
    options = WrapOptions(width=10, indent=2, first_column=6)
    assert options.firstIndent == 2


def test_ender_width() -> None:
    assert WrapOptions(overflow=Overflow.CLIP, ellipsis="...").enderWidth == 3
    assert WrapOptions(overflow=Overflow.ANYWHERE, hyphen="-").enderWidth == 1


def test_newline_string_is_compiled() -> None:
    options = WrapOptions(newline=r"\|")
    assert options.newline is not None
    assert options.newline.pattern == r"\|"


def test_newline_none() -> None:
    assert WrapOptions(newline=None).newline is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"width": -5},
        {"width": 2, "indent": 2},
        {"width": 4, "indent": "abcdef"},
        {"indent": -1},
        {"overflow": "clip"},
    ],
)
def test_invalid(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        WrapOptions(**kwargs)


def test_no_space_message() -> None:
    with pytest.raises(ConfigurationError, match="No space to wrap"):
        WrapOptions(width=2, indent=3)


def test_clip_first_column() -> None:
    with pytest.raises(ConfigurationError):
        WrapOptions(
            width=10,
            overflow=Overflow.CLIP,
            indent_first=False,
            first_column=9,
            locale="en",
        )

    options = WrapOptions(
        width=10,
        overflow=Overflow.CLIP,
        indent_first=False,
        first_column=8,
        locale="en",
    )
    assert options.firstIndent == 8


def test_read_only() -> None:
    options = WrapOptions()
    with pytest.raises(AttributeError):
        options.width = 10
    assert options.width == 80


def test_locale_detects_cjk() -> None:
    options = WrapOptions(locale="ja-JP")
    assert options.cjk is True
    assert options.measurer.width("\u2026") == 2

    options = WrapOptions(locale="ja-JP", cjk=False)
    assert options.cjk is False
    assert options.measurer.width("\u2026") == 1


@pytest.mark.parametrize(
    "name,expected",
    [
        ("visible", Overflow.VISIBLE),
        ("clip", Overflow.CLIP),
        ("ANYWHERE", Overflow.ANYWHERE),
    ],
)
def test_overflow_from_name(name: str, expected: Overflow) -> None:
    assert Overflow.fromName(name) is expected


def test_overflow_from_bad_name() -> None:
    with pytest.raises(ConfigurationError, match='"bad"'):
        Overflow.fromName("bad")


def test_default_newline() -> None:
    assert DEFAULT_NEWLINE.split("a \n\n  b\r\nc\u2028d") == ["a", "b", "c", "d"]
    assert DEFAULT_NEWLINE.split("c d") == ["c d"]
    assert DEFAULT_NEWLINE.split("a\tb") == ["a\tb"]
