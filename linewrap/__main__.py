import argparse
import shutil
import sys
from typing import NoReturn, Optional, Sequence, TextIO, Union

from .options import DEFAULT_NEWLINE, ConfigurationError, Overflow, WrapOptions
from .text import emojize as expandemoji
from .text import htmlescape, noescape
from .wrapper import Wrapper

# From sysexits.h, the command was used incorrectly.
EX_USAGE = 64


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def parseindent(value: str) -> Union[int, str]:
    # A number means that many spaces, anything else is used as-is.
    if value.isdigit():
        return int(value)
    return value


def readinput(name: str, encoding: str) -> str:
    if name == "-":
        return sys.stdin.read()
    with open(name, "r", encoding=encoding) as fp:
        return fp.read()


def main(
    texts: Sequence[str],
    files: Sequence[str],
    *,
    width: int,
    indent: Union[int, str] = "",
    outdentFirst: bool = False,
    locale: Optional[str] = None,
    overflow: str = "visible",
    ellipsis: str = "\u2026",
    hyphen: str = "-",
    keepNewlines: bool = False,
    html: bool = False,
    emojize: bool = False,
    encoding: str = "utf-8",
    outfile: Optional[str] = None,
    verbose: bool = False,
) -> int:
    try:
        options = WrapOptions(
            width=width,
            indent=indent,
            indent_first=not outdentFirst,
            locale=locale,
            overflow=Overflow.fromName(overflow),
            ellipsis=ellipsis,
            hyphen=hyphen,
            newline=None if keepNewlines else DEFAULT_NEWLINE,
            escape=htmlescape if html else noescape,
            verbose=verbose,
        )
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return EX_USAGE

    wrapper = Wrapper(options)

    # Text given on the command line goes first, then files.
    if not texts and not files:
        files = ["-"]

    out: TextIO = sys.stdout
    try:
        if outfile is not None:
            out = open(outfile, "w", encoding=encoding)

        try:
            for chunk in texts:
                writechunk(out, wrapper, chunk, emojize)
            for name in files:
                writechunk(out, wrapper, readinput(name, encoding), emojize)
        finally:
            if out is not sys.stdout:
                out.close()
    except OSError as e:
        print(f"Cannot wrap input: {e}", file=sys.stderr)
        return 1

    return 0


def writechunk(out: TextIO, wrapper: Wrapper, text: str, emojize: bool) -> None:
    if emojize:
        text = expandemoji(text)
    out.write(wrapper.wrap(text))
    out.write("\n")


def cli() -> None:
    parser = ArgumentParser(
        prog="linewrap",
        description=(
            "Wrap some text, either from files, stdin or given on the command line. "
            "Each chunk of text is wrapped independently of the others. Text given "
            "with -t/--text is processed before files."
        ),
    )

    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        type=str,
        help='Files to wrap and concatenate, use "-" for stdin. Defaults to stdin if no text is given',
    )
    parser.add_argument(
        "-t",
        "--text",
        action="append",
        default=[],
        type=str,
        help="Wrap this chunk of text. Can be given multiple times",
    )
    parser.add_argument(
        "-w",
        "--width",
        default=shutil.get_terminal_size().columns,
        type=int,
        help="Maximum line width in cells, defaults to the width of your terminal",
    )
    parser.add_argument(
        "-i",
        "--indent",
        default="",
        type=parseindent,
        help="Indent each line with this text, or with this many spaces if a number",
    )
    parser.add_argument(
        "--outdent-first",
        action="store_true",
        help="Do not indent the first output line",
    )
    parser.add_argument(
        "-l",
        "--locale",
        default=None,
        type=str,
        help="Locale to use for character widths, defaults to your environment",
    )
    parser.add_argument(
        "--overflow",
        default="visible",
        type=str,
        help='What to do with words longer than a line: "visible", "clip" or "anywhere"',
    )
    parser.add_argument(
        "--ellipsis",
        default="\u2026",
        type=str,
        help="Text to end clipped words with",
    )
    parser.add_argument(
        "--hyphen",
        default="-",
        type=str,
        help="Text to end split words with",
    )
    parser.add_argument(
        "--keep-newlines",
        action="store_true",
        help="Keep newlines in the input instead of replacing them with spaces",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Escape output for HTML",
    )
    parser.add_argument(
        "--emojize",
        action="store_true",
        help="Turn :shortcode: emoji into the real thing before wrapping",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        type=str,
        help="Encoding for files read or written, defaults to utf-8",
    )
    parser.add_argument(
        "-o",
        "--outfile",
        default=None,
        type=str,
        help="Write to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace line packing to stderr",
    )
    args = parser.parse_args()

    sys.exit(
        main(
            args.text,
            args.files,
            width=args.width,
            indent=args.indent,
            outdentFirst=args.outdent_first,
            locale=args.locale,
            overflow=args.overflow,
            ellipsis=args.ellipsis,
            hyphen=args.hyphen,
            keepNewlines=args.keep_newlines,
            html=args.html,
            emojize=args.emojize,
            encoding=args.encoding,
            outfile=args.outfile,
            verbose=args.verbose,
        )
    )


if __name__ == "__main__":
    cli()
