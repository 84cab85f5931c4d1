import ipaddress
import re
from typing import Iterator, Pattern
from urllib.parse import urlparse

from .options import WrapOptions
from .rules import Break
from .spacebreaker import SpaceBreaker

# Cheap first pass, anything that looks like it might be a URL. Doesn't
# handle mailto: or xmpp:, since those have no slashes.
URL_CANDIDATE: Pattern[str] = re.compile(r"[a-z]{2,8}://\S+")

# Characters that can't appear in a host name.
FORBIDDEN_HOST = set("\x00\t\n\r #%/:<>?@[\\]^|")


def isurl(candidate: str) -> bool:
    try:
        parsed = urlparse(candidate)
        # Accessing the port validates it.
        parsed.port
    except ValueError:
        return False

    if not parsed.scheme or not parsed.netloc or not parsed.hostname:
        return False

    host = parsed.hostname
    if ":" in host:
        # Bracketed IPv6 literal, the brackets are already stripped.
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    if any(ch in FORBIDDEN_HOST for ch in host):
        return False

    # A host that ends in a number has to be a whole IPv4 address.
    labels = host.rstrip(".").split(".")
    if labels[-1].isdigit():
        try:
            ipaddress.IPv4Address(host.rstrip("."))
        except ValueError:
            return False

    return True


class Chunker:
    def __init__(self, options: WrapOptions) -> None:
        self.options = options
        self.breaker = SpaceBreaker()

    def chunks(self, text: str) -> Iterator[Break]:
        newline = self.options.newline
        if newline is None:
            yield from self.__piece(text, 0)
            return

        offset = 0
        for match in newline.finditer(text):
            yield from self.__piece(text[offset:match.start()], offset)

            # Every run of newlines becomes exactly one replacement.
            replacement = self.options.newlineReplacement
            if replacement:
                for brk in self.breaker.breaks(replacement):
                    yield Break(
                        brk.text,
                        match.end(),
                        space=brk.space,
                        required=brk.required,
                    )
            offset = match.end()

        yield from self.__piece(text[offset:], offset)

    def __piece(self, piece: str, offset: int) -> Iterator[Break]:
        start = 0
        for match in URL_CANDIDATE.finditer(piece):
            if match.start() > start:
                yield from self.__plain(piece[start:match.start()], offset + start)

            url = match.group(0)
            if isurl(url):
                yield Break(url, offset + match.end(), verbatim=True)
            else:
                # Not really a URL, so it gets broken like anything else.
                yield from self.__plain(url, offset + match.start())
            start = match.end()

        if start < len(piece):
            yield from self.__plain(piece[start:], offset + start)

    def __plain(self, text: str, offset: int) -> Iterator[Break]:
        for brk in self.breaker.breaks(text):
            yield Break(
                brk.text,
                offset + brk.position,
                space=brk.space,
                required=brk.required,
            )
