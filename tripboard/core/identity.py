# tripboard/core/identity.py

import re
from dataclasses import dataclass

from tripboard.core.tripcode import derive_tripcode

DEFAULT_PLACEHOLDER = "名無し"
TRIP_MARKER = "◆"

_NEWLINES = re.compile(r"[\r\n]+")

# ECMAScript WhiteSpace and LineTerminator; str.strip() uses a different set.
_EDGE_SPACE = re.compile(
    r"^[\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
    r"|[\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+\Z"
)


def sanitize_text(text) -> str:
    """
    Collapse CR/LF runs into a single newline, then trim.
    """
    return _EDGE_SPACE.sub("", _NEWLINES.sub("\n", text or ""))


@dataclass(frozen=True)
class ParsedIdentity:
    """
    Display name plus optional tripcode for a single post.

    - name: never empty (placeholder substituted)
    - trip: "" or marker + tripcode
    """

    name: str
    trip: str = ""

    def display(self) -> str:
        if self.trip:
            return f"{self.name} {self.trip}"
        return self.name

    def author_key(self) -> str:
        # Grouping key for posts by the same author.
        return f"{self.name}{self.trip}"


def parse_name_with_trip(
    raw,
    placeholder: str = DEFAULT_PLACEHOLDER,
    marker: str = TRIP_MARKER,
) -> ParsedIdentity:
    """
    Split raw "name#secret" form input into a ParsedIdentity.

    Only the first '#' separates; anything after it (further '#' included)
    is the seed.
    """
    trimmed = sanitize_text(raw)
    if "#" not in trimmed:
        return ParsedIdentity(name=trimmed or placeholder)

    name_part, seed_part = trimmed.split("#", 1)
    name = sanitize_text(name_part) or placeholder
    seed = sanitize_text(seed_part)
    if not seed:
        return ParsedIdentity(name=name)

    return ParsedIdentity(name=name, trip=f"{marker}{derive_tripcode(seed)}")
