"""Marker tokenizer.

Splits raw text into words and picks out the ones that start with a marker
prefix (``#`` for tags, ``@`` for mentions). The tokenizer knows nothing
about markdown: a ``#`` inside a code block or a URL fragment is scanned like
any other character.

Word boundaries are whitespace and ASCII punctuation, except the prefix
character of the kind being scanned, so ``#tag,`` yields ``tag`` while
``@bob#x`` yields no tag (``#`` is not a boundary when scanning for ``#``,
which keeps ``bob#x`` as part of one word that doesn't start with ``#``).
"""

import re
import string
from collections.abc import Iterator
from dataclasses import dataclass
from functools import lru_cache

from ..constants import MarkerKind


@dataclass(frozen=True)
class Marker:
    """A marker occurrence found in a block of text.

    Attributes:
        kind: Marker kind (tag or mention)
        name: Marker name, without the prefix character
        start: Offset of the prefix character in the scanned text
        end: Offset just past the last character of the name
    """

    kind: MarkerKind
    name: str
    start: int
    end: int

    @property
    def token(self) -> str:
        """The literal text of the occurrence (prefix plus name)."""
        return f"{self.kind.prefix}{self.name}"


@lru_cache(maxsize=None)
def _word_pattern(prefix: str) -> re.Pattern[str]:
    """Compile the word pattern for a prefix character."""
    separators = string.punctuation.replace(prefix, "")
    return re.compile(r"[^\s" + re.escape(separators) + r"]+")


def _is_marker_word(word: str, prefix: str) -> bool:
    """Check if a word is a prefix followed by a valid name."""
    if len(word) < 2 or word[0] != prefix:
        return False
    name = word[1:]
    # "##heading" and "#foo#" are not markers
    return not name.startswith(prefix) and not name.endswith(prefix)


def _marker_words(text: str, prefix: str) -> Iterator[tuple[str, int, int]]:
    """Yield (name, start, end) for every marker word of a prefix character."""
    for match in _word_pattern(prefix).finditer(text):
        word = match.group()
        if _is_marker_word(word, prefix):
            yield word[1:], match.start(), match.end()


def scan(text: str, kind: MarkerKind) -> list[Marker]:
    """Find every marker of one kind in text.

    Args:
        text: Raw text to scan
        kind: Marker kind to look for

    Returns:
        Markers in left-to-right order, one per occurrence
    """
    return [
        Marker(kind, name, start, end)
        for name, start, end in _marker_words(text, kind.prefix)
    ]


def extract(text: str, prefix: str) -> list[str]:
    """Extract marker names for any single prefix character.

    Args:
        text: Raw text to scan
        prefix: Marker prefix character ('#' and '@' are the indexed ones)

    Returns:
        Marker names in occurrence order, duplicates preserved
    """
    return [name for name, _, _ in _marker_words(text, prefix)]


def unique_names(markers: list[Marker]) -> list[str]:
    """Distinct marker names in first-occurrence order."""
    return list(dict.fromkeys(marker.name for marker in markers))
