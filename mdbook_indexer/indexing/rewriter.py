"""Rewrite marker occurrences as links to their index chapter.

Two strategies are available:

- ``rewrite_spans`` replaces exactly the token spans the tokenizer found,
  so ``#a`` and ``#ab`` in the same text each get their own link.
- ``rewrite_substrings`` replaces every literal ``prefix + name`` substring,
  one pass per distinct name. A pass for ``a`` also rewrites the ``#a`` at
  the start of ``#ab``, which then corrupts the ``#ab`` link. Kept for books
  that were built against that behaviour.

Neither strategy is idempotent: link text contains ``prefix + name`` again,
so running the pipeline over its own output wraps every link a second time.
"""

from collections.abc import Iterable

from ..constants import MarkerKind
from .tokenizer import Marker, unique_names


def link_for(kind: MarkerKind, name: str, index_path: str) -> str:
    """Build the markdown link for a marker.

    >>> link_for(MarkerKind.TAG, "rust", "tags.md")
    '[#rust](tags.md#rust)'
    """
    return f"[{kind.prefix}{name}]({index_path}#{name})"


def rewrite_spans(
    text: str,
    markers: Iterable[Marker],
    index_paths: dict[MarkerKind, str]
) -> str:
    """Replace marker tokens by their links, using scanned spans.

    Args:
        text: The text the markers were scanned from
        markers: Markers of any kind found in ``text``; spans must not overlap
        index_paths: Index chapter path per marker kind

    Returns:
        Rewritten text
    """
    parts = []
    cursor = 0
    for marker in sorted(markers, key=lambda m: m.start):
        parts.append(text[cursor:marker.start])
        parts.append(link_for(marker.kind, marker.name, index_paths[marker.kind]))
        cursor = marker.end
    parts.append(text[cursor:])
    return "".join(parts)


def rewrite_substrings(
    text: str,
    kind: MarkerKind,
    names: Iterable[str],
    index_path: str
) -> str:
    """Replace every ``prefix + name`` substring, one pass per name.

    Each pass runs on the output of the previous one. Names are expected to be
    distinct; a repeated name would wrap its links twice.
    """
    for name in names:
        text = text.replace(f"{kind.prefix}{name}", link_for(kind, name, index_path))
    return text


def rewrite(
    text: str,
    kind: MarkerKind,
    name: str,
    index_path: str
) -> str:
    """Link every occurrence of a single discovered marker in text."""
    return rewrite_substrings(text, kind, [name], index_path)


def rewrite_legacy(
    text: str,
    markers: list[Marker],
    index_paths: dict[MarkerKind, str]
) -> str:
    """Apply substring rewriting for all kinds present in ``markers``.

    Kinds are processed in ``MarkerKind`` declaration order (tags before
    mentions), names in first-occurrence order.
    """
    for kind in MarkerKind:
        names = unique_names([m for m in markers if m.kind is kind])
        if names:
            text = rewrite_substrings(text, kind, names, index_paths[kind])
    return text
