"""Index aggregation across a set of documents.

Walks documents in order, records which documents mention which markers, and
computes the rewritten text of each document. Nothing is mutated: documents
are read as snapshots and the new text is returned for the caller to apply.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..constants import (
    DEFAULT_MENTIONS_PATH,
    DEFAULT_TAGS_PATH,
    MarkerKind,
    RewriteMode,
)
from .rewriter import rewrite_legacy, rewrite_spans
from .tokenizer import Marker, scan

IndexTable = dict[str, list[str]]

DEFAULT_INDEX_PATHS = {
    MarkerKind.TAG: DEFAULT_TAGS_PATH,
    MarkerKind.MENTION: DEFAULT_MENTIONS_PATH,
}


@dataclass(frozen=True)
class Document:
    """A document snapshot: its path identifier and its text."""

    identifier: str
    text: str


@dataclass
class IndexBuild:
    """Result of one aggregation sweep.

    Attributes:
        tables: Marker name -> document identifiers, per marker kind
        results: (identifier, text after rewriting) for every document, in
                 processing order; unchanged documents keep their text
    """

    tables: dict[MarkerKind, IndexTable] = field(default_factory=dict)
    results: list[tuple[str, str]] = field(default_factory=list)

    def table(self, kind: MarkerKind) -> IndexTable:
        return self.tables.get(kind, {})


def record(table: IndexTable, markers: Iterable[Marker], identifier: str) -> None:
    """Append the identifier once per marker occurrence."""
    for marker in markers:
        table.setdefault(marker.name, []).append(identifier)


def index_documents(
    documents: Iterable[Document],
    kinds: Sequence[MarkerKind] = (MarkerKind.TAG, MarkerKind.MENTION),
    index_paths: dict[MarkerKind, str] | None = None,
    mode: RewriteMode = RewriteMode.BOUNDARY
) -> IndexBuild:
    """Build the index tables for several marker kinds in one sweep.

    Every kind is scanned on the same text before any rewriting happens, then
    one rewrite is applied for all kinds together.

    Args:
        documents: Documents in tree order
        kinds: Marker kinds to index
        index_paths: Link target per kind (defaults to tags.md / mentions.md)
        mode: Rewrite strategy

    Returns:
        IndexBuild with one table per kind and the rewritten texts
    """
    paths = {**DEFAULT_INDEX_PATHS, **(index_paths or {})}
    build = IndexBuild(tables={kind: {} for kind in kinds})

    for document in documents:
        markers: list[Marker] = []
        for kind in kinds:
            found = scan(document.text, kind)
            record(build.tables[kind], found, document.identifier)
            markers.extend(found)

        if not markers:
            new_text = document.text
        elif mode is RewriteMode.SUBSTRING:
            new_text = rewrite_legacy(document.text, markers, paths)
        else:
            new_text = rewrite_spans(document.text, markers, paths)

        build.results.append((document.identifier, new_text))

    return build


def build_index(
    documents: Iterable[Document],
    kind: MarkerKind | str,
    index_path: str | None = None,
    mode: RewriteMode = RewriteMode.BOUNDARY
) -> IndexTable:
    """Build the index table for a single marker kind (or its prefix character)."""
    kind = MarkerKind(kind)
    index_paths = {kind: index_path} if index_path else None
    return index_documents(documents, (kind,), index_paths, mode).table(kind)
