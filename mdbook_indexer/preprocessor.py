"""The mdBook preprocessor that links tags and mentions.

Each run rewrites ``#tag`` and ``@mention`` tokens in every chapter as links
to two generated chapters, ``tags.md`` and ``mentions.md``, which list the
chapters each marker appears in.
"""

from pathlib import Path

from .constants import (
    CONFIG_TABLE_NAMES,
    PREPROCESSOR_NAME,
    UNSUPPORTED_RENDERER,
    MarkerKind,
)
from .core.config import resolve_config
from .indexing.aggregator import Document, IndexBuild, index_documents
from .indexing.renderer import render
from .models import Book, Chapter, PreprocessorContext
from .schemas.config import IndexerConfig


class Indexer:
    """Tag and mention indexer.

    Args:
        config: Fixed options. When None, options are resolved from the book
                root and book.toml on every run.
    """

    def __init__(self, config: IndexerConfig | None = None):
        self.config = config

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    def supports_renderer(self, renderer: str) -> bool:
        """Every renderer is supported except the one reserved as unsupported."""
        return renderer != UNSUPPORTED_RENDERER

    def config_for(self, ctx: PreprocessorContext) -> IndexerConfig:
        """Resolve the options for one run."""
        if self.config is not None:
            return self.config

        table = {}
        for table_name in CONFIG_TABLE_NAMES:
            table = ctx.preprocessor_table(table_name)
            if table:
                break

        return resolve_config(Path(ctx.root), book_toml_table=table)

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Index the book and return an updated copy.

        The input book is left untouched.

        Raises:
            ValueError: If the configuration file is unreadable
            pydantic.ValidationError: If the configuration is invalid
        """
        config = self.config_for(ctx)
        updated_book = book.model_copy(deep=True)

        build = collect_mentions_and_tags(updated_book, config)

        for kind in MarkerKind:
            add_index_chapter(updated_book, kind, build, config)

        return updated_book


def collect_mentions_and_tags(book: Book, config: IndexerConfig) -> IndexBuild:
    """Rewrite every chapter of the book and return the index tables.

    Chapters are snapshotted first, indexed, and the new content is written
    back afterwards, so nothing is mutated while the tree is being walked.
    """
    chapters = list(book.iter_chapters())
    documents = [Document(chapter.identifier, chapter.content) for chapter in chapters]

    build = index_documents(
        documents,
        kinds=tuple(MarkerKind),
        index_paths=config.index_paths(),
        mode=config.rewrite_mode,
    )

    for chapter, (_, content) in zip(chapters, build.results):
        chapter.content = content

    return build


def add_index_chapter(
    book: Book,
    kind: MarkerKind,
    build: IndexBuild,
    config: IndexerConfig
) -> Chapter:
    """Render one index table and append it as a top-level chapter."""
    path = config.index_paths()[kind]
    title = config.index_titles()[kind]
    content = render(title, kind.prefix, build.table(kind), sort_entries=config.sort_entries)

    chapter = Chapter.new(title, content, path)
    book.push_item(chapter)
    return chapter
