"""Loading and saving a directory of chapters.

mdBook hands the preprocessor a fully loaded book, so none of this is used on
that path. The MCP tools work on a book checkout instead and read chapters
straight from the source directory.
"""

from pathlib import Path

from ..constants import DEFAULT_EXCLUDE_PATTERNS, MAX_FILES
from ..indexing.aggregator import Document
from .patterns import matches_exclude_pattern


def find_markdown_files(
    docs_path: Path,
    exclude_patterns: list[str] | None = None,
    max_files: int | None = None
) -> list[Path]:
    """Find all markdown chapters under the book source directory.

    Args:
        docs_path: Chapter directory (mdBook's ``src``)
        exclude_patterns: Extra glob patterns, relative to docs_path
        max_files: Maximum number of files. Defaults to MAX_FILES if None.

    Returns:
        Chapter paths sorted by their relative path

    Raises:
        ValueError: If file count exceeds max_files limit
    """
    patterns = DEFAULT_EXCLUDE_PATTERNS + (exclude_patterns or [])
    limit = max_files if max_files is not None else MAX_FILES

    markdown_files = []
    for file_path in docs_path.rglob("*.md"):
        if not file_path.is_file():
            continue

        relative = file_path.relative_to(docs_path).as_posix()
        if matches_exclude_pattern(relative, patterns):
            continue

        if len(markdown_files) >= limit:
            raise ValueError(
                f"File count limit exceeded (maximum: {limit:,} files)\n"
                f"→ Consider indexing a smaller directory or increasing the limit."
            )
        markdown_files.append(file_path)

    return sorted(markdown_files, key=lambda p: p.relative_to(docs_path).as_posix())


def load_documents(
    docs_path: Path,
    exclude_patterns: list[str] | None = None,
    max_files: int | None = None
) -> list[Document]:
    """Read every chapter as a Document identified by its relative path."""
    return [
        Document(
            identifier=file_path.relative_to(docs_path).as_posix(),
            text=file_path.read_text(encoding='utf-8'),
        )
        for file_path in find_markdown_files(docs_path, exclude_patterns, max_files)
    ]


def write_document(docs_path: Path, identifier: str, text: str) -> Path:
    """Write a chapter back under the source directory, creating parents."""
    target = docs_path / identifier
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding='utf-8')
    return target
