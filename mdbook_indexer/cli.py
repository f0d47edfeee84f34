"""Command line entry point speaking mdBook's preprocessor protocol.

    mdbook-indexer supports <renderer>   exit 0 if the renderer is supported, 1 otherwise
    mdbook-indexer                       read [context, book] JSON on stdin, write book JSON
    mdbook-indexer init [BOOK_ROOT]      write a default .book-indexer.yml

Register it in book.toml with::

    [preprocessor.indexer]
    command = "mdbook-indexer"
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from .constants import CONFIG_FILENAME, MDBOOK_VERSION
from .core.config import save_config
from .core.errors import handle_error
from .models import Book, PreprocessorContext
from .preprocessor import Indexer
from .schemas.config import IndexerConfig


def parse_input(raw: str) -> tuple[PreprocessorContext, Book]:
    """Parse the ``[context, book]`` pair mdBook writes to stdin.

    Raises:
        ValueError: If the payload isn't a two-element JSON array
        pydantic.ValidationError: If the context or book is malformed
    """
    data: Any = json.loads(raw)
    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("Expected a JSON array of [context, book] on stdin")

    ctx = PreprocessorContext.model_validate(data[0])
    book = Book.model_validate(data[1])
    return ctx, book


def check_version(ctx: PreprocessorContext) -> None:
    """Warn when mdBook's version differs from the one the book layout targets."""
    if not ctx.mdbook_version:
        return
    if ctx.mdbook_version.split(".")[:2] != MDBOOK_VERSION.split(".")[:2]:
        print(
            f"Warning: The indexer preprocessor was built against mdbook "
            f"{MDBOOK_VERSION}, but is being called from mdbook {ctx.mdbook_version}",
            file=sys.stderr,
        )


def handle_preprocessing(indexer: Indexer, stdin: TextIO, stdout: TextIO) -> None:
    """Run one preprocessing round trip over the given streams."""
    ctx, book = parse_input(stdin.read())
    check_version(ctx)

    processed = indexer.run(ctx, book)

    json.dump(processed.to_json_data(), stdout)
    stdout.flush()


def handle_init(book_root: Path) -> Path:
    """Write a default configuration file, refusing to overwrite one."""
    if (book_root / CONFIG_FILENAME).exists():
        raise FileExistsError(f"{CONFIG_FILENAME} already exists")
    return save_config(book_root, IndexerConfig())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-indexer",
        description="mdBook preprocessor that links #tags and @mentions to generated index chapters"
    )
    subparsers = parser.add_subparsers(dest='command')

    supports_parser = subparsers.add_parser('supports', help='Check whether a renderer is supported')
    supports_parser.add_argument('renderer', type=str, help='Renderer name passed by mdBook')

    init_parser = subparsers.add_parser('init', help=f'Write a default {CONFIG_FILENAME}')
    init_parser.add_argument('book_root', type=str, nargs='?', default='.', help='Book root directory')

    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None
) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)
    indexer = Indexer()

    if args.command == 'supports':
        return 0 if indexer.supports_renderer(args.renderer) else 1

    if args.command == 'init':
        try:
            config_path = handle_init(Path(args.book_root))
        except (OSError, ValueError) as e:
            handle_error(e, "init")
            return 1
        print(f"Wrote {config_path}", file=sys.stderr)
        return 0

    try:
        handle_preprocessing(indexer, stdin or sys.stdin, stdout or sys.stdout)
    except Exception as e:
        handle_error(e, indexer.name)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
