"""mdBook preprocessor that turns #tags and @mentions into index links."""

from .constants import MarkerKind, RewriteMode
from .models import Book, Chapter, PreprocessorContext
from .preprocessor import Indexer
from .schemas.config import IndexerConfig

__version__ = "0.1.0"

__all__ = [
    "Book",
    "Chapter",
    "Indexer",
    "IndexerConfig",
    "MarkerKind",
    "PreprocessorContext",
    "RewriteMode",
]
