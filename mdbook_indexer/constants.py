"""Constants and enums for the mdbook indexer."""

from enum import Enum

# Preprocessor identity as seen by mdBook
PREPROCESSOR_NAME = "indexer_preprocessor"

# The one renderer the preprocessor refuses to run for
UNSUPPORTED_RENDERER = "not-supported"

# mdBook version the book JSON layout was written against
MDBOOK_VERSION = "0.4.40"

# Configuration file read from the book root
CONFIG_FILENAME = ".book-indexer.yml"

# Keys mdBook itself owns inside [preprocessor.<name>]
MDBOOK_PREPROCESSOR_KEYS = ("command", "renderers", "before", "after")

# book.toml tables the preprocessor reads its options from
CONFIG_TABLE_NAMES = ("indexer", PREPROCESSOR_NAME)

# Index chapter defaults
DEFAULT_TAGS_PATH = "tags.md"
DEFAULT_MENTIONS_PATH = "mentions.md"
DEFAULT_TAGS_TITLE = "Tags"
DEFAULT_MENTIONS_TITLE = "Mentions"

# Directory scanning limits for the MCP tools
DEFAULT_DOCS_PATH = "src"
MAX_FILES = 10_000

# Never scanned when loading a docs directory from disk
DEFAULT_EXCLUDE_PATTERNS = [
    # Version control
    "**/.git", "**/.git/**",

    # Dependencies and caches
    "**/node_modules", "**/node_modules/**",
    "**/__pycache__", "**/__pycache__/**",

    # The table of contents is structure, not prose
    "**/SUMMARY.md",
]


class MarkerKind(str, Enum):
    """Inline marker kinds, valued by their prefix character."""
    TAG = "#"
    MENTION = "@"

    @property
    def prefix(self) -> str:
        return self.value


class RewriteMode(str, Enum):
    """How discovered markers are turned into links."""
    BOUNDARY = "boundary"    # Replace only the scanned token spans
    SUBSTRING = "substring"  # Replace every literal prefix+name substring
