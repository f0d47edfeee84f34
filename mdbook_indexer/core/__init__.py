"""Core utilities for the mdbook indexer.

- config: Configuration loading and merging
- errors: Error formatting and logging
- patterns: Exclude pattern matching
- project: Reading and writing chapter directories
"""

# Configuration
from .config import load_config, resolve_config, save_config

# Error handling
from .errors import handle_error

# Pattern matching
from .patterns import matches_exclude_pattern

# Chapter directories
from .project import find_markdown_files, load_documents, write_document

__all__ = [
    "find_markdown_files",
    "handle_error",
    "load_config",
    "load_documents",
    "matches_exclude_pattern",
    "resolve_config",
    "save_config",
    "write_document",
]
