"""Marker indexing: tokenizer, rewriter, aggregator and renderer."""

from .aggregator import (
    Document,
    IndexBuild,
    IndexTable,
    build_index,
    index_documents,
)
from .renderer import render, render_section
from .rewriter import link_for, rewrite, rewrite_spans, rewrite_substrings
from .tokenizer import Marker, extract, scan

__all__ = [
    # Aggregation
    "Document",
    "IndexBuild",
    "IndexTable",
    "build_index",
    "index_documents",
    # Rendering
    "render",
    "render_section",
    # Rewriting
    "link_for",
    "rewrite",
    "rewrite_spans",
    "rewrite_substrings",
    # Tokenizing
    "Marker",
    "extract",
    "scan",
]
