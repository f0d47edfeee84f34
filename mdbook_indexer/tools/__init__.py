"""MCP tool implementations."""

from .build_index import bookidx_build_index, bookidx_supports_renderer

__all__ = ["bookidx_build_index", "bookidx_supports_renderer"]
