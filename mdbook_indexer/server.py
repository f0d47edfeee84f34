#!/usr/bin/env python3
"""
mdBook Indexer MCP Server

Exposes the tag and mention indexer to MCP clients:
- Building tag/mention indexes for a book checkout (optionally writing them)
- Answering the renderer compatibility query
"""

from typing import Any

from mcp.server.fastmcp import Context, FastMCP
from mcp.types import ToolAnnotations

from .constants import DEFAULT_DOCS_PATH
from .models import BuildIndexInput, SupportsRendererInput
from .tools.build_index import bookidx_build_index, bookidx_supports_renderer

# Initialize the MCP server
mcp = FastMCP("mdbook_indexer")

# ============================================================================
# Register Tools
# ============================================================================

@mcp.tool(
    name="bookidx_build_index",
    annotations=ToolAnnotations(
        title="Build Tag and Mention Indexes",
        readOnlyHint=False,  # write=True rewrites chapters
        destructiveHint=False,
        idempotentHint=False,  # Rewritten links are linked again on the next run
        openWorldHint=False
    )
)
async def tool_bookidx_build_index(
    project_path: str,
    docs_path: str = DEFAULT_DOCS_PATH,
    write: bool = False,
    rewrite_mode: str | None = None,
    ctx: Context | None = None
) -> dict[str, Any]:
    """Find #tags and @mentions in a book's chapters and build their index chapters.

    With write=False (default) the result is only reported. With write=True
    the rewritten chapters and the tags/mentions index files are written
    back under docs_path. Running write=True twice links the links again.
    """
    params = BuildIndexInput(
        project_path=project_path,
        docs_path=docs_path,
        write=write,
        rewrite_mode=rewrite_mode
    )
    return await bookidx_build_index(params, ctx)


@mcp.tool(
    name="bookidx_supports_renderer",
    annotations=ToolAnnotations(
        title="Check Renderer Support",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False
    )
)
async def tool_bookidx_supports_renderer(renderer: str) -> dict[str, Any]:
    """Check whether the indexer can run ahead of an mdBook renderer."""
    params = SupportsRendererInput(renderer=renderer)
    return await bookidx_supports_renderer(params)


def main():
    """Entry point for the MCP server."""
    mcp.run()

if __name__ == "__main__":
    main()
