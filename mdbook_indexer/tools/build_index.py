"""Index building tools for the MCP server."""

from pathlib import Path
from typing import Any

from ..constants import MarkerKind
from ..core.config import resolve_config
from ..core.errors import handle_error
from ..core.project import load_documents, write_document
from ..indexing.aggregator import index_documents
from ..indexing.renderer import render
from ..models import BuildIndexInput, SupportsRendererInput
from ..preprocessor import Indexer


async def bookidx_build_index(
    params: BuildIndexInput,
    ctx=None
) -> dict[str, Any]:
    """Build tag and mention indexes for the chapters of a book checkout.

    Reads every markdown file under the chapter directory, rewrites markers
    as links and renders both index chapters. Nothing is written unless
    ``params.write`` is set.

    Args:
        params: BuildIndexInput with project_path, docs_path, write, rewrite_mode
        ctx: Optional context for progress reporting

    Returns:
        dict with status, both index tables, rewritten chapter paths and the
        rendered index files
    """
    try:
        project_path = Path(params.project_path)
        docs_path = project_path / params.docs_path

        if not docs_path.is_dir():
            return {
                "status": "error",
                "message": f"Chapter directory not found: {params.docs_path}"
            }

        config = resolve_config(
            project_path,
            overrides={"rewrite_mode": params.rewrite_mode}
        )
        index_paths = config.index_paths()

        if ctx:
            await ctx.info(f"Loading chapters from {params.docs_path}...")

        # Index chapters from an earlier run must not be scanned again
        documents = [
            document for document in load_documents(docs_path)
            if document.identifier not in index_paths.values()
        ]

        if ctx:
            await ctx.info(f"Indexing {len(documents)} chapters...")

        build = index_documents(
            documents,
            kinds=tuple(MarkerKind),
            index_paths=index_paths,
            mode=config.rewrite_mode,
        )

        rewritten = {
            identifier: text
            for document, (identifier, text) in zip(documents, build.results)
            if text != document.text
        }
        index_files = {
            index_paths[kind]: render(
                config.index_titles()[kind],
                kind.prefix,
                build.table(kind),
                sort_entries=config.sort_entries,
            )
            for kind in MarkerKind
        }

        written = []
        if params.write:
            if ctx:
                await ctx.info(f"Writing {len(rewritten)} chapters and {len(index_files)} index files...")
            for identifier, text in {**rewritten, **index_files}.items():
                write_document(docs_path, identifier, text)
                written.append(identifier)

        return {
            "status": "success",
            "chapters_indexed": len(documents),
            "tags": build.table(MarkerKind.TAG),
            "mentions": build.table(MarkerKind.MENTION),
            "rewritten": list(rewritten),
            "index_files": index_files,
            "written": written,
        }

    except Exception as e:
        return {
            "status": "error",
            "message": handle_error(e, "bookidx_build_index")
        }


async def bookidx_supports_renderer(params: SupportsRendererInput) -> dict[str, Any]:
    """Answer mdBook's renderer compatibility query."""
    return {
        "renderer": params.renderer,
        "supported": Indexer().supports_renderer(params.renderer),
    }
