"""Render an index table as a markdown chapter."""

from collections.abc import Mapping, Sequence


def render_section(prefix: str, name: str, identifiers: Sequence[str]) -> str:
    """Render one marker section: a second-level heading and a link list."""
    entries = "\n".join(f"- [{identifier}]({identifier})" for identifier in identifiers)
    return f"## {prefix}{name}\n{entries}\n"


def render(
    title: str,
    prefix: str,
    table: Mapping[str, Sequence[str]],
    sort_entries: bool = False
) -> str:
    """Render an index chapter body.

    Sections follow the table's iteration order unless ``sort_entries`` is
    set. Repeated identifiers are listed once per occurrence.

    Args:
        title: Top-level heading
        prefix: Marker prefix shown in section headings
        table: Marker name -> document identifiers
        sort_entries: Order sections by marker name

    Returns:
        Markdown text of the chapter
    """
    names = sorted(table) if sort_entries else list(table)
    body = f"# {title}\n\n"
    for name in names:
        body += render_section(prefix, name, table[name])
    return body
