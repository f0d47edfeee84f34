"""Pydantic models for mdBook book data and indexer tool inputs."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_DOCS_PATH, RewriteMode


def _validate_project_path(v: str) -> str:
    """Shared validator for project_path fields.

    Args:
        v: Project path string

    Returns:
        Validated absolute path string

    Raises:
        ValueError: If path contains traversal sequences, doesn't exist, or isn't a directory
    """
    if not v:
        raise ValueError("Project path cannot be empty")

    if '..' in v:
        raise ValueError(
            "Invalid project path: contains path traversal sequence '..'. "
            "Use absolute paths only."
        )

    path = Path(v)
    if not path.is_absolute():
        raise ValueError(
            f"Invalid project path: must be absolute path (e.g., '/home/user/book'). "
            f"Got relative path: '{v}'"
        )

    if not path.exists():
        raise ValueError(f"Project path does not exist: {v}")

    if not path.is_dir():
        raise ValueError(f"Project path is not a directory: {v}")

    return str(path.resolve())


def _validate_relative_path(v: str | None, field_name: str = "path") -> str | None:
    """Shared validator for relative path fields.

    Raises:
        ValueError: If path contains traversal sequences or is absolute
    """
    if v is None:
        return v

    if '..' in v:
        raise ValueError(
            f"Invalid {field_name}: contains path traversal sequence '..'. "
            f"Use relative paths within the book only"
        )

    path = Path(v)
    if path.is_absolute():
        raise ValueError(
            f"Invalid {field_name}: must be relative to the book root, not absolute. "
            f"Got: '{v}'"
        )

    # Identifiers and link targets always use forward slashes
    return path.as_posix()


# ============================================================================
# mdBook book structure
# ============================================================================

class Separator(BaseModel):
    """A separator line in the book's table of contents."""


class PartTitle(BaseModel):
    """A part heading in the book's table of contents."""

    title: str


class Chapter(BaseModel):
    """A chapter of an mdBook book.

    Mirrors mdBook's serialized chapter. Keys this model doesn't know about
    are kept and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list["BookItem"] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    @field_validator("sub_items", mode="before")
    @classmethod
    def parse_sub_items(cls, v: Any) -> list[Any]:
        """Convert mdBook's externally tagged items."""
        if v is None:
            return []
        return [parse_book_item(item) for item in v]

    @classmethod
    def new(
        cls,
        name: str,
        content: str,
        path: str,
        parent_names: list[str] | None = None
    ) -> "Chapter":
        """Create a chapter whose path and source path are both ``path``."""
        return cls(
            name=name,
            content=content,
            path=path,
            source_path=path,
            parent_names=parent_names or [],
        )

    @property
    def identifier(self) -> str:
        """Path used to identify the chapter in index tables.

        Draft chapters have no path and are identified by an empty string.
        """
        return self.path or ""

    def to_json_data(self) -> dict[str, Any]:
        data = self.model_dump(exclude={"sub_items"})
        data["sub_items"] = [dump_book_item(item) for item in self.sub_items]
        return data


BookItem = Union[Chapter, Separator, PartTitle]
Chapter.model_rebuild()


def parse_book_item(raw: Any) -> BookItem:
    """Parse one item of mdBook's ``sections``/``sub_items`` lists.

    Raises:
        ValueError: If the item is not a chapter, separator, or part title
    """
    if isinstance(raw, (Chapter, Separator, PartTitle)):
        return raw
    if raw == "Separator":
        return Separator()
    if isinstance(raw, dict) and len(raw) == 1:
        key, value = next(iter(raw.items()))
        if key == "Chapter":
            return Chapter.model_validate(value)
        if key == "PartTitle":
            return PartTitle(title=value)
    raise ValueError(f"Unrecognized book item: {str(raw)[:80]}")


def dump_book_item(item: BookItem) -> Any:
    """Serialize a book item in mdBook's externally tagged form."""
    if isinstance(item, Chapter):
        return {"Chapter": item.to_json_data()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


def _iter_chapters(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield from _iter_chapters(item.sub_items)
            yield item


class Book(BaseModel):
    """An mdBook book: the ordered list of top-level items."""

    sections: list[BookItem] = Field(default_factory=list)

    @field_validator("sections", mode="before")
    @classmethod
    def parse_sections(cls, v: Any) -> list[Any]:
        """Convert mdBook's externally tagged items."""
        if v is None:
            return []
        return [parse_book_item(item) for item in v]

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, sub-chapters before their parent.

        This is the order mdBook's ``for_each_mut`` visits chapters in, and it
        decides the order of entries within each index section.
        """
        yield from _iter_chapters(self.sections)

    def push_item(self, item: BookItem) -> None:
        """Append a top-level item."""
        self.sections.append(item)

    def to_json_data(self) -> dict[str, Any]:
        return {
            "sections": [dump_book_item(item) for item in self.sections],
            "__non_exhaustive": None,
        }


class PreprocessorContext(BaseModel):
    """The context mdBook passes to a preprocessor alongside the book."""

    model_config = ConfigDict(extra="allow")

    root: str = "."
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str = ""

    def preprocessor_table(self, name: str) -> dict[str, Any]:
        """Return the ``[preprocessor.<name>]`` table of book.toml, if any."""
        table = self.config.get("preprocessor", {}).get(name, {})
        return table if isinstance(table, dict) else {}


# ============================================================================
# Tool inputs
# ============================================================================

class BuildIndexInput(BaseModel):
    """Input for building tag and mention indexes from a book directory."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra='forbid'
    )

    project_path: str = Field(
        ...,
        description="Absolute path to the book root directory (where book.toml lives)",
        min_length=1
    )
    docs_path: str = Field(
        default=DEFAULT_DOCS_PATH,
        description="Chapter directory relative to the book root (mdBook's default is 'src')",
        min_length=1
    )
    write: bool = Field(
        default=False,
        description="Write rewritten chapters and index files back to disk"
    )
    rewrite_mode: RewriteMode | None = Field(
        default=None,
        description="Override the configured rewrite mode: 'boundary' or 'substring'"
    )

    @field_validator('project_path')
    @classmethod
    def validate_project_path(cls, v: str) -> str:
        """Validate project path using shared validator."""
        return _validate_project_path(v)

    @field_validator('docs_path')
    @classmethod
    def validate_docs_path(cls, v: str) -> str | None:
        """Validate docs path using shared validator."""
        return _validate_relative_path(v, field_name="docs_path")

    @field_validator('rewrite_mode', mode='before')
    @classmethod
    def normalize_rewrite_mode(cls, v: Any) -> Any:
        """Accept mode names in any case, as the config file does."""
        if isinstance(v, str):
            return v.strip().lower() or None
        return v


class SupportsRendererInput(BaseModel):
    """Input for the renderer compatibility query."""
    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra='forbid'
    )

    renderer: str = Field(
        ...,
        description="Name of the mdBook renderer (e.g., 'html', 'markdown')",
        min_length=1
    )
