"""Pydantic schema for the indexer configuration.

Options come from ``.book-indexer.yml`` at the book root and from the
``[preprocessor.indexer]`` table of book.toml. Both use the same keys.
"""

from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import (
    DEFAULT_MENTIONS_PATH,
    DEFAULT_MENTIONS_TITLE,
    DEFAULT_TAGS_PATH,
    DEFAULT_TAGS_TITLE,
    MarkerKind,
    RewriteMode,
)


class IndexerConfig(BaseModel):
    """Schema for indexer options.

    Unknown keys are accepted so book.toml tables can carry options for other
    tools without failing validation.
    """

    model_config = ConfigDict(extra="allow")

    # Index chapters
    tags_path: str = Field(
        default=DEFAULT_TAGS_PATH,
        description="Path of the generated tags chapter, also used as link target"
    )
    mentions_path: str = Field(
        default=DEFAULT_MENTIONS_PATH,
        description="Path of the generated mentions chapter, also used as link target"
    )
    tags_title: str = Field(
        default=DEFAULT_TAGS_TITLE,
        min_length=1,
        description="Heading and chapter name of the tags index"
    )
    mentions_title: str = Field(
        default=DEFAULT_MENTIONS_TITLE,
        min_length=1,
        description="Heading and chapter name of the mentions index"
    )

    # Rewriting and rendering
    rewrite_mode: RewriteMode = Field(
        default=RewriteMode.BOUNDARY,
        description="'boundary' links scanned tokens only; 'substring' links every literal match"
    )
    sort_entries: bool = Field(
        default=False,
        description="Render index sections sorted by marker name"
    )

    @field_validator("tags_path", "mentions_path")
    @classmethod
    def validate_index_path(cls, v: str) -> str:
        """Index paths must be relative markdown paths inside the book."""
        path = PurePosixPath(v.replace('\\', '/'))
        if path.is_absolute() or '..' in path.parts:
            raise ValueError(f"Index path must be relative to the book source: '{v}'")
        if path.suffix != ".md":
            raise ValueError(f"Index path must end in .md: '{v}'")
        return path.as_posix()

    @field_validator("rewrite_mode", mode="before")
    @classmethod
    def normalize_rewrite_mode(cls, v: Any) -> Any:
        """Accept mode names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def check_distinct_index_paths(self) -> "IndexerConfig":
        """The two index chapters need their own paths."""
        if self.tags_path == self.mentions_path:
            raise ValueError(
                f"tags_path and mentions_path must differ: both are '{self.tags_path}'"
            )
        return self

    def index_paths(self) -> dict[MarkerKind, str]:
        return {
            MarkerKind.TAG: self.tags_path,
            MarkerKind.MENTION: self.mentions_path,
        }

    def index_titles(self) -> dict[MarkerKind, str]:
        return {
            MarkerKind.TAG: self.tags_title,
            MarkerKind.MENTION: self.mentions_title,
        }


def validate_config(data: dict[str, Any]) -> IndexerConfig:
    """Validate indexer configuration data.

    Args:
        data: Raw data from YAML or book.toml

    Returns:
        Validated IndexerConfig model

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return IndexerConfig.model_validate(data)
