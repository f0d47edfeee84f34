"""Configuration loading.

Options are layered, later sources winning:

1. schema defaults
2. ``.book-indexer.yml`` at the book root
3. the ``[preprocessor.indexer]`` table of book.toml
4. explicit overrides (tool arguments)
"""

from pathlib import Path
from typing import Any

import yaml

from ..constants import CONFIG_FILENAME, MDBOOK_PREPROCESSOR_KEYS
from ..schemas.config import IndexerConfig, validate_config


def load_config(project_path: Path) -> dict[str, Any] | None:
    """Load .book-indexer.yml from the book root.

    Returns:
        Parsed options, or None when the file doesn't exist

    Raises:
        ValueError: If the file can't be read or isn't a YAML mapping
    """
    config_path = project_path / CONFIG_FILENAME
    if not config_path.exists():
        return None

    try:
        with open(config_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read {CONFIG_FILENAME}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{CONFIG_FILENAME} must contain a mapping, got {type(data).__name__}")
    return data


def save_config(project_path: Path, config: IndexerConfig) -> Path:
    """Write options to .book-indexer.yml with a short guide appended."""
    config_path = project_path / CONFIG_FILENAME
    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)

        f.write("\n")
        f.write("# " + "=" * 76 + "\n")
        f.write("# Configuration Guide\n")
        f.write("# " + "=" * 76 + "\n")
        f.write("#\n")
        f.write("# tags_path / mentions_path: where the index chapters are added,\n")
        f.write("#   relative to the book source. Links point at <path>#<name>.\n")
        f.write("# tags_title / mentions_title: heading of each index chapter.\n")
        f.write("# rewrite_mode: 'boundary' links each #tag / @mention token;\n")
        f.write("#   'substring' replaces every literal match, so '#a' also hits '#ab'.\n")
        f.write("# sort_entries: list index sections alphabetically.\n")
        f.write("#\n")
        f.write("# The same keys can be set under [preprocessor.indexer] in book.toml,\n")
        f.write("# which takes precedence over this file.\n")

    return config_path


def book_toml_options(table: dict[str, Any]) -> dict[str, Any]:
    """Strip the keys mdBook itself owns from a preprocessor table."""
    return {k: v for k, v in table.items() if k not in MDBOOK_PREPROCESSOR_KEYS}


def resolve_config(
    project_path: Path | None = None,
    book_toml_table: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None
) -> IndexerConfig:
    """Merge every configuration source into a validated IndexerConfig.

    Args:
        project_path: Book root to look for .book-indexer.yml in
        book_toml_table: The [preprocessor.indexer] table, if any
        overrides: Explicit values; None entries are ignored

    Raises:
        ValueError: If the YAML file is unreadable
        pydantic.ValidationError: If the merged options are invalid
    """
    data: dict[str, Any] = {}

    if project_path is not None:
        data.update(load_config(project_path) or {})

    if book_toml_table:
        data.update(book_toml_options(book_toml_table))

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return validate_config(data)
