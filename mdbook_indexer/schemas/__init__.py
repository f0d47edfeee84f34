"""Pydantic schemas for user-editable configuration."""

from .config import IndexerConfig, validate_config

__all__ = ["IndexerConfig", "validate_config"]
