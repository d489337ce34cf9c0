"""Pydantic models for fuzzy-index configuration."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from fuzzy_index.search.options import SearchOptions


class OutputFormat(str, Enum):
    """Supported output formats."""

    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: OutputFormat = OutputFormat.RICH
    color: bool = True
    limit: int = Field(default=20, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False


def _default_search_options() -> SearchOptions:
    return SearchOptions(threshold=0.35)


class FuzzyIndexConfig(BaseModel):
    """Root configuration for fuzzy-index."""

    search: SearchOptions = Field(default_factory=_default_search_options)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
