"""CLI layer for fuzzy-index.

This module provides the command-line interface for fuzzy-index,
built on Typer with Rich formatting support.

Usage:
    fuzzy-index search lines.json Ramot --field code --field cities:0.1
"""

from fuzzy_index.cli.app import app, main
from fuzzy_index.cli.options import (
    ExactFieldOption,
    FieldOption,
    FormatChoice,
    FormatOption,
    OptionalFieldOption,
    VerboseOption,
)

__all__ = [
    # App
    "app",
    "main",
    # Options
    "ExactFieldOption",
    "FieldOption",
    "FormatChoice",
    "FormatOption",
    "OptionalFieldOption",
    "VerboseOption",
]
