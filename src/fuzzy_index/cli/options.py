"""Shared CLI options for fuzzy-index commands."""

from enum import Enum
from typing import Annotated

import typer

from fuzzy_index.config.schema import OutputFormat


class FormatChoice(str, Enum):
    """Output format choices for CLI."""

    PLAIN = "plain"
    JSON = "json"
    JSONL = "jsonl"
    RICH = "rich"


# Type aliases for common CLI options
FormatOption = Annotated[
    FormatChoice | None,
    typer.Option(
        "--format",
        "-f",
        help="Output format (plain, json, jsonl, rich). Defaults to config setting.",
        case_sensitive=False,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show the matched objects and debug logging.",
    ),
]

FieldOption = Annotated[
    list[str] | None,
    typer.Option(
        "--field",
        "-k",
        help="Field to search as NAME[:WEIGHT]; dotted names reach nested keys. Repeatable.",
    ),
]

ExactFieldOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exact-field",
        "-e",
        help="Field matched only by whole-value equality, as NAME[:WEIGHT]. Repeatable.",
    ),
]

OptionalFieldOption = Annotated[
    list[str] | None,
    typer.Option(
        "--optional-field",
        help="Field whose weight only counts when it matched, as NAME[:WEIGHT]. Repeatable.",
    ),
]


def get_output_format(
    format_choice: FormatChoice | None, default: str = "rich"
) -> OutputFormat:
    """Convert CLI format choice to OutputFormat.

    JSON Lines shares the JSON output format.
    """
    if format_choice is None:
        return OutputFormat(default)
    if format_choice == FormatChoice.JSONL:
        return OutputFormat.JSON
    return OutputFormat(format_choice.value)
