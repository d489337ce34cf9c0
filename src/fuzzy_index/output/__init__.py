"""Output formatting (rich, plain, JSON).

This module renders search results, with their matched character ranges,
in different formats suitable for various use cases.

Usage:
    from fuzzy_index.output import build_rows, get_formatter

    formatter = get_formatter("plain")
    formatter.print_results(build_rows(results, index), title="Ramot")
"""

from typing import Any

from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.output.base import (
    MatchedValue,
    OutputFormatter,
    ResultRow,
    build_rows,
    split_by_ranges,
)
from fuzzy_index.output.json_fmt import JSONFormatter, JSONLinesFormatter
from fuzzy_index.output.plain import PlainFormatter
from fuzzy_index.output.rich_fmt import RichFormatter

__all__ = [
    # Base classes
    "OutputFormatter",
    "OutputFormat",
    "ResultRow",
    "MatchedValue",
    "build_rows",
    "split_by_ranges",
    "get_formatter",
    # Formatters
    "PlainFormatter",
    "JSONFormatter",
    "JSONLinesFormatter",
    "RichFormatter",
]


def get_formatter(
    format_type: OutputFormat | str,
    verbose: bool = False,
    **kwargs: Any,
) -> OutputFormatter:
    """Get a formatter instance by format type.

    Args:
        format_type: The output format to use.
        verbose: Whether to enable verbose output.
        **kwargs: Additional formatter-specific options.

    Returns:
        An OutputFormatter instance.

    Raises:
        ValueError: If format_type is not recognized.
    """
    if isinstance(format_type, str):
        format_type = OutputFormat(format_type.lower())

    formatters: dict[OutputFormat, type[OutputFormatter]] = {
        OutputFormat.PLAIN: PlainFormatter,
        OutputFormat.JSON: JSONFormatter,
        OutputFormat.RICH: RichFormatter,
    }

    formatter_class = formatters.get(format_type)
    if formatter_class is None:
        raise ValueError(f"Unknown format type: {format_type}")

    return formatter_class(verbose=verbose, **kwargs)
