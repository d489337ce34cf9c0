"""Plain text output formatter."""

import json
from collections.abc import Sequence
from typing import TextIO

from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.output.base import OutputFormatter, ResultRow, split_by_ranges


class PlainFormatter(OutputFormatter):
    """Plain text output formatter.

    Matched characters are wrapped in configurable markers, ``[`` and ``]``
    by default, so output stays readable when piped.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        open_marker: str = "[",
        close_marker: str = "]",
    ) -> None:
        super().__init__(stream, error_stream, verbose)
        self._open_marker = open_marker
        self._close_marker = close_marker

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.PLAIN

    def highlight(self, value: str, ranges: Sequence[tuple[int, int]]) -> str:
        """Wrap every matched range of a value in markers."""
        return "".join(
            f"{self._open_marker}{segment}{self._close_marker}" if matched else segment
            for segment, matched in split_by_ranges(value, ranges)
        )

    def format_results(self, rows: Sequence[ResultRow], title: str | None = None) -> str:
        """Format result rows as plain text."""
        lines: list[str] = []

        if title:
            lines.append(title)
            lines.append("-" * len(title))
            lines.append("")

        if not rows:
            lines.append("No matches")
            return "\n".join(lines)

        for row in rows:
            status = "" if row.is_match else " (excluded)"
            lines.append(f"{row.rank}. #{row.index} score={row.score:.6g}{status}")
            for matched in row.matched:
                lines.append(f"   {matched.field}: {self.highlight(matched.value, matched.ranges)}")
            if self._verbose:
                lines.append(f"   object: {json.dumps(row.obj, default=str, ensure_ascii=False)}")

        return "\n".join(lines)

    def format_error(self, message: str) -> str:
        """Format an error message as plain text."""
        return f"Error: {message}"
