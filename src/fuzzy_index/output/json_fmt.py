"""JSON output formatter."""

import json
from collections.abc import Sequence
from typing import Any, TextIO

from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.output.base import OutputFormatter, ResultRow, split_by_ranges


class JSONFormatter(OutputFormatter):
    """JSON output formatter.

    Produces structured JSON output suitable for programmatic
    consumption and integration with other tools.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
        indent: int | None = 2,
        ensure_ascii: bool = False,
    ) -> None:
        """Initialize JSON formatter.

        Args:
            stream: Output stream.
            error_stream: Error stream.
            verbose: Whether to show verbose output.
            indent: JSON indentation (None for compact).
            ensure_ascii: Whether to escape non-ASCII characters.
        """
        super().__init__(stream, error_stream, verbose)
        self._indent = indent
        self._ensure_ascii = ensure_ascii

    @property
    def format_type(self) -> OutputFormat:
        return OutputFormat.JSON

    def _to_json(self, data: Any) -> str:
        """Convert data to JSON string."""
        return json.dumps(
            data,
            indent=self._indent,
            ensure_ascii=self._ensure_ascii,
            default=str,  # Handle non-serializable types
        )

    def row_to_dict(self, row: ResultRow) -> dict[str, Any]:
        """Convert a result row to a JSON-serializable dict.

        Verbose output also splits every matched value into
        ``{"text", "matched"}`` segments for highlighting.
        """
        data: dict[str, Any] = {
            "rank": row.rank,
            "index": row.index,
            "score": row.score,
            "is_match": row.is_match,
            "object": row.obj,
            "matches": [
                {
                    "field": matched.field,
                    "value": matched.value,
                    "ranges": [list(r) for r in matched.ranges],
                }
                for matched in row.matched
            ],
        }
        if self._verbose:
            for entry, matched in zip(data["matches"], row.matched):
                entry["segments"] = [
                    {"text": text, "matched": is_match}
                    for text, is_match in split_by_ranges(matched.value, matched.ranges)
                ]
        return data

    def format_results(self, rows: Sequence[ResultRow], title: str | None = None) -> str:
        """Format result rows as one JSON document."""
        output: dict[str, Any] = {
            "success": True,
            "results": [self.row_to_dict(row) for row in rows],
            "count": len(rows),
        }
        if title:
            output["query"] = title
        return self._to_json(output)

    def format_error(self, message: str) -> str:
        """Format an error message as JSON."""
        return self._to_json({"success": False, "error": message})


class JSONLinesFormatter(JSONFormatter):
    """JSON Lines (JSONL) output formatter.

    Produces newline-delimited JSON, one result per line.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        # JSONL uses compact JSON (no indentation)
        super().__init__(stream, error_stream, verbose, indent=None)

    def format_results(self, rows: Sequence[ResultRow], title: str | None = None) -> str:
        """Format each result row as a separate JSON line."""
        return "\n".join(self._to_json(self.row_to_dict(row)) for row in rows)
