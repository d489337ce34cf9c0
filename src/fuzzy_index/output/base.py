"""Output formatter protocol and base classes."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from fuzzy_index.config.schema import OutputFormat
from fuzzy_index.search.index import SearchIndex
from fuzzy_index.search.mask import MatchRange
from fuzzy_index.search.models import SearchResult


@dataclass
class MatchedValue:
    """One field value with the character ranges that matched."""

    field: str
    value: str
    ranges: list[MatchRange]


@dataclass
class ResultRow:
    """Display-ready view of a search result.

    Attributes:
        rank: 1-based position in the result list.
        index: Position of the object in the indexed collection.
        score: Result score (lower is better).
        is_match: Whether the object matched every pattern.
        obj: The original object.
        matched: Values that matched, with their ranges.
    """

    rank: int
    index: int
    score: float
    is_match: bool
    obj: Any
    matched: list[MatchedValue] = field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        rank: int,
        result: SearchResult[Any],
        index: SearchIndex[Any],
    ) -> "ResultRow":
        """Pair a result's ranges with the values they refer to."""
        row = cls(
            rank=rank,
            index=result.index,
            score=result.score,
            is_match=result.is_match,
            obj=result.obj,
        )
        if result.matches is None:
            return row

        indexed = index.indexed_objects[result.index]
        for field_pos, value_ranges in enumerate(result.matches):
            field_def = index.fields[field_pos]
            raw = indexed.field_values[field_pos]
            if field_def is None or not raw:
                continue
            values = (raw,) if isinstance(raw, str) else raw
            name = field_def.name or f"field{field_pos}"
            for value, ranges in zip(values, value_ranges):
                if ranges:
                    row.matched.append(MatchedValue(field=name, value=value, ranges=ranges))
        return row


def build_rows(
    results: Sequence[SearchResult[Any]],
    index: SearchIndex[Any],
) -> list[ResultRow]:
    """Convert results into display rows, ranked from 1."""
    return [
        ResultRow.from_result(rank, result, index)
        for rank, result in enumerate(results, start=1)
    ]


def split_by_ranges(value: str, ranges: Sequence[MatchRange]) -> list[tuple[str, bool]]:
    """Split a value into ``(segment, matched)`` pieces along match ranges."""
    segments: list[tuple[str, bool]] = []
    cursor = 0
    for start, end in ranges:
        if start > cursor:
            segments.append((value[cursor:start], False))
        segments.append((value[start : end + 1], True))
        cursor = end + 1
    if cursor < len(value):
        segments.append((value[cursor:], False))
    return segments


class OutputFormatter(ABC):
    """Abstract base class for output formatters.

    Formatters render search results to the terminal in different formats
    (plain text, JSON, rich formatted).
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the formatter.

        Args:
            stream: Output stream (defaults to stdout).
            error_stream: Error stream (defaults to stderr).
            verbose: Whether to show verbose output.
        """
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr
        self._verbose = verbose

    @property
    def stream(self) -> TextIO:
        """Get the output stream."""
        return self._stream

    @property
    def error_stream(self) -> TextIO:
        """Get the error stream."""
        return self._error_stream

    @property
    def verbose(self) -> bool:
        """Whether verbose output is enabled."""
        return self._verbose

    @property
    @abstractmethod
    def format_type(self) -> OutputFormat:
        """Get the format type of this formatter."""

    @abstractmethod
    def format_results(self, rows: Sequence[ResultRow], title: str | None = None) -> str:
        """Format result rows as a string.

        Args:
            rows: Rows built with ``build_rows``.
            title: Optional heading, usually the query.

        Returns:
            Formatted string representation.
        """

    @abstractmethod
    def format_error(self, message: str) -> str:
        """Format an error message."""

    def print_results(self, rows: Sequence[ResultRow], title: str | None = None) -> None:
        """Format and print result rows."""
        print(self.format_results(rows, title), file=self._stream)

    def print_error(self, message: str) -> None:
        """Format and print an error message."""
        print(self.format_error(message), file=self._error_stream)
