"""Weighted multi-field fuzzy search index.

The index extracts field values from the caller's objects once, at
construction. Every ``search`` call then works on its own state, so one
built index can serve concurrent searches.
"""

import logging
import sys
import time
from collections.abc import Sequence
from dataclasses import replace
from functools import cmp_to_key
from typing import Generic, TypeVar, overload

from fuzzy_index.search.mask import (
    MatchRange,
    convert_mask_to_indices,
    first_match_index,
    full_mask,
    merge_masks,
)
from fuzzy_index.search.matcher import PatternMatcher
from fuzzy_index.search.models import (
    EXCLUDED_SCORE,
    FieldDefinition,
    FieldMatches,
    IndexedObject,
    MatchResult,
    ScoreAdjustmentFunc,
    SearchResult,
    SortCompareFunc,
)
from fuzzy_index.search.options import SearchOptions
from fuzzy_index.utils.logging import get_logger, log_with_context

T = TypeVar("T")

logger = get_logger(__name__)

# Stand-in for a perfect field score so the weighted product never hits 0 ** x
PERFECT_SCORE_EPSILON = sys.float_info.epsilon

# Match mask positions that count as "close to the start" of a value
_START_WINDOW = 3


def _as_value_list(raw: str | tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(raw, str):
        return (raw,)
    return raw


def _freeze_value(raw: object) -> str | tuple[str, ...] | None:
    if raw is None or isinstance(raw, str):
        return raw
    return tuple(raw)  # type: ignore[arg-type]


class _ObjectScorer:
    """Per-search working state shared by every object in one query."""

    def __init__(self, patterns: Sequence[str], options: SearchOptions) -> None:
        self.patterns = list(patterns)
        self.options = options
        self.matchers = [PatternMatcher(p, options) for p in self.patterns]
        self.space_characters = frozenset(options.space_characters)

    def score_exact(
        self,
        value: str,
        satisfied: list[bool],
    ) -> MatchResult | None:
        """Whole-value equality; the first equal pattern wins."""
        for pat_index, pattern in enumerate(self.patterns):
            if not pattern:
                continue
            if value == pattern:
                satisfied[pat_index] = True
                return MatchResult(is_match=True, score=0.0, match_mask=full_mask(len(pattern)))
        return None

    def score_fuzzy(
        self,
        value: str,
        satisfied: list[bool],
    ) -> MatchResult | None:
        """Match every pattern against one value and fold the results."""
        options = self.options
        combined: MatchResult | None = None
        first_indices: list[int | None] = [None] * len(self.patterns)

        for pat_index, matcher in enumerate(self.matchers):
            result = matcher.search_in(value)
            if not result.is_match:
                continue

            satisfied[pat_index] = True
            score = result.score
            first_index = first_match_index(result.match_mask)
            first_indices[pat_index] = first_index

            if options.multiplier_for_match_close_to_start is not None:
                if any(result.match_mask[:_START_WINDOW]):
                    score *= options.multiplier_for_match_close_to_start

            if (
                options.multiplier_for_match_after_space is not None
                and first_index
                and value[first_index - 1] in self.space_characters
            ):
                score *= options.multiplier_for_match_after_space

            if options.multiplier_for_matches_in_order is not None and pat_index > 0:
                previous_index = first_indices[pat_index - 1]
                if (
                    previous_index is not None
                    and first_index is not None
                    and first_index > previous_index
                ):
                    score *= options.multiplier_for_matches_in_order

            if combined is None:
                combined = replace(result, score=score)
            else:
                combined = MatchResult(
                    is_match=True,
                    score=min(score, combined.score),
                    match_mask=merge_masks(combined.match_mask, result.match_mask),
                )

        return combined


class SearchIndex(Generic[T]):
    """In-memory fuzzy search over weighted object fields.

    Example:
        >>> index = SearchIndex(
        ...     lines,
        ...     [FieldDefinition(lambda line: line["code"], weight=1),
        ...      FieldDefinition(lambda line: line["cities"], weight=0.1)],
        ...     sort_compare=lambda a, b: a.score - b.score,
        ... )
        >>> results = index.search(["Ramot"], SearchOptions(threshold=0.35))
    """

    def __init__(
        self,
        objects: Sequence[T],
        fields: Sequence[FieldDefinition[T] | None],
        sort_compare: SortCompareFunc | None = None,
        score_adjustment: ScoreAdjustmentFunc | None = None,
    ) -> None:
        """Extract field values from every object.

        Args:
            objects: Objects to search.
            fields: Field definitions; None entries are skipped.
            sort_compare: Comparator ordering the result list. Results stay
                in object order when omitted.
            score_adjustment: Called with each matched result; its return
                value replaces the computed score before sorting.
        """
        self.original_objects: tuple[T, ...] = tuple(objects)
        self.fields: tuple[FieldDefinition[T] | None, ...] = tuple(fields)
        self.sort_compare = sort_compare
        self.score_adjustment = score_adjustment

        self.indexed_objects: tuple[IndexedObject, ...] = tuple(
            IndexedObject(
                index=i,
                field_values=tuple(
                    _freeze_value(f.accessor(obj)) if f is not None else None
                    for f in self.fields
                ),
            )
            for i, obj in enumerate(self.original_objects)
        )

        log_with_context(
            logger,
            logging.DEBUG,
            "Built search index",
            objects=len(self.indexed_objects),
            fields=len(self.fields),
        )

    def __len__(self) -> int:
        return len(self.indexed_objects)

    @overload
    def search(
        self, patterns: Sequence[str], options: SearchOptions
    ) -> list[SearchResult[T]]: ...

    @overload
    def search(
        self,
        patterns: Sequence[str],
        options: float,
        return_excluded: bool = False,
    ) -> list[SearchResult[T]]: ...

    def search(
        self,
        patterns: Sequence[str],
        options: SearchOptions | float,
        return_excluded: bool = False,
    ) -> list[SearchResult[T]]:
        """Search the index.

        Args:
            patterns: Search terms. An object matches only if every term
                matches somewhere in its fields.
            options: Query options, or a bare threshold for the positional
                ``(threshold, return_excluded)`` form.
            return_excluded: Positional form only; include non-matching
                objects with ``EXCLUDED_SCORE``.

        Returns:
            Results ordered by the index's comparator.
        """
        if not isinstance(options, SearchOptions):
            options = SearchOptions.from_threshold(options, return_excluded)

        started = time.perf_counter()
        scorer = _ObjectScorer(patterns, options)
        results: list[SearchResult[T]] = []

        for indexed in self.indexed_objects:
            result = self._score_object(indexed, scorer)
            if result is not None:
                results.append(result)

        if self.sort_compare is not None:
            results.sort(key=cmp_to_key(self.sort_compare))

        log_with_context(
            logger,
            logging.DEBUG,
            "Search complete",
            patterns=len(scorer.patterns),
            results=len(results),
            duration_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return results

    def _score_object(
        self,
        indexed: IndexedObject,
        scorer: _ObjectScorer,
    ) -> SearchResult[T] | None:
        satisfied = [False] * len(scorer.patterns)
        field_scores: list[float | None] = []
        field_results: list[list[MatchResult | None]] = []

        for field_def, raw in zip(self.fields, indexed.field_values):
            value_results: list[MatchResult | None] = []
            field_score: float | None = None

            if field_def is not None and raw:
                for value in _as_value_list(raw):
                    value_result: MatchResult | None = None
                    if value:
                        if field_def.use_exact_search:
                            value_result = scorer.score_exact(value, satisfied)
                        else:
                            value_result = scorer.score_fuzzy(value, satisfied)

                    value_results.append(value_result)
                    if value_result is not None:
                        field_score = (
                            value_result.score
                            if field_score is None
                            else min(field_score, value_result.score)
                        )

            field_scores.append(field_score)
            field_results.append(value_results)

        obj = self.original_objects[indexed.index]

        if not all(satisfied):
            if not scorer.options.return_excluded:
                return None
            return SearchResult(
                is_match=False,
                index=indexed.index,
                obj=obj,
                score=EXCLUDED_SCORE,
                matches=None,
            )

        result = SearchResult(
            is_match=True,
            index=indexed.index,
            obj=obj,
            score=self._aggregate(field_scores),
            matches=[self._to_ranges(values) for values in field_results],
        )

        if self.score_adjustment is not None:
            result = replace(result, score=self.score_adjustment(result))

        return result

    def _aggregate(self, field_scores: list[float | None]) -> float:
        """Weighted geometric mean of the field scores."""
        total_weight = 0.0
        for field_def, score in zip(self.fields, field_scores):
            if field_def is None:
                continue
            if field_def.only_count_weight_if_matched and score is None:
                continue
            total_weight += field_def.weight

        total = 1.0
        for field_def, score in zip(self.fields, field_scores):
            if field_def is None or score is None:
                continue
            relative_weight = field_def.weight / total_weight if total_weight else 0.0
            total *= (score or PERFECT_SCORE_EPSILON) ** relative_weight

        return total

    @staticmethod
    def _to_ranges(values: list[MatchResult | None]) -> FieldMatches:
        ranges: list[list[MatchRange] | None] = []
        for result in values:
            ranges.append(convert_mask_to_indices(result.match_mask) if result else None)
        return ranges
