"""Whole-pattern matching on top of the chunk matcher."""

from functools import reduce

from fuzzy_index.search.bitap import bitap_search
from fuzzy_index.search.mask import full_mask, merge_masks
from fuzzy_index.search.models import MatchResult
from fuzzy_index.search.options import SearchOptions
from fuzzy_index.search.pattern import CompiledPattern, compile_pattern


class PatternMatcher:
    """Matches one search term against text values.

    Long terms are matched chunk by chunk. Every chunk has to match (the
    chunks are ANDed); the chunk masks are ORed together and the chunk
    scores averaged.
    """

    def __init__(self, pattern: str, options: SearchOptions) -> None:
        """Compile a pattern for repeated matching.

        Args:
            pattern: Search term.
            options: Query options supplying the threshold and exact scores.
        """
        self.pattern = pattern
        self.compiled: CompiledPattern = compile_pattern(pattern)
        self.threshold = options.threshold
        self.exact_match_score = options.exact_match_score
        self.full_exact_match_score = options.full_exact_match_score

    def search_in(self, text: str) -> MatchResult:
        """Match the pattern against one text value."""
        if not text:
            return MatchResult.no_match()

        if text == self.pattern:
            return MatchResult(
                is_match=True,
                score=self.full_exact_match_score,
                match_mask=full_mask(len(text)),
            )

        if self.compiled.is_empty:
            return MatchResult.no_match()

        chunk_results: list[MatchResult] = []
        for chunk in self.compiled.chunks:
            result = bitap_search(
                text,
                chunk.subpattern,
                chunk.alphabet,
                self.threshold,
                self.exact_match_score,
            )
            if not result.is_match:
                # One missing chunk fails the whole pattern
                return MatchResult.no_match()
            chunk_results.append(result)

        return MatchResult(
            is_match=True,
            score=sum(r.score for r in chunk_results) / len(chunk_results),
            match_mask=reduce(merge_masks, (r.match_mask for r in chunk_results), ()),
        )
