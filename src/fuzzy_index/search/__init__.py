"""Fuzzy search core.

This module provides the bitap approximate matcher and the weighted
multi-field index built on top of it.
"""

from fuzzy_index.search.bitap import bitap_search
from fuzzy_index.search.index import SearchIndex
from fuzzy_index.search.mask import (
    MatchMask,
    MatchRange,
    convert_mask_to_indices,
    first_match_index,
    merge_masks,
)
from fuzzy_index.search.matcher import PatternMatcher
from fuzzy_index.search.models import (
    EXCLUDED_SCORE,
    FieldDefinition,
    IndexedObject,
    MatchResult,
    SearchResult,
)
from fuzzy_index.search.options import SearchOptions
from fuzzy_index.search.pattern import (
    MAX_BITS,
    CompiledPattern,
    PatternChunk,
    compile_pattern,
    create_pattern_alphabet,
)

__all__ = [
    # Index
    "SearchIndex",
    "SearchOptions",
    "FieldDefinition",
    "IndexedObject",
    "SearchResult",
    "EXCLUDED_SCORE",
    # Matching
    "PatternMatcher",
    "MatchResult",
    "bitap_search",
    # Patterns
    "MAX_BITS",
    "CompiledPattern",
    "PatternChunk",
    "compile_pattern",
    "create_pattern_alphabet",
    # Masks
    "MatchMask",
    "MatchRange",
    "convert_mask_to_indices",
    "first_match_index",
    "merge_masks",
]
