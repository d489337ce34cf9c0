"""fuzzy-index: in-memory approximate search over weighted object fields."""

from fuzzy_index.search import (
    EXCLUDED_SCORE,
    FieldDefinition,
    SearchIndex,
    SearchOptions,
    SearchResult,
)

__version__ = "0.1.0"

__all__ = [
    "EXCLUDED_SCORE",
    "FieldDefinition",
    "SearchIndex",
    "SearchOptions",
    "SearchResult",
    "__version__",
]
