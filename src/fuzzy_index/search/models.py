"""Data records used by the search index."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Final, Generic, TypeVar

from fuzzy_index.exceptions import InvalidFieldError
from fuzzy_index.search.mask import MatchMask, MatchRange

T = TypeVar("T")

# Score carried by objects returned with return_excluded that did not match
EXCLUDED_SCORE: Final[int] = 2**53 - 1

FieldValue = str | Sequence[str]
FieldMatches = list[list[MatchRange] | None]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one pattern against one text value."""

    is_match: bool
    score: float
    match_mask: MatchMask = ()

    @classmethod
    def no_match(cls, score: float = 1.0) -> "MatchResult":
        """Create a non-matching result."""
        return cls(is_match=False, score=score, match_mask=())


@dataclass(frozen=True)
class FieldDefinition(Generic[T]):
    """A weighted accessor producing searchable text from an object.

    Attributes:
        accessor: Returns a string or a sequence of strings for an object.
        weight: Relative importance of the field in the aggregate score.
        use_exact_search: Only whole-value equality with a pattern matches.
        only_count_weight_if_matched: Leave the weight out of the total
            unless the field matched.
        name: Display name, used by output formatters.
    """

    accessor: Callable[[T], FieldValue | None]
    weight: float = 1.0
    use_exact_search: bool = False
    only_count_weight_if_matched: bool = False
    name: str | None = None

    def __post_init__(self) -> None:
        if not callable(self.accessor):
            raise InvalidFieldError(f"Field accessor is not callable: {self.accessor!r}")
        if self.weight < 0:
            raise InvalidFieldError(f"Field weight must not be negative: {self.weight}")


@dataclass(frozen=True)
class IndexedObject:
    """Field values extracted from one source object at index time."""

    index: int
    field_values: tuple[str | tuple[str, ...] | None, ...]


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """One ranked entry returned by ``SearchIndex.search``.

    ``matches[field][value]`` holds the matched character ranges of each
    value, or None for values that did not match. It is None for excluded
    objects.
    """

    is_match: bool
    index: int
    obj: T
    score: float
    matches: list[FieldMatches] | None = field(default=None)


SortCompareFunc = Callable[[SearchResult[Any], SearchResult[Any]], float]
ScoreAdjustmentFunc = Callable[[SearchResult[Any]], float]
