"""Query options for the search index."""

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """Options for a single ``SearchIndex.search`` call.

    Multipliers left as None disable the corresponding bonus. Scores are
    error ratios, so lower is better and a multiplier below 1 is a reward.
    """

    model_config = ConfigDict(frozen=True)

    # Highest error ratio still counted as a match; 0.24-0.35 works well
    threshold: float
    return_excluded: bool = False
    # Must be non-negative, scores are raised to fractional powers
    multiplier_for_match_close_to_start: float | None = Field(default=None, ge=0)
    multiplier_for_match_after_space: float | None = Field(default=None, ge=0)
    space_characters: tuple[str, ...] = (" ",)
    multiplier_for_matches_in_order: float | None = Field(default=None, ge=0)
    exact_match_score: float = Field(default=0.001, ge=0)
    full_exact_match_score: float = Field(default=0.0, ge=0)

    @classmethod
    def from_threshold(
        cls,
        threshold: float,
        return_excluded: bool = False,
    ) -> "SearchOptions":
        """Build options from the positional ``(threshold, return_excluded)`` form."""
        return cls(threshold=threshold, return_excluded=return_excluded)
