"""Match mask helpers.

A match mask is a tuple with one entry per text character: ``1`` for an
approximately matched position, ``0`` for a position the matcher looked at
and rejected, and ``None`` where it has no information.
"""

from collections.abc import Sequence

MatchMask = tuple[int | None, ...]
MatchRange = tuple[int, int]


def merge_masks(left: Sequence[int | None], right: Sequence[int | None]) -> MatchMask:
    """Position-wise OR of two masks.

    The result is as long as the longer input. Positions unset in both
    inputs stay ``None``.
    """
    merged: list[int | None] = []
    for position in range(max(len(left), len(right))):
        a = left[position] if position < len(left) else None
        b = right[position] if position < len(right) else None
        if a is None and b is None:
            merged.append(None)
        else:
            merged.append((a or 0) | (b or 0))
    return tuple(merged)


def full_mask(length: int) -> MatchMask:
    """Mask with every one of ``length`` positions set."""
    return (1,) * length


def first_match_index(mask: Sequence[int | None]) -> int | None:
    """Index of the first set position, or None if nothing is set."""
    for position, flag in enumerate(mask):
        if flag:
            return position
    return None


def convert_mask_to_indices(
    mask: Sequence[int | None],
    min_match_char_length: int = 1,
) -> list[MatchRange]:
    """Convert a mask into inclusive ``(start, end)`` ranges of set runs.

    Args:
        mask: Match mask to convert.
        min_match_char_length: Shortest run worth reporting.

    Returns:
        Ranges in ascending order, one per maximal run of set positions.

    Example:
        >>> convert_mask_to_indices([None, None, 1, 1, 1, 0, None, None, None, 1])
        [(2, 4), (9, 9)]
    """
    ranges: list[MatchRange] = []
    start = -1

    for position, flag in enumerate(mask):
        if flag and start == -1:
            start = position
        elif not flag and start != -1:
            if position - start >= min_match_char_length:
                ranges.append((start, position - 1))
            start = -1

    # Run reaching the end of the mask
    if start != -1 and len(mask) - start >= min_match_char_length:
        ranges.append((start, len(mask) - 1))

    return ranges
