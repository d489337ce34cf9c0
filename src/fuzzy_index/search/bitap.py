"""Bit-parallel approximate string matching (Bitap).

Every text position is scanned (there is no expected location), and the
error budget grows one level at a time until no better score is reachable.

State words are kept to 32 bits so that shifted states wrap the same way
they would in a fixed-width register.
"""

from typing import Final

from fuzzy_index.exceptions import PatternTooLongError
from fuzzy_index.search.models import MatchResult
from fuzzy_index.search.pattern import MAX_BITS

_WORD_MASK: Final[int] = (1 << MAX_BITS) - 1
_SIGN_BIT: Final[int] = 1 << (MAX_BITS - 1)


def _still_plausible(state: int) -> bool:
    # Signed 32-bit comparison: a state with the sign bit set reads negative
    return 3 < state < _SIGN_BIT


def bitap_search(
    text: str,
    pattern: str,
    pattern_alphabet: dict[str, int],
    threshold: float,
    exact_match_score: float,
) -> MatchResult:
    """Approximately match one pattern chunk against a text.

    Args:
        text: Text to search in.
        pattern: Subpattern of at most ``MAX_BITS`` characters.
        pattern_alphabet: Alphabet built by ``create_pattern_alphabet``.
        threshold: Highest error ratio (errors / pattern length) accepted.
        exact_match_score: Floor applied to the final score.

    Returns:
        Match result whose mask flags approximately matched positions.

    Raises:
        PatternTooLongError: If the pattern was not chunked.
    """
    if len(pattern) > MAX_BITS:
        raise PatternTooLongError(f"Too many bits in pattern: {pattern!r}")

    pattern_len = len(pattern)
    text_len = len(text)

    if not text or not pattern:
        return MatchResult.no_match()

    current_threshold = threshold
    match_mask: list[int | None] = [None] * text_len

    # Exact occurrences first; they pin the threshold to a perfect score
    index = text.find(pattern)
    while index > -1:
        current_threshold = min(0, current_threshold)
        for position in range(index, index + pattern_len):
            match_mask[position] = 1
        index = text.find(pattern, index + pattern_len)

    best_location = -1
    final_score = 1.0
    top_bit = 1 << (pattern_len - 1)
    last_bits: list[int] = []

    # Each pass allows one more error
    for errors in range(pattern_len):
        # bits[j] is the state for text position j - 1; bits[text_len + 1] seeds the scan
        bits = [0] * (text_len + 2)
        bits[text_len + 1] = (1 << errors) - 1

        for j in range(text_len, 0, -1):
            location = j - 1
            char_match = pattern_alphabet.get(text[location], 0)

            state = ((bits[j + 1] << 1) | 1) & char_match
            if errors:
                state |= ((last_bits[j + 1] | last_bits[j]) << 1) | 1 | last_bits[j + 1]
            state &= _WORD_MASK
            bits[j] = state

            if not state & top_bit:
                continue

            match_mask[location] = 1 if char_match else 0

            if errors:
                # Extend the mask over the span the fuzzy match still covers
                k = j
                while k < len(bits) and _still_plausible(bits[k]):
                    if k < text_len:
                        match_mask[k] = 1
                    k += 1

            final_score = errors / pattern_len

            if final_score <= current_threshold:
                current_threshold = final_score
                best_location = location

        # No better match is possible with more errors
        if (errors + 1) / pattern_len > current_threshold:
            break

        last_bits = bits

    # Exact matches within a larger text count as "almost" exact
    final_score = max(exact_match_score, final_score)

    if best_location < 0:
        return MatchResult.no_match(score=final_score)

    return MatchResult(is_match=True, score=final_score, match_mask=tuple(match_mask))
