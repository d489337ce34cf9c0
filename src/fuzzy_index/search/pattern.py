"""Pattern compilation for bit-parallel matching.

A search term is split into consecutive chunks no wider than the matcher's
bit width. Each chunk carries an alphabet mapping every character to a
bitmask of the positions it occupies in the chunk.
"""

from dataclasses import dataclass
from typing import Final

# Widest subpattern the bitap matcher can represent in one word
MAX_BITS: Final[int] = 32


@dataclass(frozen=True)
class PatternChunk:
    """A slice of a pattern that fits in one machine word."""

    subpattern: str
    alphabet: dict[str, int]
    start_index: int


@dataclass(frozen=True)
class CompiledPattern:
    """A search term and its chunks, ready for matching."""

    pattern: str
    chunks: tuple[PatternChunk, ...]

    @property
    def is_empty(self) -> bool:
        """Whether the pattern has no chunks (and so can never match)."""
        return not self.chunks


def create_pattern_alphabet(subpattern: str) -> dict[str, int]:
    """Build the character -> bitmask table for a subpattern.

    The character at position ``i`` sets bit ``len - 1 - i``, so the first
    character owns the most significant bit. Repeated characters OR their
    bits together.

    Args:
        subpattern: Chunk text, at most ``MAX_BITS`` characters.

    Returns:
        Mapping from each distinct character to its position bitmask.
    """
    length = len(subpattern)
    alphabet: dict[str, int] = {}

    for position, char in enumerate(subpattern):
        alphabet[char] = alphabet.get(char, 0) | (1 << (length - 1 - position))

    return alphabet


def compile_pattern(pattern: str) -> CompiledPattern:
    """Split a pattern into ``ceil(len / MAX_BITS)`` chunks.

    An empty pattern compiles to zero chunks.

    Args:
        pattern: Raw search term.

    Returns:
        The compiled pattern.
    """
    chunks = tuple(
        PatternChunk(
            subpattern=pattern[start : start + MAX_BITS],
            alphabet=create_pattern_alphabet(pattern[start : start + MAX_BITS]),
            start_index=start,
        )
        for start in range(0, len(pattern), MAX_BITS)
    )
    return CompiledPattern(pattern=pattern, chunks=chunks)
