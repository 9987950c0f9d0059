"""Stack line-drawing characters on top of each other.

Each supported character is represented by a 4 bit segment mask: starting from
the least significant bit, the bits stand for up, right, down and left.

Examples:
    >>> stack("┌", "┴")
    '┼'

    >>> bits_to_char(0b1011)
    '┴'
"""
from __future__ import annotations

import logging

from linestack.base import LINE_DRAWING_CHARS, NUM_MASKS, char_bits_mapping

log = logging.getLogger(__name__)


def char_to_bits(c: str) -> int | None:
    """Convert a line-drawing character to its segment mask.

    Args:
        c: The character to look up.

    Returns:
        The mask in the range [0, 15], or `None` if the character is unsupported.

    Examples:
        >>> char_to_bits("┬")
        14

        >>> char_to_bits("x") is None
        True
    """
    return char_bits_mapping.get(c)


def bits_to_char(bits: int) -> str:
    """Convert a segment mask to its line-drawing character.

    Args:
        bits: The mask. Bits are up, right, down, left from least significant.

    Returns:
        The character showing exactly those segments.

    Raises:
        ValueError: If `bits` is not between 0 and 15.

    Examples:
        >>> bits_to_char(0b1101)
        '┤'
    """
    if not 0 <= bits < NUM_MASKS:
        raise ValueError(
            f"Bit set must be between 0 and {NUM_MASKS - 1} inclusive but got {bits}"
        )
    return LINE_DRAWING_CHARS[bits]


def segments_to_char(*directions: int) -> str:
    """Return the character with the given segments switched on.

    Args:
        directions: Any of `UP`, `RIGHT`, `DOWN` and `LEFT`.

    Examples:
        >>> from linestack import UP, DOWN
        >>> segments_to_char(UP, DOWN)
        '│'
    """
    bits = 0
    for direction in directions:
        bits |= direction
    return bits_to_char(bits)


def stack(a: str, b: str) -> str | None:
    """Stack two line-drawing characters and return the result.

    Args:
        a: The first character.
        b: The second character.

    Returns:
        The character holding the segments of both, or `None` if either input
        is unsupported.

    Examples:
        >>> stack("─", "│")
        '┼'

        >>> stack(" ", "└")
        '└'
    """
    bits_a = char_to_bits(a)
    bits_b = char_to_bits(b)
    if bits_a is None or bits_b is None:
        log.debug("Cannot stack unsupported characters %r and %r", a, b)
        return None

    return LINE_DRAWING_CHARS[bits_a | bits_b]
