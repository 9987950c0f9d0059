from linestack.base import DOWN, LEFT, LINE_DRAWING_CHARS, RIGHT, UP
from linestack.stacker import bits_to_char, char_to_bits, segments_to_char, stack

__all__ = [
    "UP",
    "RIGHT",
    "DOWN",
    "LEFT",
    "LINE_DRAWING_CHARS",
    "bits_to_char",
    "char_to_bits",
    "segments_to_char",
    "stack",
]
