from typing import Final

# Segment bits, clockwise from the top.
UP: Final[int] = 1 << 0
RIGHT: Final[int] = 1 << 1
DOWN: Final[int] = 1 << 2
LEFT: Final[int] = 1 << 3

NUM_MASKS: Final[int] = 16

# Indexed by segment mask.
LINE_DRAWING_CHARS: Final[str] = (
    " "  # 0000
    "╵"  # 0001 ╵
    "╶"  # 0010 ╶
    "└"  # 0011 └
    "╷"  # 0100 ╷
    "│"  # 0101 │
    "┌"  # 0110 ┌
    "├"  # 0111 ├
    "╴"  # 1000 ╴
    "┘"  # 1001 ┘
    "─"  # 1010 ─
    "┴"  # 1011 ┴
    "┐"  # 1100 ┐
    "┤"  # 1101 ┤
    "┬"  # 1110 ┬
    "┼"  # 1111 ┼
)

char_bits_mapping: Final[dict[str, int]] = {
    c: bits for bits, c in enumerate(LINE_DRAWING_CHARS)
}
