"""Game-wide constants: colours, rotation directions, piece kinds and board size."""

from enum import IntEnum

__all__ = [
    "Color",
    "Rotation",
    "MinoKind",
    "MAX_BLOCK",
    "ROW",
    "COL",
    "NUM_TETROMINO",
    "convert_y",
]


class Color(IntEnum):
    """ANSI foreground colour codes used to paint blocks."""

    RESET = 0
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class Rotation(IntEnum):
    """Rotation direction: clockwise or counter-clockwise."""

    CW = 1
    CCW = -1


class MinoKind(IntEnum):
    """The seven tetromino shapes."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    L = 3
    J = 4
    S = 5
    Z = 6


MAX_BLOCK = 1000
"""Most blocks a block list can hold."""

ROW = 20
"""Height of the playing field."""

COL = 10
"""Width of the playing field."""

NUM_TETROMINO = len(MinoKind)


def convert_y(y: int) -> int:
    """Turn a game y coordinate (0 at the bottom) into a render row (0 at the top)."""
    return ROW - y - 1