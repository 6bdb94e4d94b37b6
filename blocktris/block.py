"""A single coloured cell of a tetromino."""

from __future__ import annotations

import sys
from typing import TextIO

from .constants import Color
from .position import Point, Position

__all__ = ["Block", "BLOCK_TEXT", "SHADOW_TEXT"]

BLOCK_TEXT = "■"
SHADOW_TEXT = "□"


class Block:
    """A board cell with a position, a colour and stop/shadow flags."""

    def __init__(
        self,
        axis_x: int = 0,
        axis_y: int = 0,
        relative_x: int = 0,
        relative_y: int = 0,
        color: int = Color.RESET,
    ) -> None:
        self.point = Point(Position(axis_x, axis_y), Position(relative_x, relative_y))
        self.color = color
        self.text = BLOCK_TEXT
        self.stopped = False
        self.shadow = False

    def __repr__(self) -> str:
        return (
            f"Block(x={self.x}, y={self.y}, color={int(self.color)}, "
            f"stopped={self.stopped}, shadow={self.shadow})"
        )

    @property
    def axis(self) -> Position:
        return self.point.axis

    @axis.setter
    def axis(self, value: Position) -> None:
        self.point.axis = value

    @property
    def relative(self) -> Position:
        return self.point.relative

    @relative.setter
    def relative(self, value: Position) -> None:
        self.point.relative = value

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    @property
    def rel_x(self) -> int:
        return self.point.rel_x

    @property
    def rel_y(self) -> int:
        return self.point.rel_y

    def to_string(self) -> str:
        """Return the block's text wrapped in its ANSI colour."""
        return f"\x1b[{int(self.color)}m{self.text}\x1b[{int(Color.RESET)}m"

    def show(self, out: TextIO | None = None) -> None:
        """Write the coloured block to ``out`` (standard output by default)."""
        (out if out is not None else sys.stdout).write(self.to_string())

    def move(self, dx: int, dy: int) -> None:
        """Shift the block's axis by (dx, dy)."""
        self.point += Position(dx, dy)

    def rotate(self, direction: int) -> None:
        """Rotate the block about its axis."""
        self.point.rotate(direction)

    def assign(self, other: Block) -> None:
        """Copy colour, position and flags from another block; the text is kept."""
        if other is self:
            return
        self.color = other.color
        self.point = other.point.copy()
        self.stopped = other.stopped
        self.shadow = other.shadow

    def __iadd__(self, offset: Position) -> Block:
        self.point += offset
        return self

    def __isub__(self, offset: Position) -> Block:
        self.point -= offset
        return self