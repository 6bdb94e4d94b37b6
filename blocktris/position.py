"""Plain 2-D positions and block points made of an axis plus a relative offset."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import Rotation

__all__ = ["Position", "Point"]


@dataclass(frozen=True)
class Position:
    """An immutable integer coordinate pair."""

    x: int = 0
    y: int = 0

    def swapped(self) -> Position:
        """Return the position with x and y exchanged."""
        return Position(self.y, self.x)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)


@dataclass
class Point:
    """A block coordinate: the piece's axis plus the block's offset from it."""

    axis: Position = field(default_factory=Position)
    relative: Position = field(default_factory=Position)

    @property
    def x(self) -> int:
        """Absolute x coordinate."""
        return self.axis.x + self.relative.x

    @property
    def y(self) -> int:
        """Absolute y coordinate."""
        return self.axis.y + self.relative.y

    @property
    def rel_x(self) -> int:
        return self.relative.x

    @property
    def rel_y(self) -> int:
        return self.relative.y

    def rotate(self, direction: int) -> None:
        """Rotate the relative offset a quarter turn about the axis."""
        swapped = self.relative.swapped()
        if direction == Rotation.CW:
            swapped = Position(swapped.x, -swapped.y)
        elif direction == Rotation.CCW:
            swapped = Position(-swapped.x, swapped.y)
        self.relative = swapped

    def __iadd__(self, offset: Position) -> Point:
        self.axis = self.axis + offset
        return self

    def __isub__(self, offset: Position) -> Point:
        self.axis = self.axis - offset
        return self

    def copy(self) -> Point:
        """Return an independent copy of this point."""
        return Point(self.axis, self.relative)