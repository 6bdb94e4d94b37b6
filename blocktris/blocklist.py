"""Fixed-capacity storage for every block in play, with line clearing."""

from __future__ import annotations

from collections.abc import Iterator

from .block import Block
from .constants import COL, MAX_BLOCK, ROW, Color
from .position import Position

__all__ = ["BlockList", "BlockListFullError"]


class BlockListFullError(RuntimeError):
    """Raised when a block is added to a list with no free slot."""


class BlockList:
    """Slot-based collection of blocks; freed slots are reused in order."""

    def __init__(self, capacity: int = MAX_BLOCK) -> None:
        self.capacity = capacity
        self._slots: list[Block | None] = [None] * capacity

    def _place(self, block: Block) -> Block:
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = block
                return block
        raise BlockListFullError(f"block list is full ({self.capacity} blocks)")

    def add(
        self,
        axis_x: int = 0,
        axis_y: int = 0,
        rel_x: int = 0,
        rel_y: int = 0,
        color: int = Color.RESET,
    ) -> Block:
        """Create a block in the first free slot and return it."""
        return self._place(Block(axis_x, axis_y, rel_x, rel_y, color))

    def append(self, block: Block) -> Block:
        """Store an existing block in the first free slot and return it."""
        return self._place(block)

    def at(self, index: int) -> Block | None:
        """Return the block in slot ``index``, or None if the slot is empty."""
        return self._slots[index]

    def remove_shadow(self) -> None:
        """Drop every shadow block."""
        self._slots = [
            None if block is not None and block.shadow else block
            for block in self._slots
        ]

    def _row_map(self) -> list[dict[int, int]]:
        """For each board row, map column to slot index of a solid block there."""
        rows: list[dict[int, int]] = [{} for _ in range(ROW)]
        counts = [0] * ROW
        for index, block in enumerate(self._slots):
            if block is None or block.shadow:
                continue
            x, y = block.x, block.y
            if 0 <= y < ROW and 0 <= x < COL:
                rows[y][x] = index
                counts[y] += 1
        self._row_counts = counts
        return rows

    def remove_lines(self) -> int:
        """Clear every full row, drop stopped blocks above it, return rows cleared."""
        removed = 0
        row = 0
        while row < ROW:
            rows = self._row_map()
            if self._row_counts[row] != COL:
                row += 1
                continue
            for index in rows[row].values():
                self._slots[index] = None
            down = Position(0, -1)
            for block in self._slots:
                if (
                    block is not None
                    and block.y > row
                    and not block.shadow
                    and block.stopped
                ):
                    block += down
            removed += 1
        return removed

    def is_game_over(self) -> bool:
        """True when a stopped block rests above the top of the board."""
        return any(block.stopped and block.y >= ROW for block in self)

    def __iter__(self) -> Iterator[Block]:
        return (block for block in self._slots if block is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)