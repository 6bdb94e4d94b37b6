"""Tetromino pieces: four blocks that move, rotate with wall kicks and lock."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .block import Block
from .blocklist import BlockList
from .constants import COL, ROW, Color, MinoKind
from .position import Position

__all__ = [
    "Tetromino",
    "MinoI",
    "MinoO",
    "MinoT",
    "MinoL",
    "MinoJ",
    "MinoS",
    "MinoZ",
    "make_mino",
]


class BoardView(Protocol):
    """What a tetromino needs from the board it lives on."""

    def set_game_board(self) -> None: ...

    def block_at(self, x: int, y: int) -> Block | None: ...


def _kicks(rows: Sequence[Sequence[tuple[int, int]]]) -> tuple[tuple[Position, ...], ...]:
    return tuple(tuple(Position(x, y) for x, y in row) for row in rows)


# Rotation states are numbered 0: L, 1: 0, 2: R, 3: 2; the row for a turn is
# state * 2 + (direction + 1) // 2.
DEFAULT_KICKS = _kicks(
    [
        [(0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)],  # L -> 2
        [(0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)],  # L -> 0
        [(0, 0), (1, 0), (1, 1), (0, -2), (1, -2)],  # 0 -> L
        [(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)],  # 0 -> R
        [(0, 0), (1, 0), (1, -1), (0, 2), (1, 2)],  # R -> 0
        [(0, 0), (1, 0), (1, -1), (0, 2), (1, 2)],  # R -> 2
        [(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)],  # 2 -> R
        [(0, 0), (1, 0), (1, 1), (0, -2), (1, -2)],  # 2 -> L
    ]
)

I_KICKS = _kicks(
    [
        [(1, 0), (-1, 0), (2, 0), (-1, -1), (2, 2)],
        [(0, 1), (1, 1), (-2, 1), (1, -1), (-2, 2)],
        [(0, -1), (-1, -1), (2, -1), (-1, 1), (2, -2)],
        [(1, 0), (-1, 0), (2, 0), (-1, -1), (2, 2)],
        [(-1, 0), (1, 0), (-2, 0), (1, 1), (-2, -2)],
        [(0, -1), (-1, -1), (2, -1), (-1, 1), (2, -2)],
        [(0, 1), (1, 1), (-2, 1), (1, -1), (-2, 2)],
        [(-1, 0), (1, 0), (-2, 0), (1, 1), (-2, -2)],
    ]
)


class Tetromino:
    """A piece of four blocks held in a shared block list."""

    color: int = Color.WHITE
    positions: tuple[tuple[int, int], ...] = ((1, 1), (-1, 0), (0, 0), (1, 0))
    kicks: tuple[tuple[Position, ...], ...] = DEFAULT_KICKS
    spawn_offset: int = 0

    def __init__(
        self,
        block_list: BlockList,
        board: BoardView,
        x: int | None = None,
        y: int | None = None,
        *,
        blocks: Sequence[Block] | None = None,
    ) -> None:
        if blocks is None:
            self.blocks = [block_list.add() for _ in range(4)]
        else:
            if len(blocks) != 4:
                raise ValueError("a tetromino is made of exactly four blocks")
            self.blocks = [block_list.append(block) for block in blocks]
        self.board = board
        self.rotation_state = 1
        if x is not None and y is not None:
            self._place(x, y)

    def __repr__(self) -> str:
        cells = [(block.x, block.y) for block in self.blocks]
        return f"{type(self).__name__}({cells})"

    def _place(self, x: int, y: int) -> None:
        axis = Position(x, y)
        for block, (rx, ry) in zip(self.blocks, self.positions):
            block.axis = axis
            block.relative = Position(rx, ry)
            block.color = self.color

    def _is_hit(self, dx: int, dy: int, check_ceiling: bool) -> bool:
        for block in self.blocks:
            x = block.x + dx
            y = block.y + dy
            inside = 0 <= x < COL and 0 <= y
            target = self.board.block_at(x, y)
            if not inside or (target is not None and target.stopped):
                return not (check_ceiling and y >= ROW)
        return False

    def _should_stop(self) -> bool:
        self.board.set_game_board()
        for block in self.blocks:
            if block.y == 0:
                return True
            below = self.board.block_at(block.x, block.y - 1)
            if below is not None and below.stopped:
                return True
        return False

    def _stop(self) -> None:
        for block in self.blocks:
            block.stopped = True

    def block_at(self, index: int) -> Block:
        """Return the piece's block number ``index`` (0 to 3)."""
        return self.blocks[index]

    def set_text(self, text: str) -> None:
        """Set the text every block is drawn with."""
        for block in self.blocks:
            block.text = text

    def set_shadow(self, shadow: bool) -> None:
        """Mark every block as a shadow block or not."""
        for block in self.blocks:
            block.shadow = shadow

    def copy_from(self, other: Tetromino) -> None:
        """Copy the blocks' state and the board from another piece."""
        if other is self:
            return
        for mine, theirs in zip(self.blocks, other.blocks):
            mine.assign(theirs)
        self.board = other.board

    def rotate(self, direction: int) -> None:
        """Turn the piece, trying each wall kick; undo the turn if none fits."""
        row = self.rotation_state * 2 + (direction + 1) // 2
        for block in self.blocks:
            block.rotate(direction)

        for offset in self.kicks[row]:
            for block in self.blocks:
                block += offset
            if self._is_hit(0, 0, True):
                for block in self.blocks:
                    block -= offset
                continue
            state = self.rotation_state + direction
            if state < 0:
                state = 3
            elif state > 3:
                state = 0
            self.rotation_state = state
            return

        for block in self.blocks:
            block.rotate(-direction)

    def move(self, dx: int, dy: int, check_ceiling: bool = False) -> None:
        """Shift the piece by (dx, dy) unless that position is blocked."""
        if self._is_hit(dx, dy, check_ceiling):
            return
        step = Position(dx, dy)
        for block in self.blocks:
            if not block.stopped:
                block += step

    def is_stopped(self) -> bool:
        """True once any block of the piece has locked."""
        return any(block.stopped for block in self.blocks)

    def on_tick(self) -> None:
        """Lock the piece if it is resting, then let it fall one row."""
        if self._should_stop():
            self._stop()
        self.move(0, -1, False)

    def hard_drop(self) -> None:
        """Drop the piece straight down to where it lands."""
        for dy in range(0, -ROW - 1, -1):
            if self._is_hit(0, dy - 1, True):
                self.move(0, dy, True)
                break


class MinoI(Tetromino):
    color = Color.CYAN
    positions = ((-1, 0), (0, 0), (1, 0), (2, 0))
    kicks = I_KICKS


class MinoO(Tetromino):
    color = Color.YELLOW
    positions = ((0, 0), (1, 0), (0, -1), (1, -1))
    spawn_offset = 1

    def rotate(self, direction: int) -> None:
        """The O piece looks the same every way round, so it never turns."""


class MinoT(Tetromino):
    color = Color.MAGENTA
    positions = ((0, 1), (-1, 0), (0, 0), (1, 0))


class MinoL(Tetromino):
    color = Color.WHITE
    positions = ((1, 1), (-1, 0), (0, 0), (1, 0))


class MinoJ(Tetromino):
    color = Color.BLUE
    positions = ((-1, 1), (-1, 0), (0, 0), (1, 0))


class MinoS(Tetromino):
    color = Color.GREEN
    positions = ((0, 1), (1, 1), (-1, 0), (0, 0))


class MinoZ(Tetromino):
    color = Color.RED
    positions = ((-1, 1), (0, 1), (0, 0), (1, 0))


_KINDS: dict[MinoKind, type[Tetromino]] = {
    MinoKind.I: MinoI,
    MinoKind.O: MinoO,
    MinoKind.T: MinoT,
    MinoKind.L: MinoL,
    MinoKind.J: MinoJ,
    MinoKind.S: MinoS,
    MinoKind.Z: MinoZ,
}


def make_mino(kind: int, block_list: BlockList, board: BoardView) -> Tetromino:
    """Create a piece of the given kind at the spawn point above the board."""
    cls = _KINDS[MinoKind(kind)]
    return cls(block_list, board, COL // 2, ROW + cls.spawn_offset)