"""Rendering of the playing field, the next-piece preview and the score panel."""

from __future__ import annotations

import sys
from typing import TextIO

from .block import SHADOW_TEXT, Block
from .blocklist import BlockList
from .constants import COL, ROW, convert_y
from .position import Position
from .terminal import clear
from .tetromino import Tetromino

__all__ = ["Board", "SEP", "BLANK", "INFO_COL", "INFO_ROW"]

SEP = "■"
BLANK = " "
INFO_COL = 9
INFO_ROW = 15

_PREVIEW_AXIS = Position(INFO_COL // 2, 2)


class Board:
    """Lays blocks out on a grid and draws the game screen."""

    def __init__(self, block_list: BlockList, out: TextIO | None = None) -> None:
        self.block_list = block_list
        self.out = out
        self.shadow_on = True
        self._shadow: Tetromino | None = None
        self.game_board: list[list[Block | None]] = self._empty_game_board()
        self.info_board: list[list[str]] = self._empty_info_board()

    @staticmethod
    def _empty_game_board() -> list[list[Block | None]]:
        return [[None] * COL for _ in range(ROW)]

    @staticmethod
    def _empty_info_board() -> list[list[str]]:
        return [[BLANK] * INFO_COL for _ in range(INFO_ROW)]

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def set_game_board(self) -> None:
        """Rebuild the grid from the block list; solid blocks win over shadows."""
        self.game_board = self._empty_game_board()
        for block in self.block_list:
            row = convert_y(block.y)
            if 0 <= row < ROW and 0 <= block.x < COL:
                current = self.game_board[row][block.x]
                if current is None or current.shadow:
                    self.game_board[row][block.x] = block

    def _set_info_board(self, upcoming: Tetromino, score: int, combo: int) -> None:
        texts = [" Score", f" {score}", " Combo", f" {combo}"]
        self.info_board = self._empty_info_board()

        for block in upcoming.blocks:
            row = _PREVIEW_AXIS.y - block.rel_y
            col = _PREVIEW_AXIS.x + block.rel_x
            self.info_board[row][col] = block.to_string()

        for divider in (INFO_ROW // 3, INFO_ROW // 3 * 2):
            self.info_board[divider] = [SEP] * INFO_COL

        for index, text in enumerate(texts):
            section = 1 if index < 2 else 2
            row = self.info_board[INFO_ROW // 3 * section + 2 + index % 2]
            for col, char in enumerate(text[:INFO_COL]):
                row[col] = char

    def _make_shadow(self, current: Tetromino) -> None:
        if not self.shadow_on:
            return
        shadow = Tetromino(self.block_list, self)
        shadow.copy_from(current)
        shadow.set_shadow(True)
        shadow.set_text(SHADOW_TEXT)
        shadow.hard_drop()
        self._shadow = shadow

    def _delete_shadow(self) -> None:
        if self._shadow is None:
            return
        self._shadow = None
        self.block_list.remove_shadow()

    def render(self, current: Tetromino, upcoming: Tetromino, score: int, combo: int) -> None:
        """Draw the field, the next piece, the score and the combo."""
        live = not current.is_stopped()
        if live:
            self._make_shadow(current)

        self._set_info_board(upcoming, score, combo)
        self.set_game_board()

        out = self._stream()
        clear(out)

        parts = [SEP * (COL + INFO_COL + 3), "\n"]
        for row_index, row in enumerate(self.game_board):
            parts.append(SEP)
            parts.extend(BLANK if block is None else block.to_string() for block in row)
            parts.append(SEP)
            if row_index < INFO_ROW:
                parts.extend(self.info_board[row_index])
                parts.append(SEP)
            elif row_index == INFO_ROW:
                parts.append(SEP * (INFO_COL + 1))
            parts.append("\n")
        parts.append(SEP * (COL + 2) + "\n")
        out.write("".join(parts))

        if live:
            self._delete_shadow()

    def block_at(self, x: int, y: int) -> Block | None:
        """Return the block at game coordinates (x, y), or None if empty or off-board."""
        if 0 <= x < COL and 0 <= y < ROW:
            return self.game_board[ROW - y - 1][x]
        return None

    def toggle_shadow(self) -> None:
        """Switch the landing shadow on or off."""
        self.shadow_on = not self.shadow_on