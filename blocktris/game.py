"""The game loop: piece supply, input handling, gravity and scoring."""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import TextIO

from .blocklist import BlockList
from .board import Board
from .constants import NUM_TETROMINO, MinoKind, Rotation
from .terminal import SCORE_FILE, InputReader, log_score
from .tetromino import Tetromino, make_mino

__all__ = ["Game", "UNIT_TICK", "INPUT_TICK", "GRAVITY_INTERVAL"]

UNIT_TICK = 50_000_000
INPUT_TICK = 100_000
GRAVITY_INTERVAL = 0.5
"""Seconds between gravity ticks at the base speed."""

_LINE_SCORES = {1: 100, 2: 300, 3: 500}
_TETRIS_SCORE = 1000


class Game:
    """Runs one game on a board until a piece locks above the top."""

    def __init__(
        self,
        block_list: BlockList,
        board: Board,
        reader: InputReader,
        rng: random.Random | None = None,
        out: TextIO | None = None,
        score_path: str | Path = SCORE_FILE,
        gravity_interval: float = GRAVITY_INTERVAL,
    ) -> None:
        self.block_list = block_list
        self.board = board
        self.reader = reader
        self.rng = rng if rng is not None else random.Random()
        self.out = out
        self.score_path = score_path
        self.gravity_interval = gravity_interval
        self.score = 0
        self.combo = 0
        self._used = [False] * NUM_TETROMINO
        self.current: Tetromino | None = None
        self.upcoming = self._new_piece()
        self._advance()

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    @property
    def coefficient(self) -> float:
        """Speed multiplier: 10% faster for every full thousand points."""
        return 1.0 + (self.score // 1000) / 10

    def next_kind(self) -> MinoKind:
        """Draw a piece kind not yet used in the current bag of seven."""
        while True:
            if all(self._used):
                self._used = [False] * NUM_TETROMINO
            num = self.rng.randrange(NUM_TETROMINO)
            if not self._used[num]:
                break
        self._used[num] = True
        return MinoKind(num)

    def _new_piece(self) -> Tetromino:
        return make_mino(self.next_kind(), self.block_list, self.board)

    def _advance(self) -> None:
        self.current = self.upcoming
        self.upcoming = self._new_piece()

    def parse_input(self, key: str | None) -> bool:
        """Apply a key to the current piece; False if the key means nothing."""
        piece = self.current
        if key == "a":
            piece.move(-1, 0, False)
        elif key == "d":
            piece.move(1, 0, False)
        elif key == "s":
            piece.move(0, -1, False)
        elif key == "w":
            piece.rotate(Rotation.CW)
        elif key == "x":
            piece.rotate(Rotation.CCW)
        elif key == "m":
            self.board.toggle_shadow()
        elif key == " ":
            piece.hard_drop()
        else:
            return False
        return True

    def apply_lines(self, num_lines: int) -> None:
        """Score cleared lines and keep the combo count."""
        if num_lines <= 0:
            if self.combo > 0 and self.current.is_stopped():
                self.combo = 0
            return
        partial = _LINE_SCORES.get(num_lines, _TETRIS_SCORE)
        self.combo += 1
        if self.combo >= 2:
            partial += 100 * (self.combo - 1)
        self.score += partial

    def step(self) -> bool:
        """Run one gravity tick; return True when the game is over."""
        self.current.on_tick()
        self.apply_lines(self.block_list.remove_lines())
        self.board.render(self.current, self.upcoming, self.score, self.combo)
        if self.block_list.is_game_over():
            return True
        if self.current.is_stopped():
            self._advance()
        return False

    def run(self) -> int:
        """Play until game over and return the final score."""
        input_interval = self.gravity_interval * INPUT_TICK / UNIT_TICK
        next_tick = time.monotonic() + self.gravity_interval / self.coefficient
        while True:
            key = self.reader.poll()
            if key is not None and self.parse_input(key):
                if key == " ":
                    next_tick = time.monotonic()
                else:
                    self.board.render(self.current, self.upcoming, self.score, self.combo)

            now = time.monotonic()
            if now >= next_tick:
                if self.step():
                    return self.score
                next_tick = now + self.gravity_interval / self.coefficient
            else:
                time.sleep(min(input_interval, next_tick - now))

    def _ask(self, question: str, retry: str) -> bool:
        out = self._stream()
        while True:
            out.write(f"{question} [PRESS (y/n)]\n")
            out.flush()
            answer = self.reader.wait_char()
            out.write(f"{answer}\n")
            if answer == "y":
                return True
            if answer == "n":
                return False
            out.write(f"{retry}\n\n")

    def check_save_log(self) -> bool:
        """Ask whether to save the score; save it and return True on 'y'."""
        if self._ask("Do you want to save your score?", "Please input 'y' or 'n'"):
            log_score(self.score, self.score_path)
            return True
        return False

    def check_restart(self) -> bool:
        """Ask whether to play again."""
        return self._ask("Do you want to restart?", "Please press 'y' or 'n'")