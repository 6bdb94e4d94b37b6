"""Terminal input, score logging and the game's text banners."""

from __future__ import annotations

import collections
import contextlib
import sys
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

try:
    import termios
    import tty
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None
    tty = None

__all__ = [
    "InputReader",
    "log_score",
    "clear",
    "show_title",
    "show_game_over",
    "show_loading",
    "raw_terminal",
    "SCORE_FILE",
]

SCORE_FILE = "score.txt"
CLEAR_LINES = 20

TITLE = (
    "::::::::::: :::::::::: ::::::::::: :::::::::  ::::::::::: ::::::::  \n"
    "    :+:     :+:            :+:     :+:    :+:     :+:    :+:    :+: \n"
    "    +:+     +:+            +:+     +:+    +:+     +:+    +:+        \n"
    "    +#+     +#++:++#       +#+     +#++:++#:      +#+    +#++:++#++ \n"
    "    +#+     +#+            +#+     +#+    +#+     +#+           +#+ \n"
    "    #+#     #+#            #+#     #+#    #+#     #+#    #+#    #+# \n"
    "    ###     ##########     ###     ###    ### ########### ########  \n"
)

GAME = (
    " ::::::::      :::     ::::    ::::  :::::::::: \n"
    ":+:    :+:   :+: :+:   +:+:+: :+:+:+ :+:        \n"
    "+:+         +:+   +:+  +:+ +:+:+ +:+ +:+        \n"
    ":#:        +#++:++#++: +#+  +:+  +#+ +#++:++#   \n"
    "+#+   +#+# +#+     +#+ +#+       +#+ +#+        \n"
    "#+#    #+# #+#     #+# #+#       #+# #+#        \n"
    " ########  ###     ### ###       ### ########## \n"
)

OVER = (
    " ::::::::  :::     ::: :::::::::: :::::::::  \n"
    ":+:    :+: :+:     :+: :+:        :+:    :+: \n"
    "+:+    +:+ +:+     +:+ +:+        +:+    +:+ \n"
    "+#+    +:+ +#+     +:+ +#++:++#   +#++:++#:  \n"
    "+#+    +#+  +#+   +#+  +#+        +#+    +#+ \n"
    "#+#    #+#   #+#+#+#   #+#        #+#    #+# \n"
    " ########      ###     ########## ###    ### \n"
)

LOADING = (
    ":::        ::::::::      :::     ::::::::: ::::::::::: ::::    :::  ::::::::              \n"
    ":+:       :+:    :+:   :+: :+:   :+:    :+:    :+:     :+:+:   :+: :+:    :+:             \n"
    "+:+       +:+    +:+  +:+   +:+  +:+    +:+    +:+     :+:+:+  +:+ +:+                    \n"
    "+#+       +#+    +:+ +#++:++#++: +#+    +:+    +#+     +#+ +:+ +#+ :#:                    \n"
    "+#+       +#+    +#+ +#+     +#+ +#+    +#+    +#+     +#+  +#+#+# +#+   +#+#             \n"
    "#+#       #+#    #+# #+#     #+# #+#    #+#    #+#     #+#   #+#+# #+#    #+# #+# #+# #+# \n"
    "########## ########  ###     ### ######### ########### ###    ####  ########  ### ### ###\n"
)


class InputReader:
    """Reads single characters on a background thread into a FIFO queue."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._queue: collections.deque[str] = collections.deque()
        self._cond = threading.Condition()
        self._resumed = threading.Event()
        self._resumed.set()
        self._stopped = threading.Event()
        self._closed = False
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the reader thread."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the reader thread to finish; it is left to end on its own."""
        self._stopped.set()
        self._resumed.set()
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def pause(self) -> None:
        """Stop taking characters from the stream until resumed."""
        self._resumed.clear()

    def resume(self) -> None:
        """Take characters from the stream again."""
        self._resumed.set()

    def feed(self, char: str) -> None:
        """Queue a character as if it had been typed."""
        with self._cond:
            self._queue.append(char)
            self._cond.notify_all()

    def poll(self) -> str | None:
        """Return the oldest queued character, or None if there is none."""
        with self._cond:
            return self._queue.popleft() if self._queue else None

    def wait_char(self) -> str:
        """Block until a character is queued and return it.

        Raises EOFError once the input has ended and nothing is left.
        """
        with self._cond:
            while not self._queue:
                if self._closed:
                    raise EOFError("input stream has ended")
                self._cond.wait()
            return self._queue.popleft()

    def _run(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            while not self._stopped.is_set():
                self._resumed.wait()
                if self._stopped.is_set():
                    break
                char = stream.read(1)
                if not char:
                    break
                self.feed(char)
        finally:
            with self._cond:
                self._closed = True
                self._cond.notify_all()


def log_score(score: int, path: str | Path = SCORE_FILE) -> None:
    """Prepend ``score`` as a new line to the score file, creating it if needed."""
    target = Path(path)
    try:
        target.touch(exist_ok=True)
        previous = target.read_text()
        target.write_text(f"{score}\n{previous}")
    except OSError:
        return


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def clear(out: TextIO | None = None) -> None:
    """Scroll the screen clear by printing blank lines."""
    _stream(out).write("\n" * CLEAR_LINES)


def show_title(out: TextIO | None = None) -> None:
    """Print the title banner."""
    _stream(out).write("\n" + TITLE + "\n")


def show_game_over(out: TextIO | None = None) -> None:
    """Print the game-over banner."""
    _stream(out).write("\n" + GAME + "\n" + OVER + "\n")


def show_loading(out: TextIO | None = None) -> None:
    """Print the loading banner."""
    _stream(out).write("\n" + LOADING + "\n")


@contextlib.contextmanager
def raw_terminal() -> Iterator[bool]:
    """Put standard input in unbuffered, no-echo mode for the block's duration.

    Yields True if the mode was changed, False when standard input is not a terminal.
    """
    stdin = sys.stdin
    if termios is None or not stdin.isatty():
        yield False
        return
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        attrs = termios.tcgetattr(fd)
        attrs[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)