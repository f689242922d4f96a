"""Terminal lifecycle and non-blocking key polling (POSIX)."""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from rich.console import Console, ScreenContext

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """The controlling terminal cannot be put into interactive mode."""


@contextmanager
def terminal_session(console: Console, stdin: TextIO | None = None) -> Iterator[ScreenContext]:
    """Cbreak keyboard + alternate screen, restored on every exit path.

    Yields the rich screen context to draw on.
    """
    stdin = stdin or sys.stdin
    if not stdin.isatty():
        raise TerminalError("stdin is not a terminal")

    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)  # keys arrive immediately, no echo
        with console.screen(hide_cursor=True) as screen:
            logger.debug("entered alternate screen")
            yield screen
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        console.show_cursor(True)
        logger.debug("terminal restored")


class KeyPoller:
    """Bounded wait for pending keystrokes on a cbreak-mode stdin."""

    def __init__(self, stdin: TextIO | None = None):
        self._fd = (stdin or sys.stdin).fileno()

    def poll(self, timeout: float) -> str:
        """Return the keys typed within *timeout* seconds, '' if none."""
        ready, _, _ = select.select([self._fd], [], [], max(0.0, timeout))
        if not ready:
            return ""
        # raw fd read so nothing is left behind in a Python-side buffer
        return os.read(self._fd, 32).decode(errors="ignore")
