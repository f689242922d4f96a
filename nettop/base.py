"""NetTop — the tick loop tying sampling, ranking, drawing and key input together.

Handles: terminal session entry/exit, elapsed-time measurement with a
clock-resolution guard, refresh-then-diff sampling, full redraw each tick,
and deadline-based key polling so ticks keep the configured cadence.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

from rich.console import Console

from nettop.config import Config, apply_key
from nettop.display import LiveMeta, Surface, draw
from nettop.net import CounterSource, collect, rank
from nettop.terminal import KeyPoller, terminal_session

logger = logging.getLogger(__name__)

POLL_TIMEOUT_S = 0.1   # upper bound on a single key wait
CLOCK_GUARD_S = 0.01   # back-off when the clock has not moved
QUIT_KEY = "q"


class Poller(Protocol):
    def poll(self, timeout: float) -> str: ...


class NetTop:
    """Live interface table.

    Lifecycle:
        1. run() enters the terminal session and seeds the counter source
        2. tick() is called until it returns False
        3. leaving the session restores the terminal, even on error
    """

    def __init__(self, console: Console | None = None,
                 source: CounterSource | None = None,
                 config: Config | None = None,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.console = console or Console()
        self.source = source
        self.config = config or Config()
        self._clock = clock
        self._sleep = sleep
        self.last_tick = clock()

    # ---- main loop ----

    def run(self) -> None:
        """Blocking main loop. Returns once `q` is pressed."""
        with terminal_session(self.console) as screen:
            if self.source is None:
                self.source = CounterSource()
            poller = KeyPoller()
            self.last_tick = self._clock()
            while self.tick(screen, poller):
                pass
        logger.debug("shut down cleanly")

    def tick(self, surface: Surface, poller: Poller) -> bool:
        """Run one sample/rank/draw/poll cycle. False means quit."""
        now = self._clock()
        elapsed = now - self.last_tick
        if elapsed <= 0:
            self._sleep(CLOCK_GUARD_S)
            return True

        previous = self.source.refresh()
        samples = self.source.delta_since(previous)
        rows = rank(collect(elapsed, samples, self.config.show_virtual))

        draw(surface, rows, LiveMeta(config=self.config, interface_count=len(rows)))
        self.last_tick = now

        return not self._wait_for_keys(poller, now + self.config.interval_s)

    def _wait_for_keys(self, poller: Poller, deadline: float) -> bool:
        """Poll until *deadline*; True if quit was pressed.

        A config change ends the wait early so the next tick shows it.
        """
        while True:
            keys = poller.poll(min(POLL_TIMEOUT_S, deadline - self._clock()))
            changed = False
            for key in keys:
                if key == QUIT_KEY:
                    logger.debug("quit requested")
                    return True
                updated = apply_key(self.config, key)
                if updated != self.config:
                    logger.debug("config now %s", updated)
                    self.config = updated
                    changed = True
            if changed or self._clock() >= deadline:
                return False
