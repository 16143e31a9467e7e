"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from slidecore.models.board import Board


class GameState:
    """Holds the current board, move counter, and elapsed seconds.

    The clock starts running as soon as the state is created and only
    advances through ``tick()``.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.elapsed_seconds: int = 0
        self.active: bool = True
        self.solved: bool = False

    # -- time tracking --------------------------------------------------------

    def tick(self) -> bool:
        """Advance the clock by one second.  Returns False when stopped."""
        if not self.active:
            return False
        self.elapsed_seconds += 1
        return True

    def stop(self) -> None:
        self.active = False

    def mark_solved(self) -> None:
        self.solved = True
        self.active = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1


class Ticker:
    """Turns a monotonic clock into a count of whole elapsed intervals.

    Frontends without a periodic timer of their own poll ``due()`` between
    input events and tick the game once per interval returned.
    """

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self._clock = clock
        self._last = clock()

    def due(self) -> int:
        now = self._clock()
        count = int((now - self._last) // self.interval)
        if count:
            # Keep the remainder so ticks do not drift.
            self._last += count * self.interval
        return count

    def reset(self) -> None:
        self._last = self._clock()
