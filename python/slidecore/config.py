"""Game configuration and boundary validation of user supplied settings."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import StrEnum

MIN_SIZE = 2
MAX_SIZE = 10  # soft cap for the frontends, not an engine limit
DEFAULT_SIZE = 4
DEFAULT_MAX_RETRIES = 100


class ShuffleStrategy(StrEnum):
    PERMUTATION = "permutation"
    WALK = "walk"


@dataclass(frozen=True)
class GameConfig:
    """Settings supplied at game (re)start.

    ``walk_steps`` of ``None`` lets the generator pick a count from the
    board size.  ``seed`` makes every shuffle of the session reproducible.
    """

    size: int = DEFAULT_SIZE
    strategy: ShuffleStrategy = ShuffleStrategy.PERMUTATION
    walk_steps: int | None = None
    anti_reversal: bool = True
    max_retries: int = DEFAULT_MAX_RETRIES
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {self.size}.")
        if self.walk_steps is not None and self.walk_steps < 1:
            raise ValueError(f"walk_steps must be positive, got {self.walk_steps}.")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be positive, got {self.max_retries}.")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def parse_size(raw: str) -> int:
    """Validate a board size typed by the user.

    Raises ``ValueError`` for non-numeric input or anything below
    ``MIN_SIZE``.  Sizes above ``MAX_SIZE`` are clamped to it.
    """
    try:
        size = int(raw.strip())
    except ValueError:
        raise ValueError(f"Not a number: {raw!r}") from None
    if size < MIN_SIZE:
        raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
    return min(size, MAX_SIZE)
