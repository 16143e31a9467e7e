"""Board generation: both shuffle strategies and the retry-cap fallback."""

from __future__ import annotations

import logging
import random

import pytest

from slidecore.config import ShuffleStrategy
from slidecore.engine.gamegenerator import GameGenerator
from slidecore.engine.gamesolver import Solver


class _FrozenShuffle(random.Random):
    """RNG whose shuffle never reorders anything."""

    def shuffle(self, x) -> None:  # type: ignore[override]
        return None


# -- solved board -------------------------------------------------------------


def test_solved_layout() -> None:
    board = GameGenerator.solved(3)
    assert board.tiles == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert board.blank_pos == (2, 2)
    assert board.is_solved()


def test_solved_rejects_tiny_size() -> None:
    with pytest.raises(ValueError):
        GameGenerator.solved(1)


# -- strategies ---------------------------------------------------------------


@pytest.mark.parametrize("strategy", list(ShuffleStrategy))
@pytest.mark.parametrize("size", [2, 3, 4, 5, 8])
def test_generated_boards_are_solvable_and_shuffled(
    strategy: ShuffleStrategy, size: int
) -> None:
    rng = random.Random(1234 + size)
    for _ in range(5):
        board = GameGenerator.generate(size, strategy, rng=rng, walk_steps=200)
        board.validate()
        assert Solver.is_solvable(board)
        assert not board.is_solved()


def test_seed_makes_generation_reproducible() -> None:
    a = GameGenerator.generate(4, rng=random.Random(7))
    b = GameGenerator.generate(4, rng=random.Random(7))
    assert a.flat() == b.flat()


def test_walk_without_anti_reversal_still_solvable() -> None:
    board = GameGenerator.generate(
        4, ShuffleStrategy.WALK, rng=random.Random(3), anti_reversal=False
    )
    assert Solver.is_solvable(board)


def test_walk_that_returns_home_takes_an_extra_step() -> None:
    # On 2×2 the anti-reversal walk is a forced 12-step cycle.
    board = GameGenerator.solved(2)
    GameGenerator.scramble(board, 12, anti_reversal=True, rng=random.Random(0))
    assert not board.is_solved()
    assert Solver.is_solvable(board)


def test_default_walk_length_scales_with_area() -> None:
    assert GameGenerator.default_walk_steps(4) == 1600


# -- retry cap ----------------------------------------------------------------


def test_permutation_gives_up_after_max_retries() -> None:
    # Identity order on 4×4 puts the blank first, which is unsolvable.
    assert GameGenerator.shuffle_permutation(4, rng=_FrozenShuffle(), max_retries=5) is None


def test_permutation_falls_back_to_walk(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        board = GameGenerator.generate(
            4,
            ShuffleStrategy.PERMUTATION,
            rng=_FrozenShuffle(0),
            max_retries=3,
            walk_steps=100,
        )
    assert Solver.is_solvable(board)
    assert not board.is_solved()
    assert "falling back to walk" in caplog.text
