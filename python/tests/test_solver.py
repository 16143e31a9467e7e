"""Solvability parity check.

The 2×2 puzzle is small enough to enumerate: a breadth-first search over
the slide move graph from the goal state gives the exact reachable set,
which must coincide with what the parity formula accepts.
"""

from __future__ import annotations

import itertools
import random
from collections import deque

import pytest

from slidecore.engine.gamegenerator import GameGenerator
from slidecore.engine.gamemoves import apply_move, legal_targets
from slidecore.engine.gamesolver import Solver
from slidecore.models.board import Board


# -- helpers ------------------------------------------------------------------


def _reachable(size: int) -> set[tuple[int, ...]]:
    start = GameGenerator.solved(size)
    seen = {tuple(start.flat())}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        for r, c in legal_targets(board):
            nxt = apply_move(board, r, c)
            assert nxt is not None
            key = tuple(nxt.flat())
            if key not in seen:
                seen.add(key)
                queue.append(nxt)
    return seen


def _swap_last_two(size: int) -> Board:
    flat = GameGenerator.solved(size).flat()
    flat[-3], flat[-2] = flat[-2], flat[-3]
    return Board.from_flat(size, flat)


# -- inversions ---------------------------------------------------------------


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 0], 0),
        ([0, 3, 2, 1], 3),
        ([2, 1, 0, 3], 1),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], 1),
    ],
)
def test_count_inversions_ignores_blank(values: list[int], expected: int) -> None:
    assert Solver.count_inversions(values) == expected


# -- parity -------------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_goal_is_solvable(size: int) -> None:
    assert Solver.is_solvable(GameGenerator.solved(size))


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_swapped_pair_is_unsolvable(size: int) -> None:
    assert not Solver.is_solvable(_swap_last_two(size))


def test_four_by_four_blank_first_is_unsolvable() -> None:
    assert not Solver.is_solvable(Board.from_flat(4, list(range(16))))


def test_parity_matches_exhaustive_two_by_two() -> None:
    reachable = _reachable(2)
    assert len(reachable) == 12
    for perm in itertools.permutations(range(4)):
        board = Board.from_flat(2, list(perm))
        assert Solver.is_solvable(board) == (perm in reachable), perm


@pytest.mark.parametrize("size", [3, 4, 5])
def test_walked_boards_pass_parity(size: int) -> None:
    for seed in range(20):
        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, 50, rng=random.Random(seed))
        assert Solver.is_solvable(board)
