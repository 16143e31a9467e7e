"""Solvability test for sliding puzzle boards."""

from __future__ import annotations

from collections.abc import Iterable

from slidecore.models.board import Board


class Solver:
    """Stateless parity checks; all methods are static."""

    @staticmethod
    def count_inversions(values: Iterable[int]) -> int:
        """Count out-of-order pairs among the non-blank *values* (row-major)."""
        tiles = [v for v in values if v != 0]
        inversions = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Odd sizes need an even inversion count.  Even sizes also depend on
        the blank's row counted 1-based from the bottom: the sum of that
        row and the inversions must be odd (the goal board has 0 + 1).
        """
        inversions = Solver.count_inversions(board.flat())
        if board.size % 2 == 1:
            return inversions % 2 == 0
        row_from_bottom = board.size - board.blank_pos[0]
        return (inversions + row_from_bottom) % 2 == 1
