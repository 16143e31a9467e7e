"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slidecore.config import DEFAULT_MAX_RETRIES, ShuffleStrategy
from slidecore.engine.gamemoves import legal_targets, slide
from slidecore.engine.gamesolver import Solver
from slidecore.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles, either by walking or by filtered shuffling."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        tiles: list[list[int]] = []
        num = 1
        for r in range(size):
            row: list[int] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(0)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return Board(size=size, tiles=tiles, blank_pos=(size - 1, size - 1))

    @staticmethod
    def default_walk_steps(size: int) -> int:
        return size * size * 100

    @staticmethod
    def scramble(
        board: Board,
        steps: int | None = None,
        *,
        anti_reversal: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble *board* in-place using random valid slides.

        With *anti_reversal* the slide that would undo the previous one is
        skipped whenever another target exists.  The result is never the
        solved board.
        """
        rng = rng or random.Random()
        if steps is None:
            steps = GameGenerator.default_walk_steps(board.size)
        prev_pos: tuple[int, int] | None = None

        for _ in range(steps):
            targets = legal_targets(board)
            if anti_reversal and prev_pos in targets and len(targets) > 1:
                targets.remove(prev_pos)
            target = rng.choice(targets)
            prev_pos = board.blank_pos
            slide(board, target)

        # One extra step leaves the goal state.
        if board.is_solved():
            slide(board, rng.choice(legal_targets(board)))

    @staticmethod
    def shuffle_permutation(
        size: int,
        *,
        rng: random.Random | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> Board | None:
        """Draw uniform permutations until one is solvable and unsolved.

        Returns ``None`` once *max_retries* draws have been rejected.
        """
        rng = rng or random.Random()
        values = list(range(size * size))
        for attempt in range(1, max_retries + 1):
            rng.shuffle(values)
            board = Board.from_flat(size, values)
            if Solver.is_solvable(board) and not board.is_solved():
                logger.debug("Accepted permutation for %d×%d after %d draw(s)", size, size, attempt)
                return board
        return None

    @staticmethod
    def generate(
        size: int,
        strategy: ShuffleStrategy = ShuffleStrategy.PERMUTATION,
        *,
        rng: random.Random | None = None,
        walk_steps: int | None = None,
        anti_reversal: bool = True,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        rng = rng or random.Random()
        logger.debug("Generating %d×%d board with %s strategy", size, size, strategy)

        if strategy == ShuffleStrategy.PERMUTATION:
            board = GameGenerator.shuffle_permutation(size, rng=rng, max_retries=max_retries)
            if board is not None:
                return board
            logger.warning(
                "No solvable permutation after %d draws for %d×%d; falling back to walk",
                max_retries,
                size,
                size,
            )

        board = GameGenerator.solved(size)
        GameGenerator.scramble(board, walk_steps, anti_reversal=anti_reversal, rng=rng)
        return board
