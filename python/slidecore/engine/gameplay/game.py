"""Core gameplay logic: processes moves and checks the win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass

from slidecore.config import GameConfig
from slidecore.engine.gamegenerator import GameGenerator
from slidecore.engine.gamemoves import apply_move, target_for
from slidecore.engine.gamestate import GameState
from slidecore.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything a renderer needs to redraw after a move or reset."""

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int]
    positions: dict[int, tuple[int, int]]
    values: dict[int, int]
    correct: frozenset[tuple[int, int]]  # cells whose tile sits on its goal
    moves: int
    elapsed_seconds: int
    active: bool
    solved: bool


@dataclass(frozen=True)
class SolvedEvent:
    size: int
    moves: int
    elapsed_seconds: int


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    snapshot: BoardSnapshot
    solved_event: SolvedEvent | None = None


class GamePlay:
    """Orchestrates a single game session.

    The caller owns the session; frontends forward cell activations and
    clock ticks to it and redraw from the returned snapshots.
    """

    def __init__(
        self,
        size: int | None = None,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        on_solved: Callable[[SolvedEvent], None] | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.size = size if size is not None else self.config.size
        self._rng = rng or self.config.make_rng()
        self.on_solved = on_solved
        self.state = GameState(self._generate(self.size))
        logger.info("Started %d×%d game", self.size, self.size)

    @classmethod
    def from_board(
        cls,
        board: Board,
        config: GameConfig | None = None,
        *,
        on_solved: Callable[[SolvedEvent], None] | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        board.validate()
        obj = object.__new__(cls)
        obj.config = config or GameConfig(size=board.size)
        obj.size = board.size
        obj._rng = obj.config.make_rng()
        obj.on_solved = on_solved
        obj.state = GameState(board)
        return obj

    # -- lifecycle ------------------------------------------------------------

    def initialize(self, size: int | None = None) -> BoardSnapshot:
        """Start over with a freshly shuffled board and zeroed counters."""
        size = self.size if size is None else size
        board = self._generate(size)
        self.state.stop()
        self.size = size
        self.state = GameState(board)
        logger.info("Reset to a new %d×%d game", self.size, self.size)
        return self.snapshot()

    def stop(self) -> None:
        """Stop the clock and refuse further moves."""
        self.state.stop()

    def tick(self) -> bool:
        """Advance the game clock by one second while the game is running."""
        return self.state.tick()

    # -- movement -------------------------------------------------------------

    def activate(self, row: int, col: int) -> MoveResult:
        """Handle a click on (row, col).

        Cells sharing the blank's row or column slide toward it as one move;
        anything else is ignored.
        """
        if not self.state.active:
            return MoveResult(accepted=False, snapshot=self.snapshot())

        moved = apply_move(self.state.board, row, col)
        if moved is None:
            logger.debug("Rejected move to (%d, %d), blank at %s", row, col, self.state.board.blank_pos)
            return MoveResult(accepted=False, snapshot=self.snapshot())

        self.state.board = moved
        self.state.increment_moves()

        event: SolvedEvent | None = None
        if moved.is_solved():
            self.state.mark_solved()
            event = SolvedEvent(
                size=self.size,
                moves=self.state.moves,
                elapsed_seconds=self.state.elapsed_seconds,
            )
            logger.info(
                "Solved %d×%d in %d moves, %ds",
                self.size,
                self.size,
                event.moves,
                event.elapsed_seconds,
            )
            if self.on_solved is not None:
                self.on_solved(event)

        return MoveResult(accepted=True, snapshot=self.snapshot(), solved_event=event)

    def move(self, direction: Direction) -> MoveResult:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        target = target_for(self.state.board, direction)
        if target is None:
            return MoveResult(accepted=False, snapshot=self.snapshot())
        return self.activate(*target)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.solved

    def snapshot(self) -> BoardSnapshot:
        board = self.state.board
        return BoardSnapshot(
            size=board.size,
            tiles=tuple(tuple(row) for row in board.tiles),
            blank_pos=board.blank_pos,
            positions=board.tile_positions(),
            values=board.tile_values(),
            correct=frozenset(
                (r, c)
                for r in range(board.size)
                for c in range(board.size)
                if board.tiles[r][c] and board.is_tile_correct(r, c)
            ),
            moves=self.state.moves,
            elapsed_seconds=self.state.elapsed_seconds,
            active=self.state.active,
            solved=self.state.solved,
        )

    # -- helpers --------------------------------------------------------------

    def _generate(self, size: int) -> Board:
        cfg = self.config
        return GameGenerator.generate(
            size,
            cfg.strategy,
            rng=self._rng,
            walk_steps=cfg.walk_steps,
            anti_reversal=cfg.anti_reversal,
            max_retries=cfg.max_retries,
        )
