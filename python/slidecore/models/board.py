"""Board model for the sliding puzzle game."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import StrEnum

# Process-wide source of opaque tile ids; never reused across boards.
_TILE_IDS = itertools.count(1)


def _fresh_ids(size: int, tiles: list[list[int]]) -> list[list[int]]:
    by_value = {v: next(_TILE_IDS) for v in range(size * size)}
    return [[by_value[v] for v in row] for row in tiles]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    ``ids`` is a parallel grid of stable tile identities that travel with
    their tile on every slide; it is filled in when omitted.  Construction runs ``validate()``, so a
    malformed grid raises ``ValueError`` up front.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]
    ids: list[list[int]] = field(default_factory=list, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.validate()
        if not self.ids:
            self.ids = _fresh_ids(self.size, self.tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(size):
            row = list(flat[r * size : (r + 1) * size])
            for c, v in enumerate(row):
                if v == 0:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=blank_pos)

    # -- queries --------------------------------------------------------------

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def tile_positions(self) -> dict[int, tuple[int, int]]:
        """Map every non-blank tile id to its current ``(row, col)``."""
        return {
            self.ids[r][c]: (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] != 0
        }

    def tile_values(self) -> dict[int, int]:
        """Map every non-blank tile id to the number it displays."""
        return {
            self.ids[r][c]: self.tiles[r][c]
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] != 0
        }

    def validate(self) -> None:
        """Raise ``ValueError`` if the board breaks its invariants."""
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        if len(self.tiles) != self.size or any(len(row) != self.size for row in self.tiles):
            raise ValueError(f"Tile grid is not {self.size}×{self.size}.")
        if sorted(self.flat()) != list(range(self.size * self.size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{self.size * self.size - 1}."
            )
        br, bc = self.blank_pos
        if not (0 <= br < self.size and 0 <= bc < self.size) or self.tiles[br][bc] != 0:
            raise ValueError(f"Blank position {self.blank_pos} does not hold 0.")

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
            ids=[row[:] for row in self.ids],
        )
