"""Board model: construction, invariants and the win check."""

from __future__ import annotations

import pytest

from slidecore.models.board import Board


# -- construction -------------------------------------------------------------


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.blank_pos == (2, 1)
    assert board.tiles == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


@pytest.mark.parametrize(
    "size, flat",
    [
        (3, [1, 2, 3, 4, 5, 6, 7, 8]),  # too short
        (2, [1, 2, 3, 3]),  # duplicate, no blank
        (2, [1, 2, 3, 4]),  # value out of range
        (1, [0]),  # below minimum size
    ],
    ids=["short", "duplicate", "out-of-range", "too-small"],
)
def test_from_flat_rejects_malformed(size: int, flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(size, flat)


@pytest.mark.parametrize(
    "tiles, blank_pos",
    [
        ([[1, 2], [3, 5]], (0, 0)),  # value out of range
        ([[1, 2], [3, 0]], (0, 0)),  # blank elsewhere
        ([[1, 2, 3], [0]], (1, 0)),  # ragged grid
    ],
    ids=["out-of-range", "wrong-blank", "ragged"],
)
def test_constructor_rejects_malformed(tiles: list[list[int]], blank_pos: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        Board(size=2, tiles=tiles, blank_pos=blank_pos)


def test_constructor_fills_ids() -> None:
    board = Board(size=2, tiles=[[1, 2], [3, 0]], blank_pos=(1, 1))
    assert len({i for row in board.ids for i in row}) == 4


def test_validate_catches_stale_blank() -> None:
    board = Board.from_flat(2, [1, 2, 3, 0])
    board.blank_pos = (0, 0)
    with pytest.raises(ValueError, match="Blank position"):
        board.validate()


# -- win check ----------------------------------------------------------------


def test_two_by_two_solved() -> None:
    assert Board.from_flat(2, [1, 2, 3, 0]).is_solved()


def test_two_by_two_not_solved() -> None:
    assert not Board.from_flat(2, [1, 2, 0, 3]).is_solved()


def test_blank_elsewhere_is_never_solved() -> None:
    assert not Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8]).is_solved()


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 2)
    assert not board.is_tile_correct(2, 1)


# -- tile identity ------------------------------------------------------------


def test_ids_are_unique_and_independent_of_values() -> None:
    a = Board.from_flat(2, [1, 2, 3, 0])
    b = Board.from_flat(2, [1, 2, 3, 0])
    ids_a = {i for row in a.ids for i in row}
    ids_b = {i for row in b.ids for i in row}
    assert len(ids_a) == 4
    assert ids_a.isdisjoint(ids_b)
    assert a == b  # equality ignores identities


def test_tile_positions_cover_every_tile() -> None:
    board = Board.from_flat(3, [4, 1, 2, 0, 5, 3, 7, 8, 6])
    positions = board.tile_positions()
    values = board.tile_values()
    assert len(positions) == 8
    for tile_id, (r, c) in positions.items():
        assert board.tiles[r][c] == values[tile_id]
    assert sorted(values.values()) == list(range(1, 9))


def test_copy_is_deep() -> None:
    board = Board.from_flat(2, [1, 2, 3, 0])
    clone = board.copy()
    clone.tiles[0][0] = 99
    clone.ids[0][0] = -1
    assert board.tiles[0][0] == 1
    assert board.ids[0][0] != -1
