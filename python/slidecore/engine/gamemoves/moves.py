"""Row/column slide moves.

A move targets any cell sharing the blank's row or column.  Every tile
between the target and the blank shifts one step toward the blank, and the
blank ends up on the target cell.  An adjacent target is the classic
single-tile slide.
"""

from __future__ import annotations

from slidecore.models.board import Board, Direction

# Offset from the blank to the tile that moves in each direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def is_legal(board: Board, row: int, col: int) -> bool:
    """True if a slide toward (row, col) is allowed."""
    if not (0 <= row < board.size and 0 <= col < board.size):
        return False
    br, bc = board.blank_pos
    if (row, col) == (br, bc):
        return False
    return row == br or col == bc


def legal_targets(board: Board) -> list[tuple[int, int]]:
    """Return every other cell in the blank's row and column."""
    br, bc = board.blank_pos
    row_cells = [(br, c) for c in range(board.size) if c != bc]
    col_cells = [(r, bc) for r in range(board.size) if r != br]
    return row_cells + col_cells


def slide(board: Board, target: tuple[int, int]) -> None:
    """Slide the segment between the blank and *target* in place.

    *target* must already be legal; use ``apply_move`` for untrusted input.
    """
    br, bc = board.blank_pos
    tr, tc = target
    dr = (tr > br) - (tr < br)
    dc = (tc > bc) - (tc < bc)
    tiles, ids = board.tiles, board.ids
    blank_id = ids[br][bc]

    r, c = br, bc
    while (r, c) != (tr, tc):
        nr, nc = r + dr, c + dc
        tiles[r][c] = tiles[nr][nc]
        ids[r][c] = ids[nr][nc]
        r, c = nr, nc

    tiles[tr][tc] = 0
    ids[tr][tc] = blank_id
    board.blank_pos = (tr, tc)


def apply_move(board: Board, row: int, col: int) -> Board | None:
    """Return the board after activating (row, col), or ``None`` if illegal.

    *board* itself is never modified.
    """
    if not is_legal(board, row, col):
        return None
    moved = board.copy()
    slide(moved, (row, col))
    return moved


def target_for(board: Board, direction: Direction) -> tuple[int, int] | None:
    """Return the cell whose tile would slide in *direction*, if any."""
    br, bc = board.blank_pos
    dr, dc = _OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if not (0 <= tr < board.size and 0 <= tc < board.size):
        return None
    return tr, tc
