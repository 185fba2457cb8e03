from __future__ import annotations

from typing import List, Tuple

from .board import DIRECTIONS, SPACE, WALL, Board, Direction

Candidate = Tuple[int, Direction]  # (piece symbol, direction it would move)


def successors(board: Board) -> List[Board]:
    """Return every canonical board reachable from *board* in one turn.

    A turn moves a single piece one or more cells. Each intermediate stop of a
    chained push is returned as its own successor.
    """
    out: List[Board] = []
    for symbol, direction in move_candidates(board):
        slide(board, symbol, direction, out)
    return out


def move_candidates(board: Board) -> List[Candidate]:
    """Pieces next to an empty cell, paired with the direction towards it.

    Scanning around the empty cells keeps the branching factor proportional
    to the number of empties rather than the board size.
    """
    cells, width = board.cells, board.width
    examined: List[Candidate] = []
    for row, col in board.empties():
        origin = row * width + col
        for direction in DIRECTIONS:
            # The wall ring keeps this inside the board
            value = cells[origin + direction.offset(width)]
            if value == WALL or value == SPACE:
                continue
            candidate = (value, direction.reverse)
            if candidate not in examined:
                examined.append(candidate)
    return examined


def slide(board: Board, symbol: int, direction: Direction, out: List[Board]) -> bool:
    """Move every cell of *symbol* one step in *direction*.

    Successful slides keep pushing the same piece in any direction but the one
    it came from, appending each result to *out*. Returns False, leaving *out*
    untouched, when the piece is blocked by a wall or another piece.
    """
    cells = board.cells
    step = direction.offset(board.width)
    if direction.scan_backward:
        indices = range(len(cells) - 1, -1, -1)
    else:
        indices = range(len(cells))

    work: bytearray | None = None
    for index in indices:
        if cells[index] != symbol:
            continue
        target = index + step
        value = cells[target]
        if value != SPACE and value != symbol:
            return False
        if work is None:
            work = bytearray(cells)
        work[target] = symbol
        work[index] = SPACE

    # Not canonical yet: relabelling could rename the piece being pushed
    moved = Board(board.height, board.width, bytes(work))
    for following in DIRECTIONS:
        if following is direction.reverse:
            continue
        slide(moved, symbol, following, out)

    out.append(moved.canonical())
    return True
