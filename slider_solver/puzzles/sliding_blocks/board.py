from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np

# Cell encodings (raw ASCII bytes)
WALL = ord("#")
SPACE = ord(" ")
# Fungible pieces are stored as canonical tokens 1..MAX_FUNGIBLE, below SPACE
MAX_FUNGIBLE = SPACE - 1

Position = Tuple[int, int]  # (row, col)


class Direction(Enum):
    """Axis-aligned move direction as a (row, col) delta."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def reverse(self) -> "Direction":
        return _REVERSE[self]

    @property
    def scan_backward(self) -> bool:
        """True when cells must be visited in descending row-major order.

        Moving towards higher indices, the leading edge is the last cell in
        row-major order, so it has to be moved before the cells behind it.
        """
        return self.dr > 0 or self.dc > 0

    def offset(self, width: int) -> int:
        """Flat-index step for a board of the given width."""
        return self.dr * width + self.dc


_REVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
DIRECTIONS = tuple(Direction)


def is_unique(value: int) -> bool:
    return ord("A") <= value <= ord("Z")


def is_fungible(value: int) -> bool:
    return value != SPACE and value != WALL and not is_unique(value)


def is_piece(value: int) -> bool:
    return value != SPACE and value != WALL


def canonicalize(cells: bytes | bytearray) -> bytes:
    """Relabel fungible pieces to tokens 1, 2, 3, ... by first appearance.

    Uppercase (unique) pieces, walls and spaces are left untouched.
    """
    lookup: Dict[int, int] = {}
    for value in cells:
        if is_fungible(value) and value not in lookup:
            if len(lookup) == MAX_FUNGIBLE:
                raise ValueError(f"more than {MAX_FUNGIBLE} fungible pieces on one board")
            lookup[value] = len(lookup) + 1
    table = bytearray(range(256))
    for value, token in lookup.items():
        table[value] = token
    return bytes(cells).translate(table)


@dataclass(frozen=True)
class Board:
    """Immutable rectangular grid stored as row-major bytes.

    Equality and hashing cover the shape and the cells, so canonical boards
    can be used directly as search-graph nodes.
    """

    height: int
    width: int
    cells: bytes

    def __post_init__(self):
        assert len(self.cells) == self.height * self.width

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------
    def __getitem__(self, pos: Position) -> int:
        row, col = pos
        return self.cells[row * self.width + col]

    def position(self, index: int) -> Position:
        return divmod(index, self.width)

    def empties(self) -> Tuple[Position, Position]:
        """Return the two empty cells in row-major order.

        Boards are expected to hold exactly two empty cells; anything else
        gives a meaningless answer.
        """
        first = self.cells.find(SPACE)
        second = self.cells.find(SPACE, first + 1)
        return self.position(first), self.position(second)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def canonical(self) -> "Board":
        cells = canonicalize(self.cells)
        if cells == self.cells:
            return self
        return Board(self.height, self.width, cells)

    def as_array(self) -> np.ndarray:
        """Read-only (height, width) uint8 view of the cells."""
        return np.frombuffer(self.cells, dtype=np.uint8).reshape(self.height, self.width)

    def rows(self) -> List[str]:
        def cell_char(value: int) -> str:
            # Canonical fungible tokens are shown as lowercase letters
            if value < SPACE:
                return chr(value - 1 + ord("a"))
            return chr(value)

        return [
            "".join(cell_char(v) for v in self.cells[start : start + self.width])
            for start in range(0, len(self.cells), self.width)
        ]

    def __str__(self) -> str:
        return "\n".join(self.rows())


def parse_board(text: str) -> Board:
    """Parse a board (or target pattern) from its text form.

    ``#`` is a wall, a space is empty (a wildcard in targets), uppercase
    letters are unique pieces and any other character is a fungible piece.
    The result is canonical.
    """
    lines = [line for line in text.strip().splitlines() if line]
    if not lines:
        raise ValueError("board has no rows")
    width = len(lines[0])
    for idx, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"row {idx} has length {len(line)}, expected {width}")
    try:
        cells = "".join(lines).encode("ascii")
    except UnicodeEncodeError as exc:
        raise ValueError("board contains non-ASCII characters") from exc
    return Board(len(lines), width, canonicalize(cells))
