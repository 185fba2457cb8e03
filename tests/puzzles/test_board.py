import numpy as np
import pytest

from slider_solver.puzzles.sliding_blocks.board import (
    SPACE,
    WALL,
    Board,
    Direction,
    canonicalize,
    parse_board,
)


CLASSIC = """
######
#1AA2#
#1AA2#
#4335#
#4675#
#8  9#
######
"""


def test_parse_shape_and_cells():
    board = parse_board(CLASSIC)
    assert board.shape == (7, 6)
    assert board[0, 0] == WALL
    assert board[1, 2] == ord("A")
    assert board[5, 2] == SPACE
    # First fungible piece in row-major order becomes token 1
    assert board[1, 1] == 1
    assert board[1, 4] == 2


def test_render_round_trip():
    board = parse_board(CLASSIC)
    assert str(board).splitlines() == [
        "######",
        "#aAAb#",
        "#aAAb#",
        "#cdde#",
        "#cfge#",
        "#h  i#",
        "######",
    ]
    assert parse_board(str(board)) == board


def test_parse_ignores_surrounding_whitespace():
    assert parse_board("\n\n####\n#A #\n####\n\n") == parse_board("####\n#A #\n####")


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_board("####\n#A #\n###")


@pytest.mark.parametrize("text", ["", "   \n  \n"])
def test_parse_rejects_empty_input(text):
    with pytest.raises(ValueError):
        parse_board(text)


def test_too_many_fungible_pieces():
    labels = "abcdefghijklmnopqrstuvwxyz012345"
    assert len(labels) == 32
    parse_board("#" + labels[:31] + "#")
    with pytest.raises(ValueError):
        parse_board("#" + labels + "#")


def test_empties_in_row_major_order():
    board = parse_board(CLASSIC)
    assert board.empties() == ((5, 2), (5, 3))

    board = parse_board("#####\n#A B#\n## ##\n#####")
    assert board.empties() == ((1, 2), (2, 2))


class TestCanonical:
    def test_idempotent(self):
        board = parse_board(CLASSIC)
        assert board.canonical() == board
        assert canonicalize(board.cells) == board.cells

    def test_fungible_relabelling_is_symmetric(self):
        first = parse_board("#######\n#1122A#\n#3  4A#\n#######")
        second = parse_board("#######\n#zzxxA#\n#y  wA#\n#######")
        assert first == second
        assert hash(first) == hash(second)

    def test_same_labels_on_different_layout_differ(self):
        first = parse_board("######\n#ab  #\n######")
        second = parse_board("######\n#aa  #\n######")
        assert first != second

    def test_unique_pieces_are_not_relabelled(self):
        first = parse_board("######\n#AB  #\n######")
        second = parse_board("######\n#BA  #\n######")
        assert first != second
        assert str(first).splitlines()[1] == "#AB  #"

    def test_raw_board_canonicalizes(self):
        raw = Board(1, 5, b"#qp #")
        canon = raw.canonical()
        assert canon.cells == bytes([WALL, 1, 2, SPACE, WALL])
        assert str(canon) == "#ab #"


def test_as_array_view():
    board = parse_board(CLASSIC)
    arr = board.as_array()
    assert arr.shape == (7, 6)
    assert arr.dtype == np.uint8
    assert arr[1, 2] == ord("A")
    assert np.all(arr[0, :] == WALL)


def test_direction_properties():
    assert Direction.UP.reverse is Direction.DOWN
    assert Direction.LEFT.reverse is Direction.RIGHT
    assert Direction.DOWN.offset(6) == 6
    assert Direction.LEFT.offset(6) == -1
    assert Direction.DOWN.scan_backward and Direction.RIGHT.scan_backward
    assert not Direction.UP.scan_backward and not Direction.LEFT.scan_backward
