import pytest

from babel2048.board import (
    Direction,
    encode_base11,
    extract_proto_and_tiles,
    fill_board,
    move_board,
    parse_base11,
    slide_and_merge_line,
    tile_color,
)

SAMPLE = [
    [2, 2, 4, 0],
    [0, 4, 4, 8],
    [16, 0, 16, 16],
    [2, 4, 8, 16],
]


def test_slide_merges_each_pair_once():
    assert slide_and_merge_line([2, 2, 2, 2]) == [4, 4, 0, 0]


@pytest.mark.parametrize(
    "line", [[0, 0, 0, 0], [2, 0, 2, 4], [4, 4, 8, 8], [2, 4, 8, 16], [0, 0, 0, 2]]
)
def test_slide_invariants(line):
    result = slide_and_merge_line(line)
    assert len(result) == 4
    assert sum(result) == sum(line)
    nonzero = [v for v in result if v]
    assert result[: len(nonzero)] == nonzero


def test_slide_without_merge_is_compaction():
    assert slide_and_merge_line([0, 2, 0, 4]) == [2, 4, 0, 0]


def test_move_left_is_rowwise_slide():
    assert move_board(SAMPLE, Direction.LEFT) == [slide_and_merge_line(r) for r in SAMPLE]


def test_move_right_mirrors_left():
    mirrored = [row[::-1] for row in SAMPLE]
    left = move_board(mirrored, Direction.LEFT)
    assert move_board(SAMPLE, Direction.RIGHT) == [row[::-1] for row in left]


def test_move_up_and_down_are_transposed_left_right():
    transposed = [list(c) for c in zip(*SAMPLE)]
    up = [list(c) for c in zip(*move_board(transposed, Direction.LEFT))]
    down = [list(c) for c in zip(*move_board(transposed, Direction.RIGHT))]
    assert move_board(SAMPLE, Direction.UP) == up
    assert move_board(SAMPLE, Direction.DOWN) == down


@pytest.mark.parametrize("direction", list(Direction))
def test_move_preserves_sum_and_input(direction):
    before = [row[:] for row in SAMPLE]
    result = move_board(SAMPLE, direction)
    assert sum(map(sum, result)) == sum(map(sum, SAMPLE))
    assert SAMPLE == before


def test_parse_base11_digits():
    assert parse_base11("19aB") == [1, 9, 10, 11]


def test_parse_base11_two_b_rejected():
    with pytest.raises(ValueError, match="more than one 'B'"):
        parse_base11("BbA")


@pytest.mark.parametrize("text", ["0", "12C", "1 2"])
def test_parse_base11_invalid_digit(text):
    with pytest.raises(ValueError, match="Invalid base-11 digit"):
        parse_base11(text)


def test_encode_parse_round_trip():
    tiles = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
    assert parse_base11(encode_base11(tiles)) == tiles


def test_encode_out_of_range():
    assert encode_base11([0, 12]) == "??"


def test_fill_and_extract_round_trip():
    proto = ("X..X", ".X..", "....", "XXXX")
    tiles = [1, 11, 3, 4, 5, 6, 7]
    board = fill_board(proto, tiles)
    assert board[0][0] == 2
    assert board[2] == [0, 0, 0, 0]
    assert extract_proto_and_tiles(board) == (proto, tiles)


def test_fill_board_not_enough_tiles():
    with pytest.raises(ValueError):
        fill_board(("XX..", "....", "....", "...."), [1])


def test_tile_colors():
    assert tile_color(2) == "#eee4da"
    assert tile_color(2048) == "#edc22e"
    assert tile_color(4096) == "#cdc1b4"