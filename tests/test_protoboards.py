from math import comb

import pytest

from babel2048.protoboards import (
    count_filled,
    generate_protoboards,
    iter_masks,
    load_protoboards,
    mask_to_board,
    parse_protoboards,
)


@pytest.fixture(scope="module")
def generated(tmp_path_factory):
    path = tmp_path_factory.mktemp("boards") / "protoboards.txt"
    total = generate_protoboards(path)
    return path, total, parse_protoboards(path)


def test_mask_to_board_single_bit():
    assert mask_to_board(1) == ("X...", "....", "....", "....")


def test_mask_to_board_full_and_empty():
    assert mask_to_board(0xFFFF) == ("XXXX",) * 4
    assert mask_to_board(0) == ("....",) * 4


@pytest.mark.parametrize("t", [0, 1, 2, 8, 15, 16])
def test_iter_masks_counts_and_order(t):
    masks = list(iter_masks(t))
    assert len(masks) == comb(16, t)
    assert masks == sorted(masks)
    assert all(bin(m).count("1") == t for m in masks)


def test_iter_masks_full():
    assert list(iter_masks(16)) == [0xFFFF]


@pytest.mark.parametrize("mask", [3, 0x8001, 0x1234, 0xFFFF])
def test_count_filled_matches_bits(mask):
    assert count_filled(mask_to_board(mask)) == bin(mask).count("1")


def test_generate_keys_and_total(generated):
    _, total, boards = generated
    assert sorted(boards) == list(range(2, 17))
    assert total == sum(len(v) for v in boards.values())


def test_generate_ids_are_consecutive(generated):
    _, _, boards = generated
    ids = [gid for t in sorted(boards) for gid, _ in boards[t]]
    assert ids == list(range(1, len(ids) + 1))


def test_generate_boards_match_masks(generated):
    _, _, boards = generated
    for t in (2, 16):
        assert [b for _, b in boards[t]] == [mask_to_board(m) for m in iter_masks(t)]
        assert all(count_filled(b) == t for _, b in boards[t])


def test_generate_file_format(generated):
    path, _, _ = generated
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1] == "  Boards with t = 2 filled tiles"
    assert lines[4] == "Board #1 (t = 2 filled tiles):"
    assert lines[5] == "X X . . "


def test_parse_small_file(tmp_path):
    path = tmp_path / "small.txt"
    path.write_text(
        "=====\n  Boards with t = 2 filled tiles\n=====\n\n"
        "Board #7 (t = 2 filled tiles):\n"
        "X X . . \n. . . . \n. . . . \n. . . . \n\n"
        "=====\n  Boards with t = 3 filled tiles\n=====\n\n"
        "Board #9 (t = 3 filled tiles):\n"
        "X . . . \nX . . . \nX . . . \n. . . . \n",
        encoding="utf-8",
    )
    boards = parse_protoboards(path)
    assert boards == {
        2: [(7, ("XX..", "....", "....", "...."))],
        3: [(9, ("X...", "X...", "X...", "...."))],
    }


def test_parse_bad_number_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Board #abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_protoboards(path)


def test_load_existing_file_is_not_regenerated(tmp_path):
    path = tmp_path / "existing.txt"
    path.write_text(
        "  Boards with t = 16 filled tiles\nBoard #1\nX X X X\nX X X X\nX X X X\nX X X X\n",
        encoding="utf-8",
    )
    assert load_protoboards(path) == {16: [(1, ("XXXX",) * 4)]}


def test_load_missing_file_generates(tmp_path, generated):
    path = tmp_path / "new.txt"
    boards = load_protoboards(path)
    assert path.exists()
    assert boards == generated[2]