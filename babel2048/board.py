"""The 4x4 board: moves, tile encoding and colours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

SIZE = 4

Grid = list[list[int]]

_DIGITS = {str(d): d for d in range(1, 10)}
_DIGITS.update({"A": 10, "a": 10, "B": 11, "b": 11})

_TILE_COLORS = {
    2: "#eee4da",
    4: "#ede0c8",
    8: "#f2b179",
    16: "#f59563",
    32: "#f67c5f",
    64: "#f65e3b",
    128: "#edcf72",
    256: "#edcc61",
    512: "#edc850",
    1024: "#edc53f",
    2048: "#edc22e",
}
_FALLBACK_COLOR = "#cdc1b4"


class Direction(Enum):
    """A direction in which tiles slide."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def slide_and_merge_line(line: Iterable[int]) -> list[int]:
    """Slide a line towards its start, merging equal neighbours once."""
    values = [v for v in line if v != 0]
    result: list[int] = []
    skip = False
    for i, value in enumerate(values):
        if skip:
            skip = False
            continue
        if i + 1 < len(values) and value == values[i + 1]:
            result.append(value * 2)
            skip = True
        else:
            result.append(value)
    result.extend([0] * (SIZE - len(result)))
    return result


def _transpose(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(col) for col in zip(*grid)]


def move_board(board: Sequence[Sequence[int]], direction: Direction) -> Grid:
    """Return the board after sliding every tile in ``direction``."""
    if direction is Direction.LEFT:
        return [slide_and_merge_line(row) for row in board]
    if direction is Direction.RIGHT:
        return [slide_and_merge_line(reversed(row))[::-1] for row in board]
    if direction is Direction.UP:
        return _transpose([slide_and_merge_line(col) for col in _transpose(board)])
    if direction is Direction.DOWN:
        return _transpose(
            [slide_and_merge_line(reversed(col))[::-1] for col in _transpose(board)]
        )
    raise ValueError(f"Unknown direction: {direction!r}")


def parse_base11(text: str) -> list[int]:
    """Decode a local ID (digits 1-9, A, B) into tile exponents."""
    if sum(1 for c in text if c in "Bb") > 1:
        raise ValueError("Invalid base-11 ID: more than one 'B'")
    exponents = []
    for c in text:
        if c not in _DIGITS:
            raise ValueError(f"Invalid base-11 digit: {c}")
        exponents.append(_DIGITS[c])
    return exponents


def encode_base11(tiles: Iterable[int]) -> str:
    """Encode tile exponents as a local ID; out-of-range exponents become '?'."""
    def symbol(v: int) -> str:
        if 1 <= v <= 9:
            return str(v)
        if v == 10:
            return "A"
        if v == 11:
            return "B"
        return "?"

    return "".join(symbol(v) for v in tiles)


def fill_board(proto: Sequence[str], tiles: Iterable[int]) -> Grid:
    """Place ``2 ** exponent`` tiles on the filled cells of ``proto``, row by row."""
    exponents = iter(tiles)
    grid: Grid = []
    for row in proto[:SIZE]:
        cells = []
        for cell in row[:SIZE]:
            if cell == "X":
                try:
                    cells.append(2 ** next(exponents))
                except StopIteration:
                    raise ValueError("Not enough tiles for the protoboard") from None
            else:
                cells.append(0)
        grid.append(cells)
    return grid


def extract_proto_and_tiles(board: Sequence[Sequence[int]]) -> tuple[tuple[str, ...], list[int]]:
    """Split a board into its protoboard and its tile exponents."""
    proto = tuple("".join("X" if v else "." for v in row) for row in board)
    tiles = [v.bit_length() - 1 for row in board for v in row if v]
    return proto, tiles


def tile_color(value: int) -> str:
    """Background colour of a tile as a ``#rrggbb`` string."""
    return _TILE_COLORS.get(value, _FALLBACK_COLOR)