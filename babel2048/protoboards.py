"""Protoboards: every arrangement of filled cells on a 4x4 grid.

A protoboard is a 4x4 grid whose rows are strings of ``'X'`` (filled) and
``'.'`` (empty).  Protoboards are grouped by ``t``, the number of filled cells.
They are numbered globally from 1 across all values of ``t`` in ascending
order.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from pathlib import Path
from typing import Union

Board = tuple[str, ...]
ProtoboardMap = dict[int, list[tuple[int, Board]]]
PathLike = Union[str, Path]

DEFAULT_PATH = "protoboards.txt"
MIN_T = 2
MAX_T = 16
_SIZE = 4
_RULE = "============================="


def iter_masks(t: int) -> Iterator[int]:
    """Yield every 16-bit mask with exactly ``t`` bits set, in ascending order."""
    for mask in range(1 << (_SIZE * _SIZE)):
        if bin(mask).count("1") == t:
            yield mask


def mask_to_board(mask: int) -> Board:
    """Turn a 16-bit mask into a board; bit ``row * 4 + col`` marks a filled cell."""
    return tuple(
        "".join(
            "X" if (mask >> (row * _SIZE + col)) & 1 else "."
            for col in range(_SIZE)
        )
        for row in range(_SIZE)
    )


def _format_board(global_id: int, t: int, board: Board) -> str:
    lines = [f"Board #{global_id} (t = {t} filled tiles):"]
    lines.extend("".join(f"{cell} " for cell in row) for row in board)
    lines.append("")
    return "\n".join(lines) + "\n"


def generate_protoboards(path: PathLike = DEFAULT_PATH) -> int:
    """Write every protoboard for t = 2..16 to ``path``; return how many were written."""
    total = 0
    with open(path, "w", encoding="utf-8") as out:
        for t in range(MIN_T, MAX_T + 1):
            masks = list(iter_masks(t))
            out.write(f"{_RULE}\n")
            out.write(f"  Boards with t = {t} filled tiles\n")
            out.write(f"{_RULE}\n\n")
            print(f"t = {t}: {len(masks)} boards")
            for mask in masks:
                total += 1
                out.write(_format_board(total, t, mask_to_board(mask)))
    print(f"All {total} protoboards written to {Path(path).name}")
    return total


def parse_protoboards(path: PathLike) -> ProtoboardMap:
    """Read a protoboard file into a map from ``t`` to ``(global_id, board)`` pairs."""
    result: defaultdict[int, list[tuple[int, Board]]] = defaultdict(list)
    current_t = 0
    current_id = 0
    rows: list[str] = []

    def flush() -> None:
        if rows:
            result[current_t].append((current_id, tuple(rows)))
            rows.clear()

    with open(path, encoding="utf-8") as source:
        for raw in source:
            line = raw.rstrip("\r\n")
            if "Boards with t =" in line:
                flush()
                current_t = int(line.split("=")[1].split()[0])
            elif line.startswith("Board #"):
                flush()
                current_id = int(line.split("#")[1].split()[0])
            elif "X" in line or "." in line:
                row = "".join(c for c in line if c in "X.")
                if row:
                    rows.append(row)
    flush()
    return dict(result)


def load_protoboards(path: PathLike = DEFAULT_PATH) -> ProtoboardMap:
    """Parse the protoboard file at ``path``, generating it first if it is missing."""
    if not Path(path).exists():
        generate_protoboards(path)
    return parse_protoboards(path)


def count_filled(board: Board) -> int:
    """Number of filled cells on a protoboard."""
    return sum(row.count("X") for row in board)