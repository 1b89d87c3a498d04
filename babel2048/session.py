"""Browsing state: pick a protoboard by global ID, fill it by local ID, play moves."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .board import (
    Direction,
    Grid,
    encode_base11,
    extract_proto_and_tiles,
    fill_board,
    move_board,
    parse_base11,
)
from .protoboards import Board, ProtoboardMap, count_filled, load_protoboards

_UNSIGNED = re.compile(r"\+?[0-9]+")
_LOCAL_DIGITS = frozenset("123456789AaBb")


class SessionError(ValueError):
    """An input was rejected; the message is meant for the user."""


@dataclass
class Session:
    """Everything the viewer shows: chosen t, IDs, protoboard and filled board."""

    protoboards: ProtoboardMap
    spawn_tile: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False)
    selected_t: Optional[int] = None
    global_id: str = ""
    local_id: str = ""
    current_proto: Optional[Board] = None
    filled_tiles: int = 0
    generated: Optional[Grid] = None
    view_proto: bool = False

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Session":
        """Build a session from a protoboard file, generating the file if missing."""
        return cls(load_protoboards(path))

    @property
    def t_values(self) -> list[int]:
        """The available numbers of filled cells, ascending."""
        return sorted(self.protoboards)

    def id_range(self, t: int) -> tuple[int, int]:
        """Inclusive range of global IDs belonging to ``t``."""
        if t not in self.protoboards:
            raise SessionError(f"Unknown t: {t}")
        start = 1 + sum(len(self.protoboards[k]) for k in self.t_values if k < t)
        return start, start + len(self.protoboards[t]) - 1

    def select_t(self, t: int) -> None:
        """Choose ``t``; clears the board and proposes the first global ID."""
        start, _ = self.id_range(t)
        self.selected_t = t
        self.current_proto = None
        self.generated = None
        self.view_proto = False
        self.local_id = ""
        self.global_id = str(start)

    def load_protoboard(self, global_id: Optional[str] = None) -> Board:
        """Load the protoboard with the given global ID for the selected ``t``."""
        if global_id is not None:
            self.global_id = global_id
        t = self.selected_t
        if t is None:
            raise SessionError("Select t first.")
        text = self.global_id.strip()
        if not _UNSIGNED.fullmatch(text):
            raise SessionError("Invalid ID! Non-integer value.")
        gid = int(text)
        start, end = self.id_range(t)
        if gid < start:
            raise SessionError(
                f"Invalid ID! {gid} is less than minimum {start} in range for t={t}"
            )
        if gid > end:
            raise SessionError(
                f"Invalid ID! {gid} is greater than maximum {end} in range for t={t}"
            )
        proto = next((p for i, p in self.protoboards[t] if i == gid), None)
        if proto is None:
            raise SessionError("Unknown error loading protoboard.")
        self.current_proto = proto
        self.filled_tiles = count_filled(proto)
        self.generated = None
        self.view_proto = True
        self.local_id = ""
        return proto

    def generate(self, local_id: Optional[str] = None) -> Grid:
        """Fill the loaded protoboard with the tiles a local ID describes."""
        if local_id is not None:
            self.local_id = local_id
        if self.current_proto is None:
            raise SessionError("Load a protoboard first.")
        text = self.local_id
        if len(text.encode("utf-8")) != self.filled_tiles:
            raise SessionError(
                f"Local ID must be exactly {self.filled_tiles} characters "
                f"for t={self.selected_t}."
            )
        if not all(c in _LOCAL_DIGITS for c in text):
            raise SessionError("Local ID must only use digits 1-9, A, or B (base-11).")
        try:
            tiles = parse_base11(text)
        except ValueError as exc:
            raise SessionError(str(exc)) from None
        self.generated = fill_board(self.current_proto, tiles)
        self.view_proto = False
        return self.generated

    def move(self, direction: Direction) -> bool:
        """Slide the board; return whether the result was found and shown."""
        board = self.generated
        if board is None:
            return False
        new_board = move_board(board, direction)
        if self.spawn_tile and new_board != board:
            empty = [
                (r, c)
                for r, row in enumerate(new_board)
                for c, value in enumerate(row)
                if value == 0
            ]
            if empty:
                r, c = self.rng.choice(empty)
                new_board[r][c] = 4 if self.rng.randrange(10) == 0 else 2
        proto, tiles = extract_proto_and_tiles(new_board)
        t = len(tiles)
        match = next((gid for gid, p in self.protoboards.get(t, []) if p == proto), None)
        if match is None:
            return False
        self.selected_t = t
        self.global_id = str(match)
        self.local_id = encode_base11(tiles)
        self.current_proto = proto
        self.filled_tiles = t
        self.generated = new_board
        self.view_proto = False
        return True

    def reset(self) -> None:
        """Return to the initial state, keeping the loaded protoboards."""
        self.spawn_tile = False
        self.selected_t = None
        self.global_id = ""
        self.local_id = ""
        self.current_proto = None
        self.filled_tiles = 0
        self.generated = None
        self.view_proto = False