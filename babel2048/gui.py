"""Desktop viewer for the library of 2048 boards."""

from __future__ import annotations

import argparse
from typing import Optional

try:
    import tkinter as tk
except ImportError:  # pragma: no cover - Tk is optional for the helpers
    tk = None

from .board import SIZE, Direction, tile_color
from .protoboards import DEFAULT_PATH
from .session import Session, SessionError

_KEY_DIRECTIONS = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}
_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}
_BACKGROUND = "#1b1b1b"
_GRID_LINE = "#a0a0a0"
_ERROR = "#ff0000"


def key_to_direction(keysym: str) -> Optional[Direction]:
    """Map a Tk key name to a move direction, or ``None``."""
    return _KEY_DIRECTIONS.get(keysym)


def cell_text(value: int) -> str:
    """Text shown on a cell: empty for 0, otherwise the tile value."""
    return str(value) if value else ""


class App:
    """Tk window showing the selector, ID fields, arrows and the board."""

    def __init__(self, root: "tk.Tk", session: Session) -> None:
        if tk is None:
            raise RuntimeError("Tk is not available")
        self.root = root
        self.session = session
        self.global_error = ""
        self.local_error = ""

        self.t_var = tk.IntVar(value=0)
        self.global_var = tk.StringVar()
        self.local_var = tk.StringVar()
        self.spawn_var = tk.BooleanVar(value=session.spawn_tile)
        self.range_var = tk.StringVar()
        self.hint_var = tk.StringVar()
        self.global_error_var = tk.StringVar()
        self.local_error_var = tk.StringVar()

        self._build()
        root.bind_all("<KeyPress>", self._on_key)
        self.refresh()

    def _build(self) -> None:
        top = tk.Frame(self.root)
        top.pack(fill="x", padx=6, pady=4)
        tk.Label(top, text="Select t:").pack(side="left")
        for t in self.session.t_values:
            tk.Radiobutton(
                top, text=str(t), value=t, variable=self.t_var,
                indicatoron=False, command=lambda t=t: self._select_t(t),
            ).pack(side="left", padx=1)
        tk.Button(top, text="Reset", command=self._reset).pack(side="right")

        self.id_section = tk.Frame(self.root)
        self.id_section.pack(fill="x", padx=6)
        self.global_frame = tk.Frame(self.id_section)
        tk.Label(self.global_frame, textvariable=self.range_var).pack(anchor="w")
        row = tk.Frame(self.global_frame)
        row.pack(fill="x")
        tk.Label(row, text="Global ID:").pack(side="left")
        self.global_entry = tk.Entry(row, textvariable=self.global_var)
        self.global_entry.pack(side="left")
        self.global_entry.bind("<Return>", lambda _e: self._load())
        tk.Button(row, text="Load Protoboard", command=self._load).pack(side="left", padx=4)
        tk.Label(row, textvariable=self.global_error_var, fg=_ERROR).pack(side="left")

        self.local_frame = tk.Frame(self.id_section)
        tk.Label(self.local_frame, textvariable=self.hint_var).pack(anchor="w")
        row = tk.Frame(self.local_frame)
        row.pack(fill="x")
        tk.Label(row, text="Local ID:").pack(side="left")
        self.local_entry = tk.Entry(row, textvariable=self.local_var)
        self.local_entry.pack(side="left")
        self.local_entry.bind("<Return>", lambda _e: self._generate())
        tk.Button(row, text="Generate", command=self._generate).pack(side="left", padx=4)
        tk.Label(row, textvariable=self.local_error_var, fg=_ERROR).pack(side="left")

        arrows = tk.Frame(row)
        arrows.pack(side="right")
        self.arrow_buttons = {}
        placement = {
            Direction.UP: (0, 1),
            Direction.LEFT: (1, 0),
            Direction.DOWN: (1, 1),
            Direction.RIGHT: (1, 2),
        }
        for direction, (r, c) in placement.items():
            button = tk.Button(
                arrows, text=_ARROWS[direction], width=2,
                command=lambda d=direction: self._move(d),
            )
            button.grid(row=r, column=c, padx=4, pady=2)
            self.arrow_buttons[direction] = button

        tk.Checkbutton(
            self.root, text="Enable tile spawn", variable=self.spawn_var,
            command=self._toggle_spawn,
        ).pack(anchor="w", padx=6)
        self.canvas = tk.Canvas(self.root, background=_BACKGROUND, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Configure>", lambda _e: self._draw())

    def _select_t(self, t: int) -> None:
        self.session.select_t(t)
        self.refresh()
        self.global_entry.focus_set()
        self.global_entry.select_range(0, "end")

    def _load(self) -> None:
        try:
            self.session.load_protoboard(self.global_var.get())
        except SessionError as exc:
            self.global_error = str(exc)
            self.refresh()
            return
        self.global_error = ""
        self.local_error = ""
        self.refresh()
        self.local_entry.focus_set()

    def _generate(self) -> None:
        try:
            self.session.generate(self.local_var.get())
        except SessionError as exc:
            self.local_error = str(exc)
        else:
            self.local_error = ""
        self.refresh()

    def _move(self, direction: Direction) -> None:
        if self.session.generated is None:
            return
        if self.session.move(direction):
            self.global_error = ""
            self.local_error = ""
        self.refresh()

    def _toggle_spawn(self) -> None:
        self.session.spawn_tile = self.spawn_var.get()

    def _reset(self) -> None:
        self.session.reset()
        self.global_error = ""
        self.local_error = ""
        self.refresh()

    def _on_key(self, event: "tk.Event") -> None:
        if event.keysym in ("r", "R"):
            self._reset()
            return
        direction = key_to_direction(event.keysym)
        if direction is not None and self.session.current_proto is not None:
            self._move(direction)

    def refresh(self) -> None:
        """Bring every widget in line with the session state."""
        session = self.session
        t = session.selected_t
        self.t_var.set(t if t is not None else 0)
        self.spawn_var.set(session.spawn_tile)
        self.global_var.set(session.global_id)
        self.local_var.set(session.local_id)
        self.global_error_var.set(self.global_error)
        self.local_error_var.set(self.local_error)

        if t is None:
            self.global_frame.pack_forget()
        else:
            start, end = session.id_range(t)
            self.range_var.set(f"Valid IDs for t={t}: {start}..={end}")
            self.global_frame.pack(fill="x")

        if t is None or session.current_proto is None:
            self.local_frame.pack_forget()
        else:
            self.hint_var.set(
                f"Local ID length == t={t}; Must use digits [1,2,3,4,5,6,7,8,9,A,B]"
            )
            self.local_frame.pack(fill="x")

        state = "normal" if session.generated is not None else "disabled"
        for button in self.arrow_buttons.values():
            button.configure(state=state)
        self._draw()

    def _draw(self) -> None:
        canvas = self.canvas
        canvas.delete("all")
        width, height = canvas.winfo_width(), canvas.winfo_height()
        cell = min(width, height) / SIZE
        if cell <= 0:
            return
        left = (width - cell * SIZE) / 2
        top = (height - cell * SIZE) / 2
        session = self.session
        for r in range(SIZE):
            for c in range(SIZE):
                x0, y0 = left + c * cell, top + r * cell
                x1, y1 = x0 + cell, y0 + cell
                cx, cy = (x0 + x1) / 2, (y0 + y1) / 2
                canvas.create_rectangle(x0, y0, x1, y1, outline=_GRID_LINE)
                if session.view_proto:
                    proto = session.current_proto
                    if proto is not None and proto[r][c] == "X":
                        canvas.create_text(
                            cx, cy, text="X", fill="white",
                            font=("TkDefaultFont", -max(1, int(cell * 0.5))),
                        )
                elif session.generated is not None:
                    value = session.generated[r][c]
                    if value:
                        margin = cell * 0.03
                        canvas.create_rectangle(
                            x0 + margin, y0 + margin, x1 - margin, y1 - margin,
                            fill=tile_color(value), outline="",
                        )
                        canvas.create_text(
                            cx, cy, text=cell_text(value), fill="white",
                            font=("TkDefaultFont", -max(1, int(cell * 0.4))),
                        )


def main(argv: Optional[list[str]] = None) -> None:
    """Open the viewer window."""
    parser = argparse.ArgumentParser(prog="babel2048", description="2048 Library of Babel")
    parser.add_argument(
        "--protoboards", default=DEFAULT_PATH,
        help="protoboard file; generated when missing",
    )
    args = parser.parse_args(argv)
    if tk is None:
        raise SystemExit("Tk is not available")
    session = Session.from_file(args.protoboards)
    root = tk.Tk()
    root.title("2048 Library of Babel")
    root.geometry("800x800")
    App(root, session)
    root.mainloop()


if __name__ == "__main__":
    main()