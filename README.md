# babel2048

A "Library of Babel" for the game 2048. Each 4x4 board with at least two tiles
has an address made of two parts:

* a **global ID**, which picks a *protoboard*. A protoboard is the pattern of
  filled (`X`) and empty (`.`) cells. Protoboards are grouped by `t`, the number
  of filled tiles, which runs from 2 to 16. Global IDs start at 1 and run on
  from one group to the next.
* a **local ID**, which gives the value of each filled tile. It is a string of
  exactly `t` base-11 digits `1`–`9`, `A`, `B` (lower-case `a` and `b` are also
  accepted), read row by row. A digit `d` stands for the tile `2**d`. At most
  one `B` (2048) is allowed.

Once a board is generated you can slide it with the arrow keys or the on-screen
buttons. The app then shows the global and local IDs of the board that results.
You can also turn on tile spawning. After each move that changes the board, a
random empty cell gets a 2 (probability 90%) or a 4 (probability 10%).

A move is ignored when the board it would produce is not in the catalogue, for
example a board left with a single tile.

## Installation

```
pip install .
```

The app uses Tkinter from the standard library and needs nothing else.

## Running

```
babel2048
babel2048 --protoboards path/to/protoboards.txt
```

`--protoboards` names the catalogue file. It defaults to `protoboards.txt` in
the current directory. If the file does not exist, it is written first, which
prints the number of boards for each `t`, and then read back.

In the window:

1. Pick `t`. The valid global ID range is shown and the first ID is filled in.
2. Enter a global ID and press **Load Protoboard** or Enter. The pattern is
   drawn.
3. Enter a local ID and press **Generate** or Enter. The tiles are drawn.
4. Use the arrow keys or the arrow buttons to move.

Press `R` or click **Reset** to clear the selection. The catalogue already
loaded is kept. If Tkinter is not available, the command exits with a message.

## Library use

```python
from babel2048.session import Session, SessionError
from babel2048.board import Direction

session = Session.from_file("protoboards.txt")
session.select_t(2)
start, end = session.id_range(2)      # first and last global ID for t = 2
session.load_protoboard(str(start))   # the ID is given as text, as typed
session.generate("12")                # a 2 and a 4
session.move(Direction.DOWN)          # True when the new board was found
print(session.global_id, session.local_id)
```

`load_protoboard` and `generate` take the text the user typed. Invalid input
raises `SessionError` (a `ValueError`), and the message says what went wrong.
Set `session.spawn_tile = True` to spawn tiles after moves. `session.rng` is the
`random.Random` used for spawning. `session.reset()` returns to the initial
state.

Lower-level helpers in `babel2048.board`:

* `Direction`
* `move_board`
* `slide_and_merge_line`
* `parse_base11` and `encode_base11`
* `fill_board`
* `extract_proto_and_tiles`
* `tile_color`

Catalogue helpers in `babel2048.protoboards`:

* `iter_masks` and `mask_to_board`
* `generate_protoboards`
* `parse_protoboards`
* `load_protoboards`
* `count_filled`

## Tests

```
pip install .[test]
pytest
```