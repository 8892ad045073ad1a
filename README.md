# keyquest

A small tile-based game. You walk a player around a walled map, pick up
every key, and then step onto the exit door to win.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Playing

    keyquest path/to/level.ber

Controls:

- `W` moves up, `S` moves down, `A` moves left and `D` moves right
- `Esc` or closing the window quits

Every move that succeeds is counted. The count is printed to the terminal as
`moves : N`. Walls block movement. The exit only lets you out once every key
has been collected. Until then you can stand on the door and walk off it
again. When you win, a victory line is printed.

The command takes exactly one argument, the map file. If the argument is
missing, the file does not exist or cannot be read, the map breaks a rule
below, or a texture cannot be loaded, then a line starting with `Error` is
printed to standard error and the command exits with status 1.

### Bonus mode

    keyquest-bonus path/to/level.ber

Bonus mode lets maps hold enemies (`X`). Walking into an enemy loses the game
and prints a message. The move count is drawn in the window as `Moves:` and
is not printed to the terminal. The door is drawn open once every key has
been collected.

## Map format

A map is a plain text file with one row per line. A newline at the end of the
file does not add an empty row. Tiles:

| Tile | Meaning              |
|------|----------------------|
| `1`  | wall                 |
| `0`  | floor                |
| `C`  | key to collect       |
| `E`  | exit                 |
| `P`  | player start         |
| `X`  | enemy (bonus only)   |

A map is valid only when all of these hold. They are checked in this order,
and the first one that fails is reported:

- it is not empty
- every row has the same length
- it is closed: the first row, the last row, and the first and last column are all walls
- it holds only the tiles listed above
- it has exactly one exit, exactly one start, and at least one key
- every key and the exit can be reached from the start, moving up, down, left or right without crossing a wall

For example:

    1111111
    1P0C0E1
    1111111

## Textures

Textures are read from a `textures/` directory under the current working
directory, one file per texture, named `walls.xpm`, `floor.xpm`,
`keyscollect.xpm`, `closeddoor.xpm`, `player.xpm` and `playerondoor.xpm`.
Bonus mode also needs `openeddoor.xpm` and `enemy.xpm`. Each tile is drawn
75 pixels square, and the window is sized to fit the map.

The package ships no texture images. You have to supply the `textures/`
directory yourself before `keyquest` can open a window.

## Using it as a library

    from keyquest.mapfile import read_map, validate_map
    from keyquest.game import Game, Direction

    rows = read_map("level.ber")
    validate_map(rows, False)
    game = Game(rows, False)
    outcome = game.move(Direction.RIGHT)

Modules:

- `keyquest.mapfile` reads maps (`read_map`) and checks them (`validate_map`,
  plus `is_rectangular`, `is_closed`, `has_only_valid_tiles`, `count_tile`,
  `find_player`, `flood_fill` and `check_reachable`). `validate_map` raises
  `MapError`, a subclass of `ValueError`, when a map is invalid.
- `keyquest.game` holds `Game`, with `move(direction)`, `handle_key(key)`,
  `tile(x, y)`, `size()` and the `rows`, `player`, `collectibles` and `moves`
  attributes. `move` and `handle_key` return an `Outcome`: `IGNORED`,
  `BLOCKED`, `MOVED`, `WON`, `LOST` or `QUIT`. `handle_key` takes a key name
  (`"w"`, `"a"`, `"s"`, `"d"`, `"escape"`) or a numeric keycode (13, 0, 1, 2,
  and 53 for escape).
- `keyquest.render` draws a game onto a pygame surface (`draw`), loads
  textures (`Textures.load`) and works out the window size (`window_size`).
- `keyquest.cli` holds the command entry points `main` and `main_bonus`,
  as well as `check_arguments`, `load_game` and `run`.