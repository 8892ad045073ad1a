"""Reading map files and checking that a map is playable."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from os import PathLike

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

BASE_TILES = frozenset({FLOOR, WALL, PLAYER, EXIT, COLLECTIBLE})
BONUS_TILES = BASE_TILES | {ENEMY}

Point = tuple[int, int]


class MapError(ValueError):
    """Raised when a map cannot be played."""


def read_map(path: str | PathLike[str]) -> list[str]:
    """Read a map file into a list of rows, without their line endings.

    A trailing newline at the end of the file does not add an empty row;
    an empty file gives an empty list.  Errors opening the file propagate.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()
    rows = content.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def count_tile(rows: Iterable[str], tile: str) -> int:
    """Count how many cells of the map hold ``tile``."""
    return sum(row.count(tile) for row in rows)


def is_rectangular(rows: Sequence[str]) -> bool:
    """Tell whether the map is non-empty and every row has the same width."""
    if not rows:
        return False
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def is_closed(rows: Sequence[str]) -> bool:
    """Tell whether the map is enclosed by walls on all four sides."""
    if not rows:
        return False
    top, bottom = rows[0], rows[-1]
    if len(bottom) < len(top):
        return False
    if any(cell != WALL for cell in top):
        return False
    if any(cell != WALL for cell in bottom[: len(top)]):
        return False
    return all(row.startswith(WALL) and row.endswith(WALL) for row in rows)


def has_only_valid_tiles(rows: Iterable[str], allow_enemies: bool = False) -> bool:
    """Tell whether every cell holds a known tile.

    Enemy tiles are accepted only when ``allow_enemies`` is true.
    """
    allowed = BONUS_TILES if allow_enemies else BASE_TILES
    return all(set(row) <= allowed for row in rows)


def find_player(rows: Iterable[str]) -> Point | None:
    """Return the ``(x, y)`` of the first player tile, or None if there is none."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x != -1:
            return (x, y)
    return None


def flood_fill(rows: Sequence[str], start: Point | None) -> set[Point]:
    """Return every cell reachable from ``start`` without crossing a wall.

    Movement is in the four orthogonal directions.  A start outside the map
    or on a wall reaches nothing.
    """
    reached: set[Point] = set()
    if start is None:
        return reached
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached or x < 0 or y < 0 or y >= len(rows):
            continue
        row = rows[y]
        if x >= len(row) or row[x] == WALL:
            continue
        reached.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return reached


def check_reachable(rows: Sequence[str]) -> None:
    """Raise MapError unless every collectible and the exit can be reached."""
    reached = flood_fill(rows, find_player(rows))
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell in (COLLECTIBLE, EXIT) and (x, y) not in reached:
                raise MapError("map is unwinnable")


def validate_map(rows: Sequence[str], allow_enemies: bool = False) -> None:
    """Check a map fully, raising MapError with the first problem found."""
    if not rows:
        raise MapError("map is empty")
    if not is_rectangular(rows):
        raise MapError("map is not rectangular")
    if not is_closed(rows):
        raise MapError("map is not surrounded by walls")
    if not has_only_valid_tiles(rows, allow_enemies):
        raise MapError("map has an invalid character")
    counts = Counter("".join(rows))
    if counts[EXIT] != 1:
        raise MapError("map needs exactly one exit")
    if counts[PLAYER] != 1:
        raise MapError("map needs exactly one spawn point")
    if counts[COLLECTIBLE] < 1:
        raise MapError("map needs one or more items to collect")
    check_reachable(rows)