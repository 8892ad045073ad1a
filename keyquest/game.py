"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from keyquest.mapfile import (
    COLLECTIBLE,
    ENEMY,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    count_tile,
    find_player,
)

WIN_MESSAGE = "🎉!🎉!🎉!🎉!🎉!🎉! YOU WON !🎉!🎉!🎉!🎉!🎉!🎉!"
LOSE_MESSAGE = "{{{LOSEEER U CANT WIN AN EASY GAME?}}}"


class Outcome(Enum):
    """What came of a key press or a move."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def message(self) -> str | None:
        """The line to show the player when the game ends this way."""
        if self is Outcome.WON:
            return WIN_MESSAGE
        if self is Outcome.LOST:
            return LOSE_MESSAGE
        return None

    @property
    def finished(self) -> bool:
        """Whether the game is over after this outcome."""
        return self in (Outcome.WON, Outcome.LOST, Outcome.QUIT)


class Direction(Enum):
    """A step on the grid as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


ESCAPE_KEYCODE = 53
_KEYCODES: dict[int, Direction] = {
    13: Direction.UP,
    1: Direction.DOWN,
    0: Direction.LEFT,
    2: Direction.RIGHT,
}
_KEY_NAMES: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


class Game:
    """A map being played: the grid, the player, items left and moves made."""

    def __init__(self, rows: Sequence[str], bonus: bool = False) -> None:
        start = find_player(rows)
        if start is None:
            raise MapError("map needs exactly one spawn point")
        self._grid = [list(row) for row in rows]
        self.bonus = bonus
        self.player: tuple[int, int] = start
        self.collectibles = count_tile(rows, COLLECTIBLE)
        self.moves = 0

    @property
    def rows(self) -> list[str]:
        """The current map as a list of strings."""
        return ["".join(row) for row in self._grid]

    def size(self) -> tuple[int, int]:
        """Return the map's ``(width, height)`` in tiles."""
        width = len(self._grid[0]) if self._grid else 0
        return width, len(self._grid)

    def tile(self, x: int, y: int) -> str:
        """Return the tile at ``(x, y)``; IndexError if it lies off the map."""
        if x < 0 or y < 0:
            raise IndexError(f"tile ({x}, {y}) is off the map")
        return self._grid[y][x]

    def _tile_or_wall(self, x: int, y: int) -> str:
        try:
            return self.tile(x, y)
        except IndexError:
            return WALL

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player one tile in ``direction``."""
        old_x, old_y = self.player
        new_x, new_y = old_x + direction.dx, old_y + direction.dy
        target = self._tile_or_wall(new_x, new_y)
        if target == WALL:
            return Outcome.BLOCKED
        if target == COLLECTIBLE:
            self._grid[new_y][new_x] = FLOOR
            self.collectibles -= 1
        if target == EXIT and self.collectibles == 0:
            return Outcome.WON
        if target == ENEMY and self.bonus:
            return Outcome.LOST
        if self._grid[old_y][old_x] != EXIT:
            self._grid[old_y][old_x] = FLOOR
        self.player = (new_x, new_y)
        if target != EXIT:
            self._grid[new_y][new_x] = PLAYER
        self.moves += 1
        if not self.bonus:
            print(f"moves : {self.moves}")
        return Outcome.MOVED

    def handle_key(self, key: int | str) -> Outcome:
        """React to a key given as a keycode or as a key name such as ``"w"``."""
        if isinstance(key, str):
            name = key.lower()
            if name in ("escape", "esc"):
                return Outcome.QUIT
            direction = _KEY_NAMES.get(name)
        else:
            if key == ESCAPE_KEYCODE:
                return Outcome.QUIT
            direction = _KEYCODES.get(key)
        if direction is None:
            return Outcome.IGNORED
        return self.move(direction)