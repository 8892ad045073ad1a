"""Drawing a game onto a pygame surface."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from os import PathLike
from pathlib import Path

import pygame

from keyquest.game import Game
from keyquest.mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, WALL

TILE_SIZE = 75
LABEL_COLOR = (0xFF, 0x2D, 0x00)
LABEL_TITLE_POS = (10, 10)
LABEL_VALUE_POS = (70, 10)

WALLS = "walls"
FLOOR_TEX = "floor"
KEYS = "keyscollect"
CLOSED_DOOR = "closeddoor"
PLAYER_TEX = "player"
PLAYER_ON_DOOR = "playerondoor"
OPENED_DOOR = "openeddoor"
ENEMY_TEX = "enemy"

BASE_TEXTURES = (WALLS, FLOOR_TEX, KEYS, CLOSED_DOOR, PLAYER_TEX, PLAYER_ON_DOOR)
BONUS_TEXTURES = BASE_TEXTURES + (OPENED_DOOR, ENEMY_TEX)


def window_size(rows: Sequence[str]) -> tuple[int, int]:
    """Return the window's ``(width, height)`` in pixels for a map."""
    width = len(rows[0]) if rows else 0
    return width * TILE_SIZE, len(rows) * TILE_SIZE


def tile_texture(game: Game, x: int, y: int) -> str | None:
    """Name the texture for the cell at ``(x, y)``, or None if nothing is drawn."""
    cell = game.tile(x, y)
    if cell == WALL:
        return WALLS
    if cell == FLOOR:
        return FLOOR_TEX
    if cell == COLLECTIBLE:
        return KEYS
    if cell == EXIT:
        if game.player == (x, y) and game.collectibles > 0:
            return PLAYER_ON_DOOR
        if game.bonus and game.collectibles == 0:
            return OPENED_DOOR
        return CLOSED_DOOR
    if cell == ENEMY and game.bonus:
        return ENEMY_TEX
    return None


def player_texture(game: Game) -> str | None:
    """Name the texture drawn over the player's cell, or None when on the exit."""
    x, y = game.player
    if game.tile(x, y) == EXIT:
        return None
    return PLAYER_TEX


def moves_label(moves: int) -> str:
    """The on-screen move counter text."""
    return f"Moves: {moves}"


@dataclass(frozen=True)
class Textures:
    """The images used to draw tiles, looked up by name."""

    images: Mapping[str, pygame.Surface]

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]

    @classmethod
    def load(cls, directory: str | PathLike[str], bonus: bool = False) -> Textures:
        """Load every texture from ``<directory>/<name>.xpm``.

        Raises OSError naming the file when one cannot be loaded.
        """
        base = Path(directory)
        names = BONUS_TEXTURES if bonus else BASE_TEXTURES
        images: dict[str, pygame.Surface] = {}
        for name in names:
            path = base / f"{name}.xpm"
            try:
                images[name] = pygame.image.load(str(path))
            except (pygame.error, OSError) as exc:
                raise OSError(f"failed to load texture {path}") from exc
        return cls(images)


@lru_cache(maxsize=1)
def _label_font() -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, 24)


def _draw_moves(surface: pygame.Surface, moves: int) -> None:
    font = _label_font()
    title = font.render("Moves:", False, LABEL_COLOR)
    value = font.render(str(moves), False, LABEL_COLOR)
    surface.blit(title, LABEL_TITLE_POS)
    surface.blit(value, LABEL_VALUE_POS)


def draw(surface: pygame.Surface, game: Game, textures: Textures) -> None:
    """Draw the whole map, the player and, in bonus mode, the move counter."""
    for y, row in enumerate(game.rows):
        for x in range(len(row)):
            name = tile_texture(game, x, y)
            if name is not None:
                surface.blit(textures[name], (x * TILE_SIZE, y * TILE_SIZE))
    name = player_texture(game)
    if name is not None:
        px, py = game.player
        surface.blit(textures[name], (px * TILE_SIZE, py * TILE_SIZE))
    if game.bonus:
        _draw_moves(surface, game.moves)