import pygame
import pytest

from keyquest.game import Direction, Game
from keyquest.render import (
    BASE_TEXTURES,
    BONUS_TEXTURES,
    LABEL_COLOR,
    TILE_SIZE,
    Textures,
    draw,
    moves_label,
    player_texture,
    tile_texture,
    window_size,
)

ROWS = ["11111", "1PCE1", "11111"]
BONUS_ROWS = ["111111", "1PCXE1", "111111"]


def _textures():
    images = {}
    for index, name in enumerate(BONUS_TEXTURES):
        surf = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surf.fill((10 + index * 20, 100, 200 - index * 10))
        images[name] = surf
    return Textures(images)


def _color_at(surface, x, y):
    return tuple(surface.get_at((x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)))[:3]


def _tex_color(textures, name):
    return tuple(textures[name].get_at((0, 0)))[:3]


def _used_textures(game, rows):
    names = {
        tile_texture(game, x, y)
        for y, row in enumerate(rows)
        for x in range(len(row))
    }
    names.add(player_texture(game))
    names.discard(None)
    return names


def test_window_size_scales_by_tile():
    assert window_size(ROWS) == (5 * TILE_SIZE, 3 * TILE_SIZE)


def test_single_tile_window_is_75_pixels():
    assert window_size(["1"]) == (75, 75)


def test_tile_textures_for_base_map():
    game = Game(ROWS)
    assert tile_texture(game, 0, 0) == "walls"
    assert tile_texture(game, 2, 1) == "keyscollect"
    assert tile_texture(game, 3, 1) == "closeddoor"
    assert tile_texture(game, 1, 1) is None


def test_floor_after_collecting(capsys):
    game = Game(ROWS)
    game.move(Direction.RIGHT)
    assert tile_texture(game, 1, 1) == "floor"
    assert game.collectibles == 0
    assert tile_texture(game, 3, 1) == "closeddoor"


def test_player_on_door_with_items_left():
    game = Game(["111111", "1PEC01", "111111"], bonus=True)
    game.move(Direction.RIGHT)
    assert game.player == (2, 1)
    assert tile_texture(game, 2, 1) == "playerondoor"
    assert player_texture(game) is None


def test_bonus_opened_door_and_enemy():
    game = Game(BONUS_ROWS, bonus=True)
    assert tile_texture(game, 3, 1) == "enemy"
    assert tile_texture(game, 4, 1) == "closeddoor"
    game.move(Direction.RIGHT)
    assert tile_texture(game, 4, 1) == "openeddoor"


def test_enemy_not_drawn_in_base_mode():
    game = Game(BONUS_ROWS, bonus=False)
    assert tile_texture(game, 3, 1) is None


def test_player_texture_on_floor():
    game = Game(ROWS)
    assert player_texture(game) == "player"


def test_moves_label():
    assert moves_label(0) == "Moves: 0"
    assert moves_label(42).endswith("42")


def test_texture_names_used_belong_to_their_sets():
    base_game = Game(ROWS)
    assert _used_textures(base_game, ROWS) <= set(BASE_TEXTURES)

    bonus_game = Game(BONUS_ROWS, bonus=True)
    bonus_game.move(Direction.RIGHT)
    used = _used_textures(bonus_game, BONUS_ROWS)
    assert used <= set(BONUS_TEXTURES)
    assert {"openeddoor", "enemy"} <= used


def test_textures_lookup_present_and_missing_name():
    wall = pygame.Surface((TILE_SIZE, TILE_SIZE))
    textures = Textures({"walls": wall})
    assert textures["walls"] is wall
    with pytest.raises(KeyError):
        textures["floor"]


def test_load_missing_directory(tmp_path):
    with pytest.raises(OSError):
        Textures.load(tmp_path / "missing")


def test_draw_places_tiles_and_player():
    game = Game(ROWS)
    textures = _textures()
    surface = pygame.Surface(window_size(ROWS))
    draw(surface, game, textures)
    assert _color_at(surface, 0, 0) == _tex_color(textures, "walls")
    assert _color_at(surface, 1, 1) == _tex_color(textures, "player")
    assert _color_at(surface, 2, 1) == _tex_color(textures, "keyscollect")
    assert _color_at(surface, 3, 1) == _tex_color(textures, "closeddoor")


def test_draw_bonus_shows_moves_label():
    game = Game(BONUS_ROWS, bonus=True)
    textures = _textures()
    surface = pygame.Surface(window_size(BONUS_ROWS))
    draw(surface, game, textures)
    region = [
        tuple(surface.get_at((x, y)))[:3]
        for x in range(10, 70)
        for y in range(10, 30)
    ]
    assert LABEL_COLOR in region
    assert _color_at(surface, 3, 1) == _tex_color(textures, "enemy")


def test_draw_base_has_no_label():
    game = Game(ROWS)
    textures = _textures()
    surface = pygame.Surface(window_size(ROWS))
    draw(surface, game, textures)
    region = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(0, 70)
        for y in range(0, 30)
    }
    assert region == {_tex_color(textures, "walls")}