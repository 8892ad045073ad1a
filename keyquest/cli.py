"""Command-line entry points: check arguments, load a map and play it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import pygame

from keyquest.game import Game, Outcome
from keyquest.mapfile import MapError, read_map, validate_map
from keyquest.render import Textures, draw, window_size

DEFAULT_TEXTURE_DIR = "textures"
WINDOW_TITLE = "keyquest"


def check_arguments(argv: Sequence[str]) -> Path:
    """Return the map path named by ``argv``.

    Raises ValueError unless exactly one argument is given, FileNotFoundError
    if the file does not exist and PermissionError if it cannot be read.
    """
    if len(argv) != 1:
        raise ValueError("give me a file!")
    path = Path(argv[0])
    if not path.exists():
        raise FileNotFoundError(f"map file {path} doesn't exist")
    if not os.access(path, os.R_OK):
        raise PermissionError(f"map file {path} isn't readable")
    return path


def load_game(path: str | PathLike[str], bonus: bool = False) -> Game:
    """Read and validate a map file and start a game on it.

    Raises OSError if the file cannot be read and MapError if the map
    cannot be played.
    """
    rows = read_map(path)
    validate_map(rows, allow_enemies=bonus)
    return Game(rows, bonus)


def run(game: Game, texture_dir: str | PathLike[str] = DEFAULT_TEXTURE_DIR) -> Outcome:
    """Open a window and play ``game`` until it is won, lost or closed.

    Raises OSError if a texture cannot be loaded.
    """
    textures = Textures.load(texture_dir, game.bonus)
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game.rows))
        pygame.display.set_caption(WINDOW_TITLE)
        draw(screen, game, textures)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return Outcome.QUIT
            if event.type != pygame.KEYDOWN:
                continue
            outcome = game.handle_key(pygame.key.name(event.key))
            if outcome.finished:
                if outcome.message is not None:
                    print(outcome.message)
                return outcome
            if outcome is Outcome.MOVED:
                draw(screen, game, textures)
                pygame.display.flip()
    finally:
        pygame.quit()


def _report(error: Exception) -> int:
    print(f"Error {error}", file=sys.stderr)
    return 1


def _main(argv: Sequence[str] | None, bonus: bool) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_arguments(args)
        game = load_game(path, bonus)
    except (ValueError, OSError) as exc:
        return _report(exc)
    try:
        run(game, DEFAULT_TEXTURE_DIR)
    except OSError as exc:
        return _report(exc)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play a map given on the command line; return the exit status."""
    return _main(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play a map with enemies and an on-screen move counter."""
    return _main(argv, bonus=True)


if __name__ == "__main__":
    raise SystemExit(main())