"""Command-line entry point: load a map, open a window and play."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from .board import Game, Key, MapError, MoveResult, Tile, read_map
from .formatting import printf, put_endl, put_str
from .render import TILE_SIZE, Renderer, load_textures

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

TEXTURE_DIR = "textures"
WINDOW_TITLE = "So Long"

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def load_game(path: Union[str, Path]) -> Game:
    """Read the map at ``path`` and build a game from it."""
    return Game(read_map(path))


def _fail(message: str) -> int:
    put_str("Error\n", sys.stderr)
    put_endl(message, sys.stderr)
    return 0


def _play(game: Game, renderer: Renderer) -> None:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return
        if event.type != pygame.KEYUP:
            continue
        key = _KEYMAP.get(event.key)
        if key is None:
            continue
        before = game.player
        result = game.handle_key(key)
        if result in (MoveResult.WON, MoveResult.QUIT):
            return
        if game.player != before:
            renderer.draw_tile(Tile.FLOOR, *before)
            renderer.draw_tile(Tile.PLAYER, *game.player)
            pygame.display.flip()


def run(path: Union[str, Path]) -> int:
    """Play the map at ``path`` in a window until it is closed or won."""
    try:
        game = load_game(path)
    except MapError as exc:
        return _fail(str(exc))
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((game.width * TILE_SIZE, game.height * TILE_SIZE))
        except pygame.error:
            return _fail("Failed to create window")
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            textures = load_textures(TEXTURE_DIR)
        except RuntimeError as exc:
            return _fail(str(exc))
        renderer = Renderer(surface, textures)
        renderer.draw_map(game)
        pygame.display.flip()
        _play(game, renderer)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "solong"
        return printf("Usage: %s map.ber\n", prog)
    return run(args[0])


if __name__ == "__main__":
    sys.exit(main())