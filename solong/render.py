"""Drawing the board with tile textures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .board import Game, Tile  # noqa: E402

TILE_SIZE = 64

_TEXTURE_FILES = {
    Tile.WALL: "bush64.xpm",
    Tile.FLOOR: "floor64.xpm",
    Tile.COLLECTIBLE: "collectible64.xpm",
    Tile.EXIT: "exit64.xpm",
    Tile.PLAYER: "player64.xpm",
}


def load_textures(directory: Union[str, Path]) -> dict[Tile, pygame.Surface]:
    """Load one image per tile kind from ``directory``."""
    base = Path(directory)
    textures: dict[Tile, pygame.Surface] = {}
    for tile, name in _TEXTURE_FILES.items():
        try:
            textures[tile] = pygame.image.load(str(base / name))
        except (pygame.error, OSError) as exc:
            raise RuntimeError("Failed to load textures.") from exc
    return textures


class Renderer:
    """Blits tile textures onto a surface on a grid of TILE_SIZE squares."""

    def __init__(self, surface: pygame.Surface, textures: Mapping[Tile, pygame.Surface]) -> None:
        self.surface = surface
        self.textures = dict(textures)

    def draw_tile(self, tile: str, x: int, y: int) -> None:
        """Draw ``tile`` at grid cell (x, y); unknown tiles draw nothing."""
        try:
            kind = Tile(tile)
        except ValueError:
            return
        texture = self.textures.get(kind)
        if texture is None:
            return
        self.surface.blit(texture, (x * TILE_SIZE, y * TILE_SIZE))

    def draw_map(self, game: Game) -> None:
        """Draw every cell of ``game``, with the player at its current place."""
        for y, row in enumerate(game.grid):
            for x, cell in enumerate(row):
                if (x, y) == game.player:
                    tile = Tile.PLAYER.value
                elif cell == Tile.PLAYER:
                    tile = Tile.FLOOR.value
                else:
                    tile = cell
                self.draw_tile(tile, x, y)