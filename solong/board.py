"""The game board: reading map files, tiles, and player movement."""

from __future__ import annotations

from enum import Enum, IntEnum
from pathlib import Path
from typing import Iterable, Union

from .formatting import printf
from .linereader import LineReader
from .strings import trim


class Tile(str, Enum):
    """Characters that make up a map."""

    WALL = "1"
    FLOOR = "0"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100


class MoveResult(Enum):
    """Outcome of a move or a key press."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


class MapError(Exception):
    """Raised when a map cannot be read or used."""


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


def read_map(path: Union[str, Path]) -> list[str]:
    """Read a map file into a list of rows without their newlines."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            rows = [trim(line, "\n") for line in LineReader(stream)]
    except OSError as exc:
        raise MapError("Failed to read the map!") from exc
    if not rows:
        raise MapError("Failed to read the map!")
    return rows


class Game:
    """State of a running game: the grid, the player and the counters."""

    def __init__(self, grid: Iterable[str]) -> None:
        self.grid: list[list[str]] = [list(row) for row in grid]
        if not self.grid:
            raise MapError("Map is empty")
        self.height = len(self.grid)
        self.width = len(self.grid[0])
        start = next(
            (
                (x, y)
                for y, row in enumerate(self.grid)
                for x, cell in enumerate(row)
                if cell == Tile.PLAYER
            ),
            None,
        )
        if start is None:
            raise MapError("Map has no player")
        self.player: tuple[int, int] = start
        self.collectibles = sum(row.count(Tile.COLLECTIBLE.value) for row in self.grid)
        self.moves = 0
        self.finished = False

    def tile_at(self, x: int, y: int) -> str:
        """Return the map character at column ``x``, row ``y``."""
        if not 0 <= y < self.height or not 0 <= x < len(self.grid[y]):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by (dx, dy) and report what happened."""
        new_x, new_y = self.player[0] + dx, self.player[1] + dy
        try:
            tile = self.tile_at(new_x, new_y)
        except IndexError:
            return MoveResult.BLOCKED
        if tile == Tile.WALL:
            return MoveResult.BLOCKED
        result = MoveResult.MOVED
        if tile == Tile.COLLECTIBLE:
            self.grid[new_y][new_x] = Tile.FLOOR.value
            self.collectibles -= 1
            result = MoveResult.COLLECTED
        if tile == Tile.EXIT:
            if self.collectibles == 0:
                self.finished = True
                return MoveResult.WON
            return MoveResult.BLOCKED
        self.player = (new_x, new_y)
        self.moves += 1
        printf("You walked %d steps\n", self.moves)
        return result

    def handle_key(self, key: int) -> MoveResult:
        """Act on a key code: Esc quits, W/A/S/D move, others are ignored."""
        try:
            code = Key(key)
        except ValueError:
            return MoveResult.IGNORED
        if code is Key.ESC:
            self.finished = True
            return MoveResult.QUIT
        return self.move(*_DIRECTIONS[code])