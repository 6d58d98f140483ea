# solong

A small top-down maze game. You play on a map of tiles read from a `.ber`
file: pick up every collectible, then walk onto the exit to win. Each step
you take is counted and printed to the terminal as `You walked N steps`.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the tiles.

## Playing

```
solong maps/level.ber
```

Run with anything other than exactly one argument, the command prints
`Usage: solong map.ber`.

Controls (acted on when the key is released):

- `W` / `A` / `S` / `D` move up, left, down and right
- `Esc` or closing the window quits

Walls and the edges of the map block movement. Stepping onto a
collectible picks it up and turns its cell into floor. The exit blocks
you while collectibles remain; once all have been picked up, stepping
onto it wins and closes the game.

If the map cannot be read, is empty, or has no player, or if the window
or the textures cannot be set up, the game prints `Error` and a reason
on standard error and stops.

## Map files

A map is a plain text file, one row of tiles per line:

| Character | Meaning      |
|-----------|--------------|
| `1`       | wall         |
| `0`       | floor        |
| `C`       | collectible  |
| `E`       | exit         |
| `P`       | player start |

Example:

```
1111111
1P0C0E1
1111111
```

The window is sized from the first row's width and the number of rows,
at 64 pixels per tile.

## Textures

Tile images are loaded from a `textures` directory in the current working
directory, with these file names: `bush64.xpm` (wall), `floor64.xpm`,
`collectible64.xpm`, `exit64.xpm` and `player64.xpm`.

## What it does not do

The game does not check that a map is well formed beyond needing at least
one row and a player. It does not verify that the map is rectangular or
enclosed by walls, that there is exactly one player and one exit and at
least one collectible, or that every collectible and the exit can be
reached. With several `P` cells, the first one found is the start.
No map files or textures are included.

## Using it as a library

The game logic lives in `solong.board` and needs no display:

```python
from solong.board import Game, Key, read_map

game = Game(read_map("maps/level.ber"))
result = game.move(1, 0)          # a MoveResult: BLOCKED, MOVED, COLLECTED, WON
result = game.handle_key(Key.D)   # also QUIT for Key.ESC, IGNORED for other codes
print(game.tile_at(1, 1), game.player, game.moves, game.collectibles, game.finished)
```

`read_map` and `Game` raise `solong.board.MapError` when the map is
unusable.

Other modules:

- `solong.render`: `load_textures(directory)` and `Renderer`, which draws
  a `Game` onto a pygame surface.
- `solong.cli`: `load_game(path)`, `run(path)` and `main(argv=None)`,
  which start the full game from a map path.
- `solong.linereader`: `LineReader`, reading lines from a text or binary
  stream a fixed number of units at a time.
- `solong.strings`: bounded and character-oriented string helpers
  (`split`, `find_char`, `rfind_char`, `find_within`, `compare_n`,
  `copy_bounded`, `concat_bounded`, `map_indexed`, `trim`, `substr`).
- `solong.chars`: ASCII classification and case conversion, plus `atoi`
  (32-bit wrapping) and `itoa`.
- `solong.formatting`: `sprintf`/`printf` with `%c %s %p %d %i %u %x %X %%`,
  and `put_str`, `put_endl`, `put_nbr`.

## Running the tests

```
pip install .[test]
pytest
```