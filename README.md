# chomper

A small maze-chasing arcade game drawn with pygame. You steer the chomper
around a classic 28 × 31 tile maze. It keeps moving in its current direction
until it hits a wall. It turns as soon as the cell in the requested direction
is open.

## Installing

```
pip install .
```

The game loads two images from an assets directory:

- `map.png` for the maze
- `32/pacman.png` for the sprite sheet, which holds three 32 × 32 frames side by side

By default the directory is `assets/` in the working directory. You can choose
another one with `--assets`.

## Playing

```
chomper
chomper --assets path/to/assets
```

| Key                     | Action                             |
|-------------------------|------------------------------------|
| Arrow keys or W/A/S/D   | Change direction                   |
| Space                   | Toggle the debug grid overlay      |
| P                       | Pause / unpause                    |
| Escape or Q             | Quit                               |

The game runs at 60 ticks per second and logs at debug level. Every 3600
ticks (about a minute), it logs timing averages: frames per second, time spent
sleeping and time spent processing. When a frame overruns its time, a warning
is logged.

The debug overlay outlines each maze cell by tile type:

- walls in blue
- pellets in red
- power pellets in magenta
- starting positions in green

The cell the chomper occupies is outlined in cyan. The cell it is heading
into is outlined in yellow.

## Using the pieces

The maze and movement logic do not need a window. You can use them on their
own:

```python
from chomper.board import Map, cell_to_pixel
from chomper.direction import Direction
from chomper.helper import is_adjacent
from chomper.modulation import SimpleTickModulator

board = Map()
print(board.get_tile((0, 0)))       # a wall tile
print(board.get_tile((99, 0)))      # None: off the board
print(cell_to_pixel((1, 1)))        # (24, 96)
print(Direction.LEFT.offset())      # (-1, 0)
print(is_adjacent((1, 1), (1, 2), False))  # True

modulator = SimpleTickModulator(0.5)
print([modulator.next() for _ in range(4)])  # [True, False, True, False]
```

`chomper.app.FrameStats` gathers per-frame sleep times and returns a
`TimingAverages` at the end of each averaging period.

## What it does not do

Only the player moves on the board. There are no ghosts, pellets are not
eaten, and there is no score, no lives, no levels and no sound. The tiles
marked as starting positions are read from the maze but used only by the
debug overlay.

## Running the tests

```
pip install ".[test]"
pytest
```