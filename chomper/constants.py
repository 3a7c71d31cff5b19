"""Board dimensions, window size and the tile layout of the maze."""

from __future__ import annotations

import enum
from dataclasses import dataclass

BOARD_WIDTH = 28
BOARD_HEIGHT = 31
CELL_SIZE = 24

# Cell offset of the grid inside the map texture (3 rows of text above it).
BOARD_OFFSET = (0, 3)

WINDOW_WIDTH = CELL_SIZE * BOARD_WIDTH
# The map texture is 6 cells taller than the grid: 3 above and 3 below.
WINDOW_HEIGHT = CELL_SIZE * (BOARD_HEIGHT + 6)


class TileKind(enum.Enum):
    """What occupies a single cell of the board."""

    EMPTY = enum.auto()
    WALL = enum.auto()
    PELLET = enum.auto()
    POWER_PELLET = enum.auto()
    STARTING_POSITION = enum.auto()


@dataclass(frozen=True)
class MapTile:
    """A board cell; starting positions carry the index of the actor starting there."""

    kind: TileKind
    start: int | None = None

    def __post_init__(self) -> None:
        if (self.kind is TileKind.STARTING_POSITION) != (self.start is not None):
            raise ValueError("only a starting position carries a start index")

    @classmethod
    def from_char(cls, character: str) -> MapTile:
        """Decode one character of the textual board."""
        if character in _STARTING_DIGITS:
            return cls(TileKind.STARTING_POSITION, int(character))
        try:
            return cls(_SIMPLE_TILES[character])
        except KeyError:
            raise ValueError(f"Unknown character in board: {character!r}") from None


_STARTING_DIGITS = frozenset("01234")

_SIMPLE_TILES = {
    "#": TileKind.WALL,
    ".": TileKind.PELLET,
    "o": TileKind.POWER_PELLET,
    " ": TileKind.EMPTY,
    "=": TileKind.EMPTY,
}

EMPTY = MapTile(TileKind.EMPTY)
WALL = MapTile(TileKind.WALL)
PELLET = MapTile(TileKind.PELLET)
POWER_PELLET = MapTile(TileKind.POWER_PELLET)

RAW_BOARD: tuple[str, ...] = (
    "############################",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#o####.#####.##.#####.####o#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.##### ## #####.######",
    "     #.##### ## #####.#     ",
    "     #.##    1     ##.#     ",
    "     #.## ###==### ##.#     ",
    "######.## #      # ##.######",
    "      .   #2 3 4 #   .      ",
    "######.## #      # ##.######",
    "     #.## ######## ##.#     ",
    "     #.##          ##.#     ",
    "     #.## ######## ##.#     ",
    "######.## ######## ##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#o..##.......0 .......##..o#",
    "###.##.##.########.##.##.###",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
)