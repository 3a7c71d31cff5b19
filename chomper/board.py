"""The maze grid built from its textual layout."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import (
    BOARD_HEIGHT,
    BOARD_OFFSET,
    BOARD_WIDTH,
    CELL_SIZE,
    EMPTY,
    RAW_BOARD,
    MapTile,
)


class Map:
    """A BOARD_WIDTH x BOARD_HEIGHT grid of tiles."""

    def __init__(self, raw_board: Iterable[str] = RAW_BOARD) -> None:
        lines = tuple(raw_board)
        if len(lines) != BOARD_HEIGHT:
            raise ValueError(
                f"board must have {BOARD_HEIGHT} lines, got {len(lines)}"
            )
        self._tiles: dict[tuple[int, int], MapTile] = {
            (x, y): MapTile.from_char(character)
            for y, line in enumerate(lines)
            for x, character in enumerate(line[:BOARD_WIDTH])
        }

    def get_tile(self, cell: tuple[int, int]) -> MapTile | None:
        """The tile at a cell, or None if the cell lies off the board."""
        x, y = cell
        if not (0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT):
            return None
        return self._tiles.get((x, y), EMPTY)


def cell_to_pixel(cell: tuple[int, int]) -> tuple[int, int]:
    """Top-left pixel of a grid cell in window coordinates."""
    x, y = cell
    return (
        (x + BOARD_OFFSET[0]) * CELL_SIZE,
        (y + BOARD_OFFSET[1]) * CELL_SIZE,
    )