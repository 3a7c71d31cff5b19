"""One game session: the board, the player and how they are drawn."""

from __future__ import annotations

import itertools

import pygame

from .board import Map, cell_to_pixel
from .constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CELL_SIZE,
    EMPTY,
    RAW_BOARD,
    TileKind,
)
from .direction import Direction
from .pacman import Pacman

_BLACK = (0, 0, 0)
_CYAN = (0, 255, 255)
_YELLOW = (255, 255, 0)

_DEBUG_COLORS = {
    TileKind.WALL: (0, 0, 255),
    TileKind.PELLET: (255, 0, 0),
    TileKind.POWER_PELLET: (255, 0, 255),
    TileKind.STARTING_POSITION: (0, 255, 0),
}


class Game:
    """Holds the game state and draws it onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        pacman_atlas: pygame.Surface,
        map_texture: pygame.Surface,
    ) -> None:
        self.surface = surface
        self.map_texture = map_texture
        self.map = Map(RAW_BOARD)
        self.pacman = Pacman((1, 1), pacman_atlas, self.map)
        self.debug = False

    def keyboard_event(self, keycode: int) -> None:
        """Steer the player; the space bar toggles the debug grid."""
        self.pacman.next_direction = Direction.from_keycode(keycode)
        if keycode == pygame.K_SPACE:
            self.debug = not self.debug

    def tick(self) -> None:
        """Advance the game by one tick."""
        self.pacman.tick()

    def draw(self) -> None:
        """Draw the map, the player and, in debug mode, the tile grid."""
        self.surface.fill(_BLACK)
        background = self.map_texture
        if background.get_size() != self.surface.get_size():
            background = pygame.transform.scale(background, self.surface.get_size())
        self.surface.blit(background, (0, 0))

        self.pacman.render(self.surface)

        if self.debug:
            pacman_cell = self.pacman.cell_position()
            for x, y in itertools.product(range(BOARD_WIDTH), range(BOARD_HEIGHT)):
                if (x, y) == pacman_cell:
                    self._draw_cell((x, y), _CYAN)
                    continue
                tile = self.map.get_tile((x, y)) or EMPTY
                color = _DEBUG_COLORS.get(tile.kind)
                if color is not None:
                    self._draw_cell((x, y), color)
            self._draw_cell(self.pacman.next_cell(), _YELLOW)

    def _draw_cell(self, cell: tuple[int, int], color: tuple[int, int, int]) -> None:
        x, y = cell_to_pixel(cell)
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, CELL_SIZE, CELL_SIZE), 1)