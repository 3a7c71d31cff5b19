"""The player-controlled actor and the interface shared by board actors."""

from __future__ import annotations

import abc
import logging

import pygame

from .animation import AnimatedTexture
from .board import Map, cell_to_pixel
from .constants import BOARD_OFFSET, CELL_SIZE, EMPTY, WALL, MapTile
from .direction import Direction
from .modulation import SimpleTickModulator

logger = logging.getLogger(__name__)


class Entity(abc.ABC):
    """Something that lives on the board and moves each tick."""

    position: tuple[int, int]

    @abc.abstractmethod
    def is_colliding(self, other: Entity) -> bool:
        """Whether this entity touches the other one."""

    @abc.abstractmethod
    def cell_position(self) -> tuple[int, int]:
        """The grid cell the entity is in."""

    @abc.abstractmethod
    def internal_position(self) -> tuple[int, int]:
        """The pixel offset of the entity within its cell."""

    @abc.abstractmethod
    def tick(self) -> None:
        """Advance the entity by one game tick."""


class Pacman(Entity):
    """The player: moves along corridors and turns when the way is clear."""

    def __init__(
        self, starting_position: tuple[int, int], atlas: pygame.Surface, board: Map
    ) -> None:
        self.position = cell_to_pixel(starting_position)
        self.direction = Direction.RIGHT
        self.next_direction: Direction | None = None
        self.stopped = False
        self.speed = 3
        self._map = board
        self._modulation = SimpleTickModulator(1.0)
        self.sprite = AnimatedTexture(atlas, 2, 3, 32, 32, (-4, -4))

    def is_colliding(self, other: Entity) -> bool:
        return self.position == other.position

    def cell_position(self) -> tuple[int, int]:
        x, y = self.position
        return (x // CELL_SIZE - BOARD_OFFSET[0], y // CELL_SIZE - BOARD_OFFSET[1])

    def internal_position(self) -> tuple[int, int]:
        x, y = self.position
        return (x % CELL_SIZE, y % CELL_SIZE)

    def next_cell(self, direction: Direction | None = None) -> tuple[int, int]:
        """The cell one step away, in the given direction or the current one."""
        dx, dy = (direction or self.direction).offset()
        x, y = self.cell_position()
        return (x + dx, y + dy)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the sprite; when stopped, the animation settles on its last frame."""
        if self.stopped:
            self.sprite.render_until(surface, self.position, self.direction, 2)
        else:
            self.sprite.render(surface, self.position, self.direction)

    def tick(self) -> None:
        if self._internal_position_even() == (0, 0):
            self._handle_requested_direction()
            blocked = self._tile_at(self.next_cell()) == WALL
            if not self.stopped and blocked:
                logger.debug("Wall collision. Stopping.")
                self.stopped = True
            elif self.stopped and not blocked:
                logger.debug("Wall collision resolved. Moving.")
                self.stopped = False

        if not self.stopped and self._modulation.next():
            dx, dy = self.direction.offset()
            x, y = self.position
            self.position = (x + dx * self.speed, y + dy * self.speed)

    def _tile_at(self, cell: tuple[int, int]) -> MapTile:
        tile = self._map.get_tile(cell)
        return EMPTY if tile is None else tile

    def _handle_requested_direction(self) -> None:
        requested = self.next_direction
        if requested is None:
            return
        if requested == self.direction:
            self.next_direction = None
            return
        if self._tile_at(self.next_cell(requested)) != WALL:
            self.direction = requested
            self.next_direction = None

    def _internal_position_even(self) -> tuple[int, int]:
        x, y = self.internal_position()
        return ((x // 2) * 2, (y // 2) * 2)