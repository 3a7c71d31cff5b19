"""Movement directions and their keyboard bindings."""

from __future__ import annotations

import enum

import pygame


class Direction(enum.Enum):
    """One of the four directions an actor can face."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()

    def angle(self) -> float:
        """Clockwise rotation in degrees of a sprite drawn facing right."""
        return _ANGLES[self]

    def offset(self) -> tuple[int, int]:
        """Cell offset of one step in this direction."""
        return _OFFSETS[self]

    @classmethod
    def from_keycode(cls, keycode: int) -> Direction | None:
        """Map a pygame key code to a direction, or None if the key is unbound."""
        return _KEY_DIRECTIONS.get(keycode)


_ANGLES = {
    Direction.RIGHT: 0.0,
    Direction.DOWN: 90.0,
    Direction.LEFT: 180.0,
    Direction.UP: 270.0,
}

_OFFSETS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}

_KEY_DIRECTIONS = {
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
}