import pygame
import pytest

from chomper.board import cell_to_pixel
from chomper.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from chomper.direction import Direction
from chomper.game import Game

MAP_COLOR = (10, 20, 30)


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def game():
    screen = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    atlas = pygame.Surface((96, 32))
    atlas.fill((200, 200, 200))
    map_texture = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    map_texture.fill(MAP_COLOR)
    return Game(screen, atlas, map_texture)


def test_keyboard_sets_next_direction(game):
    game.keyboard_event(pygame.K_LEFT)
    assert game.pacman.next_direction is Direction.LEFT
    game.keyboard_event(pygame.K_s)
    assert game.pacman.next_direction is Direction.DOWN


def test_unbound_key_clears_next_direction(game):
    game.keyboard_event(pygame.K_UP)
    game.keyboard_event(pygame.K_x)
    assert game.pacman.next_direction is None


def test_space_toggles_debug(game):
    game.keyboard_event(pygame.K_SPACE)
    assert game.debug is True
    game.keyboard_event(pygame.K_SPACE)
    assert game.debug is False


def test_tick_moves_pacman(game):
    x, y = game.pacman.position
    game.tick()
    assert game.pacman.position == (x + game.pacman.speed, y)


def test_draw_renders_map(game):
    game.draw()
    assert _rgb(game.surface, (0, 0)) == MAP_COLOR


def test_draw_debug_grid(game):
    game.keyboard_event(pygame.K_SPACE)
    game.draw()
    wall = cell_to_pixel((0, 0))
    pacman_cell = cell_to_pixel(game.pacman.cell_position())
    next_cell = cell_to_pixel(game.pacman.next_cell())
    assert _rgb(game.surface, wall) == (0, 0, 255)
    assert _rgb(game.surface, pacman_cell) == (0, 255, 255)
    assert _rgb(game.surface, next_cell) == (255, 255, 0)


def test_draw_without_debug_has_no_grid(game):
    game.draw()
    assert _rgb(game.surface, cell_to_pixel((0, 0))) == MAP_COLOR


def test_draw_scales_smaller_map_texture():
    screen = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    small = pygame.Surface((10, 10))
    small.fill(MAP_COLOR)
    game = Game(screen, pygame.Surface((96, 32)), small)
    game.draw()
    assert _rgb(screen, (WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1)) == MAP_COLOR