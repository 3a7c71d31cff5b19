import pygame
import pytest

from chomper.board import Map, cell_to_pixel
from chomper.constants import WALL
from chomper.direction import Direction
from chomper.pacman import Entity, Pacman


@pytest.fixture
def atlas():
    surface = pygame.Surface((96, 32))
    surface.fill((255, 0, 0))
    return surface


@pytest.fixture
def board():
    return Map()


@pytest.fixture
def pacman(atlas, board):
    return Pacman((1, 1), atlas, board)


def test_starts_at_cell(pacman):
    assert pacman.position == cell_to_pixel((1, 1))
    assert pacman.cell_position() == (1, 1)
    assert pacman.internal_position() == (0, 0)
    assert pacman.direction is Direction.RIGHT
    assert pacman.next_direction is None
    assert pacman.stopped is False


def test_tick_moves_by_speed(pacman):
    x, y = pacman.position
    pacman.tick()
    assert pacman.position == (x + pacman.speed, y)


def test_next_cell_uses_current_or_given_direction(pacman):
    assert pacman.next_cell() == (2, 1)
    assert pacman.next_cell(Direction.UP) == (1, 0)


def test_turn_into_wall_is_kept_pending(pacman):
    pacman.next_direction = Direction.UP
    pacman.tick()
    assert pacman.direction is Direction.RIGHT
    assert pacman.next_direction is Direction.UP


def test_turn_into_open_cell(pacman):
    x, y = pacman.position
    pacman.next_direction = Direction.DOWN
    pacman.tick()
    assert pacman.direction is Direction.DOWN
    assert pacman.next_direction is None
    assert pacman.position == (x, y + pacman.speed)


def test_request_for_current_direction_is_cleared(pacman):
    pacman.next_direction = Direction.RIGHT
    pacman.tick()
    assert pacman.next_direction is None
    assert pacman.direction is Direction.RIGHT


def _run_into_wall(pacman):
    for _ in range(500):
        pacman.tick()
        if pacman.stopped:
            break


def test_stops_at_wall(pacman, board):
    _run_into_wall(pacman)
    assert pacman.stopped
    assert board.get_tile(pacman.next_cell()) == WALL
    position = pacman.position
    pacman.tick()
    assert pacman.position == position


def test_stop_resolves_after_turning(pacman, board):
    _run_into_wall(pacman)
    assert pacman.stopped
    pacman.next_direction = Direction.DOWN
    pacman.tick()
    assert pacman.stopped is False
    assert pacman.direction is Direction.DOWN
    assert board.get_tile(pacman.next_cell()) != WALL


def test_collision(atlas, board, pacman):
    same = Pacman((1, 1), atlas, board)
    other = Pacman((1, 5), atlas, board)
    assert pacman.is_colliding(same)
    assert not pacman.is_colliding(other)


def test_render_draws_sprite_and_animates(pacman):
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    pacman.render(surface)
    pacman.render(surface)
    x, y = pacman.position
    assert tuple(surface.get_at((x + 12, y + 12)))[:3] == (255, 0, 0)
    assert pacman.sprite.current_frame() == 1


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity()