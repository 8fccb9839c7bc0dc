import pygame
import pytest

from tinyarcade import flappy_cube
from tinyarcade.flappy_cube import Cube
from tinyarcade.frame import Controls
from tinyarcade.geometry import Rect


def test_starts_centered_and_still():
    cube = Cube()
    assert cube.rect == Rect(560.0, 410.0, 80.0, 80.0)
    assert cube.velocity_y == 0.0


def test_space_jumps():
    cube = Cube()
    cube.update(0.0, Controls(pressed=frozenset({pygame.K_SPACE})))
    assert cube.velocity_y == -flappy_cube.JUMP_FORCE + flappy_cube.GRAVITY


def test_jump_moves_cube_up():
    cube = Cube()
    start = cube.rect.y
    cube.update(0.01, Controls(pressed=frozenset({pygame.K_SPACE})))
    assert cube.rect.y < start


def test_gravity_accumulates_per_frame():
    cube = Cube()
    cube.update(0.0, Controls())
    cube.update(0.0, Controls())
    assert cube.velocity_y == 2 * flappy_cube.GRAVITY


def test_left_and_right():
    cube = Cube()
    start = cube.rect.x
    cube.update(0.1, Controls(down=frozenset({pygame.K_LEFT})))
    assert cube.rect.x == pytest.approx(start - flappy_cube.SPEED * 0.1)
    cube.update(0.1, Controls(down=frozenset({pygame.K_RIGHT})))
    assert cube.rect.x == pytest.approx(start)


def test_left_and_right_together_cancel():
    cube = Cube()
    start = cube.rect.x
    cube.update(0.1, Controls(down=frozenset({pygame.K_LEFT, pygame.K_RIGHT})))
    assert cube.rect.x == pytest.approx(start)


def test_floor_stops_the_fall():
    cube = Cube()
    cube.velocity_y = 5000.0
    cube.update(1.0, Controls())
    assert cube.rect.y == flappy_cube.HEIGHT - flappy_cube.CUBE_HEIGHT
    assert cube.velocity_y == 0.0


def test_draw_paints_cube():
    cube = Cube()
    surface = pygame.Surface((flappy_cube.WIDTH, flappy_cube.HEIGHT))
    cube.draw(surface)
    inside = (int(cube.rect.x) + 10, int(cube.rect.y) + 10)
    assert tuple(surface.get_at(inside))[:3] == flappy_cube.CUBE_COLOR
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)