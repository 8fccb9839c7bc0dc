"""A square moving through a field of circles with a following, zoomable camera."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

import pygame

from .frame import Controls, run
from .geometry import Vector2

SCREEN_W = 1500
SCREEN_H = 1000
LEN = 100
SIZE = 80
SPEED = 500
MAX_ZOOM = 3.0
MIN_ZOOM = 0.5

BACKGROUND = (255, 255, 255)
PLAYER_COLOR = (211, 176, 131)
COLORS = (
    (230, 41, 55),
    (0, 121, 241),
    (102, 191, 255),
    (127, 106, 79),
    (0, 0, 0),
    (253, 249, 0),
    (255, 161, 0),
    (0, 228, 48),
    (200, 122, 255),
    (130, 130, 130),
    (0, 158, 47),
    (255, 203, 0),
)


@dataclass
class Circle:
    """A coloured disc placed in the world."""

    color: tuple[int, int, int]
    center: Vector2
    radius: float


def create_circles(rng: random.Random) -> list[Circle]:
    """Scatter circles of random colour and size around the origin."""
    circles = []
    for _ in range(LEN):
        color = COLORS[rng.randrange(len(COLORS))]
        center = Vector2(float(rng.randint(-2000, 2000)), float(rng.randint(-2000, 2000)))
        radius = float(rng.randint(30, 180))
        circles.append(Circle(color, center, radius))
    return circles


def _start() -> Vector2:
    return Vector2(float(SCREEN_W // 2 - SIZE // 2), float(SCREEN_H // 2 - SIZE // 2))


class CameraScene:
    """The player square, the circles and a camera that follows the square."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.circles = create_circles(self.rng)
        self.position = _start()
        self.direction = Vector2()
        self.target = Vector2(self.position.x, self.position.y)
        self.offset = _start()
        self.zoom = 1.0

    def update(self, dt: float, controls: Controls) -> None:
        """Move the square, follow it with the camera and zoom on W and S."""
        # Diagonal moves are deliberately left unnormalized.
        self.direction = Vector2(
            float(controls.is_down(pygame.K_RIGHT) - controls.is_down(pygame.K_LEFT)),
            float(controls.is_down(pygame.K_DOWN) - controls.is_down(pygame.K_UP)),
        )
        self.position.x += self.direction.x * dt * SPEED
        self.position.y += self.direction.y * dt * SPEED
        self.target = Vector2(self.position.x, self.position.y)

        if controls.is_down(pygame.K_w) and self.zoom <= MAX_ZOOM:
            self.zoom += dt
        if controls.is_down(pygame.K_s) and self.zoom >= MIN_ZOOM:
            self.zoom -= dt

    def _to_screen(self, point: Vector2) -> tuple[int, int]:
        x = (point.x - self.target.x) * self.zoom + self.offset.x
        y = (point.y - self.target.y) * self.zoom + self.offset.y
        return int(x), int(y)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the circles and the square as seen through the camera."""
        for circle in self.circles:
            center = self._to_screen(Vector2(int(circle.center.x), int(circle.center.y)))
            radius = max(1, int(circle.radius * self.zoom))
            pygame.draw.circle(surface, circle.color, center, radius)
        x, y = self._to_screen(self.position)
        side = max(1, int(SIZE * self.zoom))
        pygame.draw.rect(surface, PLAYER_COLOR, (x, y, side, side))


def main(argv=None) -> None:
    """Open the camera movement window."""
    argparse.ArgumentParser(prog="camera-movement", description="Move around a world of circles.").parse_args(argv)
    run("Camera Movement", SCREEN_W, SCREEN_H, CameraScene(), BACKGROUND)