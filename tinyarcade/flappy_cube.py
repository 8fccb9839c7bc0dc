"""A cube that falls under gravity and jumps on the space bar."""

from __future__ import annotations

import argparse
from dataclasses import astuple, dataclass, field

import pygame

from .frame import Controls, run
from .geometry import Rect

WIDTH = 1200
HEIGHT = 900
CUBE_WIDTH = 80
CUBE_HEIGHT = 80
GRAVITY = 2
JUMP_FORCE = 1200
SPEED = 600

CUBE_COLOR = (253, 249, 0)
BACKGROUND = (0, 0, 0)


def _start_rect() -> Rect:
    return Rect(
        float(WIDTH // 2 - CUBE_WIDTH // 2),
        float(HEIGHT // 2 - CUBE_HEIGHT // 2),
        float(CUBE_WIDTH),
        float(CUBE_HEIGHT),
    )


@dataclass
class Cube:
    """The player cube and its vertical velocity."""

    rect: Rect = field(default_factory=_start_rect)
    velocity_y: float = 0.0

    def update(self, dt: float, controls: Controls) -> None:
        """Apply input, gravity and the floor for one frame."""
        if controls.was_pressed(pygame.K_SPACE):
            self.velocity_y = -JUMP_FORCE
        if controls.is_down(pygame.K_LEFT):
            self.rect.x -= SPEED * dt
        if controls.is_down(pygame.K_RIGHT):
            self.rect.x += SPEED * dt

        # Gravity is added once per frame, whatever the frame time.
        self.velocity_y += GRAVITY
        self.rect.y += self.velocity_y * dt

        if self.rect.y + CUBE_HEIGHT > HEIGHT:
            self.rect.y = HEIGHT - CUBE_HEIGHT
            self.velocity_y = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the cube."""
        pygame.draw.rect(surface, CUBE_COLOR, astuple(self.rect))


def main(argv=None) -> None:
    """Open the flappy cube window."""
    argparse.ArgumentParser(prog="flappy-cube", description="A jumping cube.").parse_args(argv)
    run("Flappy Cube", WIDTH, HEIGHT, Cube(), BACKGROUND)