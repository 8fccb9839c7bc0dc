"""A ball bouncing around the edges of the window."""

from __future__ import annotations

import argparse
import random

import pygame

from .frame import Controls, run
from .geometry import Vector2

WIDTH = 1200
HEIGHT = 800
RADIUS = 20
SPEED = 600
BALL_COLOR = (112, 31, 126)
BACKGROUND = (245, 245, 245)
_OPTIONS = (-1, 1)


class BouncingBall:
    """The ball's position and direction of travel."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.center = Vector2(float(WIDTH // 2), float(HEIGHT // 2))
        self.direction = Vector2(float(self.rng.choice(_OPTIONS)), float(self.rng.choice(_OPTIONS)))

    def update(self, dt: float, controls: Controls) -> None:
        """Move the ball and turn it away from any edge it reached."""
        self.center.x += self.direction.x * SPEED * dt
        self.center.y += self.direction.y * SPEED * dt

        if self.center.x - RADIUS <= 0:
            self.direction.x = 1.0
        if self.center.x + RADIUS >= WIDTH:
            self.direction.x = -1.0
        if self.center.y - RADIUS <= 0:
            self.direction.y = 1.0
        if self.center.y + RADIUS >= HEIGHT:
            self.direction.y = -1.0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball."""
        pygame.draw.circle(surface, BALL_COLOR, (int(self.center.x), int(self.center.y)), RADIUS)


def main(argv=None) -> None:
    """Open the bouncing ball window."""
    argparse.ArgumentParser(prog="bouncing-ball", description="A bouncing ball.").parse_args(argv)
    run("Bouncing Ball", WIDTH, HEIGHT, BouncingBall(), BACKGROUND)