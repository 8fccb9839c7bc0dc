"""A red circle that follows the mouse pointer."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

import pygame

from .frame import Controls, run
from .geometry import Vector2

WIDTH = 1300
HEIGHT = 800
RADIUS = 20
CIRCLE_COLOR = (230, 41, 55)
BACKGROUND = (0, 0, 0)


@dataclass
class MouseCircle:
    """The circle and where it is drawn."""

    position: Vector2 = field(default_factory=Vector2)

    def update(self, dt: float, controls: Controls) -> None:
        """Move the circle to the mouse pointer."""
        self.position = Vector2(controls.mouse.x, controls.mouse.y)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the circle."""
        center = (int(self.position.x), int(self.position.y))
        pygame.draw.circle(surface, CIRCLE_COLOR, center, RADIUS)


def main(argv=None) -> None:
    """Open the mouse circle window."""
    argparse.ArgumentParser(prog="mouse-circle", description="A circle that follows the mouse.").parse_args(argv)
    run("Mouse Circle", WIDTH, HEIGHT, MouseCircle(), BACKGROUND)