"""The window loop shared by the games and the per-frame input snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import pygame

from .geometry import Vector2

FPS = 60

_WATCHED_KEYS = (
    pygame.K_w,
    pygame.K_s,
    pygame.K_a,
    pygame.K_d,
    pygame.K_UP,
    pygame.K_DOWN,
    pygame.K_LEFT,
    pygame.K_RIGHT,
    pygame.K_SPACE,
)


@dataclass(frozen=True)
class Controls:
    """What the player is doing during one frame."""

    down: frozenset[int] = frozenset()
    pressed: frozenset[int] = frozenset()
    mouse: Vector2 = field(default_factory=Vector2)
    clicked: bool = False
    quit: bool = False

    def is_down(self, key: int) -> bool:
        """Return True while the key is held."""
        return key in self.down

    def was_pressed(self, key: int) -> bool:
        """Return True when the key went down during this frame."""
        return key in self.pressed


class _Game(Protocol):
    def update(self, dt: float, controls: Controls) -> bool | None: ...

    def draw(self, surface: pygame.Surface) -> None: ...


def read_controls() -> Controls:
    """Drain the event queue and capture keyboard and mouse state."""
    pressed: set[int] = set()
    clicked = False
    quit_requested = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                quit_requested = True
            pressed.add(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True

    state = pygame.key.get_pressed()
    down = frozenset(key for key in _WATCHED_KEYS if state[key])
    x, y = pygame.mouse.get_pos()
    return Controls(
        down=down,
        pressed=frozenset(pressed),
        mouse=Vector2(float(x), float(y)),
        clicked=clicked,
        quit=quit_requested,
    )


def run(title: str, width: float, height: float, game: _Game, background) -> None:
    """Open a window and drive the game until it is closed.

    The game's update may return False to end the loop.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(width), int(height)))
        pygame.display.set_caption(title)
        clock = pygame.time.Clock()
        dt = 0.0
        while True:
            controls = read_controls()
            if controls.quit:
                break
            if game.update(dt, controls) is False:
                break
            screen.fill(background)
            game.draw(screen)
            pygame.display.flip()
            dt = clock.tick(FPS) / 1000.0
    finally:
        pygame.quit()