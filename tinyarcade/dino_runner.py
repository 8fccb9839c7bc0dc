"""An endless runner: jump over the cacti with the space bar."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .frame import Controls, run
from .geometry import Rect, Vector2, check_collision_recs

logger = logging.getLogger(__name__)

WIDTH = 1400
HEIGHT = 900
GROUND_Y = 800

DINO_W = 500 // 6
DINO_H = 550 // 6
GRAVITY = 6000
JUMP_FORCE = 1900

CACTUS_W = 290 // 5
CACTUS_H = 500 // 5
CACTUS_SPEED = 700
SPAWN_DURATION = 2000

CACTUS_OFFSCREEN_X = -100

BACKGROUND = (255, 255, 255)
INK = (0, 0, 0)
DINO_COLOR = (80, 80, 80)
CACTUS_COLOR = (0, 117, 44)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    surface.blit(pygame.font.Font(None, size).render(text, True, color), (int(x), int(y)))


def _dino_start() -> Vector2:
    return Vector2(200.0, 400.0)


@dataclass
class Dino:
    """The runner: jumps when on the ground and falls under gravity."""

    position: Vector2 = field(default_factory=_dino_start)
    velocity_y: float = 0.0
    on_ground: bool = False

    def update(self, dt: float, controls: Controls) -> None:
        """Jump on space while grounded, then apply gravity and the ground."""
        if controls.was_pressed(pygame.K_SPACE) and self.on_ground:
            self.velocity_y = -JUMP_FORCE
            self.on_ground = False

        self.velocity_y += GRAVITY * dt
        self.position.y += self.velocity_y * dt

        if self.position.y + DINO_H >= GROUND_Y:
            self.position.y = GROUND_Y - DINO_H
            self.velocity_y = 0.0
            self.on_ground = True

    def rect(self) -> Rect:
        """The dino's bounding box."""
        return Rect(self.position.x, self.position.y, DINO_W, DINO_H)


@dataclass
class Cactus:
    """An obstacle sliding leftwards along the ground."""

    position: Vector2
    active: bool = True

    def update(self, dt: float, speed: float) -> None:
        """Slide left; retire once far past the left edge."""
        self.position.x -= speed * dt
        if self.position.x < CACTUS_OFFSCREEN_X:
            self.active = False

    def rect(self) -> Rect:
        """The cactus's bounding box."""
        return Rect(self.position.x, self.position.y, CACTUS_W, CACTUS_H)


class DinoRunner:
    """The dino, the cacti, the pace of the game and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.dino = Dino()
        self.cacti: list[Cactus] = []
        self.game_over = False
        self.last_spawn = 0.0
        self.spawn_duration = float(SPAWN_DURATION)
        self.speed = float(CACTUS_SPEED)
        self.score = 0.0
        self.dino_image: pygame.Surface | None = None
        self.cactus_image: pygame.Surface | None = None

    def spawn_cactus(self) -> Cactus:
        """Add a cactus just beyond the right edge and return it."""
        x = float(self.rng.randint(WIDTH, WIDTH + 200))
        cactus = Cactus(Vector2(x, float(GROUND_Y - CACTUS_H)))
        self.cacti.append(cactus)
        return cactus

    def update(self, dt: float, controls: Controls) -> None:
        """Advance one frame: pace, spawning, the dino and the cacti."""
        if self.game_over:
            return

        # The spawn counter counts frames, while the duration shrinks with time.
        self.last_spawn += 1
        self.spawn_duration -= dt * 20
        self.speed += dt * 5
        self.score += dt * 5
        logger.debug("Duration: %f, Speed: %f", self.spawn_duration, self.speed)
        if self.last_spawn >= self.spawn_duration:
            self.last_spawn = 0.0
            self.spawn_cactus()

        self.dino.update(dt, controls)

        dino_rect = self.dino.rect()
        for cactus in self.cacti:
            if not cactus.active:
                continue
            cactus.update(dt, self.speed)
            if check_collision_recs(dino_rect, cactus.rect()):
                self.game_over = True

    def score_text(self) -> str:
        """The score as shown on screen."""
        return f"Score: {self.score:.1f}"

    def _blit_or_fill(self, surface: pygame.Surface, image, rect: Rect, color) -> None:
        if image is not None:
            surface.blit(image, (int(rect.x), int(rect.y)))
        else:
            pygame.draw.rect(surface, color, (rect.x, rect.y, rect.width, rect.height))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the running scene, or the final score once the game is over."""
        if self.game_over:
            _draw_text(surface, "Game over!", 600, 400, 60, INK)
            _draw_text(surface, self.score_text(), 600, 500, 50, INK)
            return

        ground_y = GROUND_Y + 5
        pygame.draw.line(surface, INK, (0, ground_y), (WIDTH, ground_y), 4)
        self._blit_or_fill(surface, self.dino_image, self.dino.rect(), DINO_COLOR)
        for cactus in self.cacti:
            if cactus.active:
                self._blit_or_fill(surface, self.cactus_image, cactus.rect(), CACTUS_COLOR)
        _draw_text(surface, self.score_text(), 10, 10, 50, INK)


def _load_sprite(path: Path, width: int, height: int) -> pygame.Surface:
    return pygame.transform.scale(pygame.image.load(str(path)), (width, height))


def main(argv=None) -> None:
    """Open the dino runner window."""
    parser = argparse.ArgumentParser(prog="dino-runner", description="Jump over the cacti.")
    parser.add_argument(
        "--assets",
        type=Path,
        help="directory holding dino.png and cactus.png; plain shapes are drawn without it",
    )
    args = parser.parse_args(argv)

    game = DinoRunner()
    if args.assets is not None:
        game.dino_image = _load_sprite(args.assets / "dino.png", DINO_W, DINO_H)
        game.cactus_image = _load_sprite(args.assets / "cactus.png", CACTUS_W, CACTUS_H)
    run("Dino Runner", WIDTH, HEIGHT, game, BACKGROUND)