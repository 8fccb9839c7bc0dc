"""Space shooter: fly the rocket with the arrow keys and shoot meteors with the space bar."""

from __future__ import annotations

import argparse
import random
from dataclasses import astuple, dataclass, field
from pathlib import Path

import pygame

from .frame import Controls, run
from .geometry import Rect, Vector2, check_collision_recs, normalize

WIDTH = 1700
HEIGHT = 1000
STARS_NUM = 40
STAR_SIZE = 50

ROCKET_W = 112
ROCKET_H = 75
ROCKET_SPEED = 800
SHOOT_RELOAD = 0.2

LASER_W = 9
LASER_H = 54
LASER_SPEED = 800

METEOR_W = 101
METEOR_H = 84
METEOR_SPAWN_TIME = 0.5

BACKGROUND = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
STAR_COLOR = (255, 255, 255)
ROCKET_COLOR = (0, 121, 241)
LASER_COLOR = (0, 228, 48)
METEOR_COLOR = (127, 106, 79)


def random_between(rng: random.Random, a: float, b: float) -> float:
    """Pick ``a`` plus a whole number of steps below ``int(b - a + 1)``.

    With fractional bounds the result is offset from ``a`` by whole units only.
    Raises ValueError when the range holds no value.
    """
    span = int(b - a + 1)
    if span <= 0:
        raise ValueError(f"empty range: {a} to {b}")
    return rng.randrange(span) + a


def _rocket_start() -> Rect:
    return Rect(
        float(WIDTH // 2 - ROCKET_W // 2),
        float(HEIGHT - ROCKET_H - 40),
        float(ROCKET_W),
        float(ROCKET_H),
    )


@dataclass
class Rocket:
    """The player's ship."""

    rect: Rect = field(default_factory=_rocket_start)
    direction: Vector2 = field(default_factory=Vector2)

    def update(self, dt: float, controls: Controls) -> None:
        """Fly in the direction of the arrow keys at constant speed, kept on screen."""
        raw = Vector2(
            float(controls.is_down(pygame.K_RIGHT) - controls.is_down(pygame.K_LEFT)),
            float(controls.is_down(pygame.K_DOWN) - controls.is_down(pygame.K_UP)),
        )
        self.direction = normalize(raw)

        self.rect.x += self.direction.x * dt * ROCKET_SPEED
        self.rect.y += self.direction.y * dt * ROCKET_SPEED

        if self.rect.x < 0:
            self.rect.x = 0.0
        if self.rect.x >= WIDTH - ROCKET_W:
            self.rect.x = float(WIDTH - ROCKET_W)
        if self.rect.y < 0:
            self.rect.y = 0.0
        if self.rect.y >= HEIGHT - ROCKET_H:
            self.rect.y = float(HEIGHT - ROCKET_H)


@dataclass
class Laser:
    """A shot travelling straight up."""

    rect: Rect
    active: bool = True

    def update(self, dt: float) -> None:
        """Move up; retire once fully above the top edge."""
        self.rect.y -= LASER_SPEED * dt
        if self.rect.y + LASER_H <= 0:
            self.active = False


@dataclass
class Meteor:
    """A falling rock with its own speed, heading and rotation in degrees."""

    rotation: int
    rect: Rect
    speed: float
    direction: Vector2
    active: bool = True

    def update(self, dt: float) -> None:
        """Move along the heading; retire once past the bottom edge."""
        self.rect.x += self.speed * self.direction.x * dt
        self.rect.y += self.speed * self.direction.y * dt
        if self.rect.y >= HEIGHT:
            self.active = False


class SpaceShooter:
    """The rocket, its shots, the meteors, the star field and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.stars = [
            Vector2(
                float(random_between(self.rng, -10, WIDTH - 30)),
                float(random_between(self.rng, -10, HEIGHT - 30)),
            )
            for _ in range(STARS_NUM)
        ]
        self.rocket = Rocket()
        self.lasers: list[Laser] = []
        self.meteors: list[Meteor] = []
        self.time = 0.0
        self.last_shoot = 0.0
        self.last_meteor = 0.0
        self.score = 0
        self.game_over = False

        self.star_image: pygame.Surface | None = None
        self.rocket_image: pygame.Surface | None = None
        self.laser_image: pygame.Surface | None = None
        self.meteor_image: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.laser_sound: pygame.mixer.Sound | None = None
        self.explosion_sound: pygame.mixer.Sound | None = None
        self._rotated: dict[int, pygame.Surface] = {}

    @staticmethod
    def _play(sound) -> None:
        if sound is not None:
            sound.play()

    def _fire_laser(self) -> None:
        x = self.rocket.rect.x + ROCKET_W // 2 - LASER_W // 2
        y = self.rocket.rect.y
        self.lasers.append(Laser(Rect(x, y, float(LASER_W), float(LASER_H))))
        self._play(self.laser_sound)

    def _spawn_meteor(self) -> None:
        rotation = int(random_between(self.rng, 0, 360))
        x = int(random_between(self.rng, 100, WIDTH - 100))
        y = int(random_between(self.rng, -200, -100))
        speed = int(random_between(self.rng, 400, 500))
        direction = Vector2(float(random_between(self.rng, -0.7, 0.7)), 1.0)
        rect = Rect(float(x), float(y), float(METEOR_W), float(METEOR_H))
        self.meteors.append(Meteor(rotation, rect, float(speed), direction))

    def _handle_rocket(self, dt: float, controls: Controls) -> None:
        self.rocket.update(dt, controls)
        if controls.was_pressed(pygame.K_SPACE) and self.time - self.last_shoot >= SHOOT_RELOAD:
            self._fire_laser()
            self.last_shoot = self.time
        self.score = int(self.time * 10)

    def _handle_lasers(self, dt: float) -> None:
        for laser in self.lasers:
            if not laser.active:
                continue
            laser.update(dt)
            # A laser keeps checking the remaining meteors after its first hit.
            for meteor in self.meteors:
                if meteor.active and check_collision_recs(laser.rect, meteor.rect):
                    meteor.active = False
                    laser.active = False
                    self._play(self.explosion_sound)

    def _handle_meteors(self, dt: float) -> None:
        for meteor in self.meteors:
            if not meteor.active:
                continue
            meteor.update(dt)
            if check_collision_recs(self.rocket.rect, meteor.rect):
                self.game_over = True

        if self.time - self.last_meteor >= METEOR_SPAWN_TIME:
            self._spawn_meteor()
            self.last_meteor = self.time

    def update(self, dt: float, controls: Controls) -> bool | None:
        """Advance one frame; return False once the rocket has been hit."""
        if self.game_over:
            return False
        self.time += dt
        self._handle_rocket(dt, controls)
        self._handle_lasers(dt)
        self._handle_meteors(dt)
        return None

    def _meteor_sprite(self, rotation: int) -> pygame.Surface | None:
        if self.meteor_image is None:
            return None
        if rotation not in self._rotated:
            self._rotated[rotation] = pygame.transform.rotate(self.meteor_image, -rotation)
        return self._rotated[rotation]

    def _score_font(self) -> pygame.font.Font:
        if self.font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, 80)
        return self.font

    def draw(self, surface: pygame.Surface) -> None:
        """Draw stars, rocket, lasers, meteors and the score."""
        for star in self.stars:
            if self.star_image is not None:
                surface.blit(self.star_image, (int(star.x), int(star.y)))
            else:
                pygame.draw.circle(surface, STAR_COLOR, (int(star.x) + 15, int(star.y) + 15), 2)

        if self.rocket_image is not None:
            surface.blit(self.rocket_image, (int(self.rocket.rect.x), int(self.rocket.rect.y)))
        else:
            pygame.draw.rect(surface, ROCKET_COLOR, astuple(self.rocket.rect))

        for laser in self.lasers:
            if not laser.active:
                continue
            if self.laser_image is not None:
                surface.blit(self.laser_image, (int(laser.rect.x), int(laser.rect.y)))
            else:
                pygame.draw.rect(surface, LASER_COLOR, astuple(laser.rect))

        for meteor in self.meteors:
            if not meteor.active:
                continue
            sprite = self._meteor_sprite(meteor.rotation)
            if sprite is not None:
                surface.blit(sprite, (int(meteor.rect.x), int(meteor.rect.y)))
            else:
                pygame.draw.rect(surface, METEOR_COLOR, astuple(meteor.rect))

        text = self._score_font().render(str(self.score), True, TEXT_COLOR)
        surface.blit(text, (WIDTH // 2 - 50, 100))


def _load_assets(game: SpaceShooter, assets: Path) -> pygame.mixer.Sound:
    images = assets / "images"
    audio = assets / "audio"
    game.star_image = pygame.image.load(str(images / "star.png"))
    game.rocket_image = pygame.image.load(str(images / "player.png"))
    game.laser_image = pygame.image.load(str(images / "laser.png"))
    game.meteor_image = pygame.image.load(str(images / "meteor.png"))
    pygame.font.init()
    game.font = pygame.font.Font(str(images / "Oxanium-Bold.ttf"), 80)
    pygame.mixer.init()
    game.laser_sound = pygame.mixer.Sound(str(audio / "laser.wav"))
    game.explosion_sound = pygame.mixer.Sound(str(audio / "explosion.wav"))
    return pygame.mixer.Sound(str(audio / "game_music.wav"))


def main(argv=None) -> None:
    """Open the space shooter window."""
    parser = argparse.ArgumentParser(prog="space-shooter", description="Shoot down the meteors.")
    parser.add_argument(
        "--assets",
        type=Path,
        help="directory holding images/ and audio/; plain shapes and silence are used without it",
    )
    args = parser.parse_args(argv)

    game = SpaceShooter()
    if args.assets is not None:
        music = _load_assets(game, args.assets)
        music.play()
    run("Space Shooter", WIDTH, HEIGHT, game, BACKGROUND)