"""Breakout: clear the wall of bricks with the ball, steering the paddle with the arrow keys."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import astuple, dataclass, field

import pygame

from .frame import Controls, run
from .geometry import Rect, Vector2, check_collision_circle_rec

WIDTH = 1400.0
HEIGHT = 900.0

PADDLE_W = 160.0
PADDLE_H = 10.0
PADDLE_SPEED = 1000

BRICK_ROWS = 4
BRICK_COLS = 10
BRICK_W = 140.0
BRICK_H = 50
TOP_OFFSET = 80.0
PADDING = 10.0

BALL_SPEED = 600.0
BALL_RADIUS = 20.0

START_LIVES = 3

BACKGROUND = (0, 0, 0)
PADDLE_COLOR = (200, 200, 200)
BALL_COLOR = (230, 41, 55)
LABEL_COLOR = (0, 228, 48)
TEXT_COLOR = (255, 255, 255)
BRICK_COLORS = (
    (102, 191, 255),
    (0, 121, 241),
    (253, 249, 0),
    (255, 161, 0),
    (127, 106, 79),
)
_DIRECTIONS = (-1.0, 1.0)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    surface.blit(pygame.font.Font(None, size).render(text, True, color), (int(x), int(y)))


def _paddle_start() -> Rect:
    return Rect(WIDTH / 2 - PADDLE_W / 2, HEIGHT - PADDLE_H - 20, PADDLE_W, PADDLE_H)


def _screen_center() -> Vector2:
    return Vector2(WIDTH / 2, HEIGHT / 2)


def _start_speed() -> Vector2:
    return Vector2(BALL_SPEED, BALL_SPEED)


@dataclass
class Paddle:
    """The player's paddle at the bottom of the screen."""

    rect: Rect = field(default_factory=_paddle_start)
    direction: Vector2 = field(default_factory=Vector2)

    def update(self, dt: float, controls: Controls) -> None:
        """Move with the arrow keys, staying inside the window."""
        if controls.is_down(pygame.K_LEFT):
            self.direction.x = -1.0
        elif controls.is_down(pygame.K_RIGHT):
            self.direction.x = 1.0
        else:
            self.direction.x = 0.0

        self.rect.x += self.direction.x * dt * PADDLE_SPEED

        if self.rect.x <= 0:
            self.rect.x = 0.0
        if self.rect.x + PADDLE_W >= WIDTH:
            self.rect.x = WIDTH - PADDLE_W

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the paddle."""
        pygame.draw.rect(surface, PADDLE_COLOR, astuple(self.rect))


@dataclass
class Brick:
    """One brick of the wall; inactive bricks have been knocked out."""

    rect: Rect
    color: tuple[int, int, int]
    active: bool = True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the brick."""
        pygame.draw.rect(surface, self.color, astuple(self.rect))


@dataclass
class Ball:
    """The ball, its direction of travel and its speed along each axis."""

    direction: Vector2
    position: Vector2 = field(default_factory=_screen_center)
    speed: Vector2 = field(default_factory=_start_speed)

    def update(self, dt: float, paddle: Paddle) -> bool:
        """Move and bounce the ball; return True once it has fallen past the bottom."""
        self.position.x += self.direction.x * dt * self.speed.x
        self.position.y += self.direction.y * dt * self.speed.y

        if self.position.y - BALL_RADIUS <= 0:
            self.direction.y *= -1
        if self.position.x - BALL_RADIUS <= 0 or self.position.x + BALL_RADIUS >= WIDTH:
            self.direction.x *= -1
        if check_collision_circle_rec(self.position, BALL_RADIUS, paddle.rect):
            # Where the ball meets the paddle decides its horizontal speed.
            relative_x = (self.position.x - (paddle.rect.x + PADDLE_W / 2)) / (PADDLE_W / 2)
            magnitude = math.hypot(self.speed.x, self.speed.y)
            self.speed.x = relative_x * magnitude
            self.direction.y *= -1

        return self.position.y + BALL_RADIUS >= HEIGHT

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ball."""
        center = (int(self.position.x), int(self.position.y))
        pygame.draw.circle(surface, BALL_COLOR, center, int(BALL_RADIUS))


def generate_bricks() -> list[list[Brick]]:
    """Build the wall of bricks, row by row, colored by row."""
    return [
        [
            Brick(
                Rect(col * BRICK_W, row * BRICK_H + TOP_OFFSET, BRICK_W - PADDING, BRICK_H - PADDING),
                BRICK_COLORS[row % len(BRICK_COLORS)],
            )
            for col in range(BRICK_COLS)
        ]
        for row in range(BRICK_ROWS)
    ]


class BreakoutGame:
    """Paddle, ball, wall and lives of one breakout game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.paddle = Paddle()
        self.ball = Ball(Vector2(self.rng.choice(_DIRECTIONS), -1.0))
        self.bricks = generate_bricks()
        self.lives = START_LIVES
        self.game_over = False

    def reset_ball(self) -> None:
        """Put the ball back in the middle, heading upwards."""
        self.ball.position = _screen_center()
        self.ball.direction.x = self.rng.choice(_DIRECTIONS)
        self.ball.direction.y = -1.0

    def _active_bricks(self):
        return (brick for row in self.bricks for brick in row if brick.active)

    def _hit_bricks(self) -> None:
        for brick in self._active_bricks():
            if check_collision_circle_rec(self.ball.position, BALL_RADIUS, brick.rect):
                brick.active = False
                self.ball.direction.y *= -1
        if not any(True for _ in self._active_bricks()):
            self.game_over = True

    def update(self, dt: float, controls: Controls) -> None:
        """Advance paddle and ball, then knock out any brick the ball touches."""
        if not self.game_over:
            self.paddle.update(dt, controls)
            if self.ball.update(dt, self.paddle):
                self.reset_ball()
                self.lives -= 1
                if self.lives <= 0:
                    self.game_over = True
        self._hit_bricks()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scene, the lives left and the result once the game is over."""
        self.paddle.draw(surface)
        for brick in self._active_bricks():
            brick.draw(surface)
        self.ball.draw(surface)
        _draw_text(surface, "Lives: ", 10, 10, 40, LABEL_COLOR)
        _draw_text(surface, str(self.lives), 150, 10, 40, TEXT_COLOR)
        if self.game_over:
            message = "Game over! You won!" if self.lives > 0 else "Game over! You lost!"
            _draw_text(surface, message, WIDTH / 2 - 200, HEIGHT / 2 - 100, 42, TEXT_COLOR)


def main(argv=None) -> None:
    """Open the breakout window."""
    argparse.ArgumentParser(prog="breakout", description="Break the wall of bricks.").parse_args(argv)
    run("Breakout", WIDTH, HEIGHT, BreakoutGame(), BACKGROUND)