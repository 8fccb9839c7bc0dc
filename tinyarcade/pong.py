"""Two-player pong: W/S move the left paddle, the arrow keys the right one."""

from __future__ import annotations

import argparse
import random
from dataclasses import astuple

import pygame

from .frame import Controls, run
from .geometry import Rect, Vector2, check_collision_circle_rec

WIDTH = 1400.0
HEIGHT = 800.0
OFFSET = 30
PADDLE_W = 15.0
PADDLE_H = 180.0
PADDLE_SPEED = 700
BALL_RADIUS = 20
BALL_SPEED = 700

BACKGROUND = (0, 0, 0)
PADDLE_COLOR = (130, 130, 130)
BALL_COLOR = (230, 41, 55)
TEXT_COLOR = (255, 255, 255)
_DIRECTIONS = (-1, 1)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    surface.blit(pygame.font.Font(None, size).render(text, True, color), (int(x), int(y)))


class PongGame:
    """Paddles, ball and scores of one pong match."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.left_paddle = Vector2(OFFSET, HEIGHT / 2 - PADDLE_H / 2)
        self.right_paddle = Vector2(WIDTH - OFFSET - PADDLE_W, HEIGHT / 2 - PADDLE_H / 2)
        self.left_score = 0
        self.right_score = 0
        self.ball_pos = Vector2(WIDTH / 2, HEIGHT / 2)
        self.ball_direction = self._random_direction()

    def _random_direction(self) -> Vector2:
        x = self.rng.choice(_DIRECTIONS)
        y = self.rng.choice(_DIRECTIONS)
        return Vector2(float(x), float(y))

    def reset_ball(self) -> None:
        """Put the ball back in the middle with a new diagonal direction."""
        self.ball_pos = Vector2(WIDTH / 2, HEIGHT / 2)
        self.ball_direction = self._random_direction()

    @staticmethod
    def _move_paddle(paddle: Vector2, dt: float, controls: Controls, up: int, down: int) -> None:
        if controls.is_down(up):
            paddle.y -= PADDLE_SPEED * dt
        elif controls.is_down(down):
            paddle.y += PADDLE_SPEED * dt

        if paddle.y <= 0:
            paddle.y = 0
        elif paddle.y + PADDLE_H >= HEIGHT:
            paddle.y = HEIGHT - PADDLE_H

    def _move_ball(self, dt: float) -> None:
        self.ball_pos.x += self.ball_direction.x * dt * BALL_SPEED
        self.ball_pos.y += self.ball_direction.y * dt * BALL_SPEED

        if self.ball_pos.y <= 0 or self.ball_pos.y >= HEIGHT:
            self.ball_direction.y *= -1

        if self.ball_pos.x <= 0:
            self.reset_ball()
            self.right_score += 1
        elif self.ball_pos.x >= WIDTH:
            self.reset_ball()
            self.left_score += 1

        for paddle in (self.left_paddle, self.right_paddle):
            if check_collision_circle_rec(self.ball_pos, BALL_RADIUS, self._paddle_rect(paddle)):
                self.ball_direction.x *= -1
                break

    @staticmethod
    def _paddle_rect(paddle: Vector2) -> Rect:
        return Rect(paddle.x, paddle.y, PADDLE_W, PADDLE_H)

    def update(self, dt: float, controls: Controls) -> None:
        """Advance paddles and ball by one frame."""
        self._move_paddle(self.left_paddle, dt, controls, pygame.K_w, pygame.K_s)
        self._move_paddle(self.right_paddle, dt, controls, pygame.K_UP, pygame.K_DOWN)
        self._move_ball(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw paddles, ball and both scores."""
        for paddle in (self.left_paddle, self.right_paddle):
            rect = Rect(int(paddle.x), int(paddle.y), PADDLE_W, PADDLE_H)
            pygame.draw.rect(surface, PADDLE_COLOR, astuple(rect))
        center = (int(self.ball_pos.x), int(self.ball_pos.y))
        pygame.draw.circle(surface, BALL_COLOR, center, BALL_RADIUS)
        _draw_text(surface, str(self.left_score), 20, 20, 50, TEXT_COLOR)
        _draw_text(surface, str(self.right_score), WIDTH - 50, 20, 50, TEXT_COLOR)


def main(argv=None) -> None:
    """Open the pong window."""
    argparse.ArgumentParser(prog="pong", description="Two-player pong.").parse_args(argv)
    run("Pong Clone", WIDTH, HEIGHT, PongGame(), BACKGROUND)