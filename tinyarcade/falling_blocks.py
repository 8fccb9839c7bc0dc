"""Catch falling blocks with a paddle steered by the arrow keys."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame

from .frame import Controls, run
from .geometry import Rect, Vector2, check_collision_recs

WIDTH = 1500
HEIGHT = 900

PADDLE_W = 130
PADDLE_H = 60
PADDLE_SPEED = 700

BLOCK_W = 60
BLOCK_H = 50
SPAWN_DURATION = 1

BACKGROUND = (245, 245, 245)
PADDLE_COLOR = (135, 60, 190)
TEXT_COLOR = (0, 0, 0)
COLORS = (
    (230, 41, 55),
    (0, 228, 48),
    (255, 161, 0),
    (253, 249, 0),
    (255, 109, 194),
    (127, 106, 79),
)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    surface.blit(pygame.font.Font(None, size).render(text, True, color), (int(x), int(y)))


@dataclass
class Block:
    """A falling block; inactive blocks were caught or fell off the screen."""

    active: bool
    pos: Vector2
    speed: float
    color: tuple[int, int, int]

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, BLOCK_W, BLOCK_H)


def _paddle_start() -> Vector2:
    return Vector2(float(WIDTH // 2 - PADDLE_W // 2), float(HEIGHT - PADDLE_H - 30))


class FallingBlocks:
    """The paddle, the blocks in play, the spawn timer and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.paddle = _paddle_start()
        self.blocks: list[Block] = []
        self.score = 0
        self.last_spawn = 0.0

    def spawn_block(self) -> Block:
        """Add a block of random speed, place and colour above the screen and return it."""
        speed = float(self.rng.randint(100, 600))
        x = float(self.rng.randint(0, WIDTH - BLOCK_W))
        y = float(self.rng.randint(-200, -100))
        color = COLORS[self.rng.randrange(len(COLORS))]
        block = Block(active=True, pos=Vector2(x, y), speed=speed, color=color)
        self.blocks.append(block)
        return block

    def _paddle_rect(self) -> Rect:
        return Rect(self.paddle.x, self.paddle.y, PADDLE_W, PADDLE_H)

    def update(self, dt: float, controls: Controls) -> None:
        """Move the paddle, let the blocks fall, count catches and spawn new blocks."""
        if controls.is_down(pygame.K_LEFT):
            self.paddle.x -= PADDLE_SPEED * dt
        if controls.is_down(pygame.K_RIGHT):
            self.paddle.x += PADDLE_SPEED * dt

        paddle_rect = self._paddle_rect()
        for block in self.blocks:
            if block.active:
                block.pos.y += block.speed * dt
                if block.pos.y > HEIGHT:
                    block.active = False
            if block.active and check_collision_recs(block.rect(), paddle_rect):
                block.active = False
                self.score += 1

        self.last_spawn += dt
        if self.last_spawn >= SPAWN_DURATION:
            self.spawn_block()
            self.last_spawn = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the paddle, the falling blocks and the score."""
        pygame.draw.rect(surface, PADDLE_COLOR, (self.paddle.x, self.paddle.y, PADDLE_W, PADDLE_H))
        for block in self.blocks:
            if block.active:
                pygame.draw.rect(surface, block.color, (block.pos.x, block.pos.y, BLOCK_W, BLOCK_H))
        _draw_text(surface, f"Score: {self.score}", 10, HEIGHT - 50, 50, TEXT_COLOR)


def main(argv=None) -> None:
    """Open the falling blocks window."""
    argparse.ArgumentParser(prog="falling-blocks", description="Catch the falling blocks.").parse_args(argv)
    run("Catch Falling Blocks", WIDTH, HEIGHT, FallingBlocks(), BACKGROUND)