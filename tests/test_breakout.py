import math
import random

import pygame
import pytest

from tinyarcade.breakout import (
    BALL_RADIUS,
    BALL_SPEED,
    BRICK_COLORS,
    BRICK_COLS,
    BRICK_H,
    BRICK_ROWS,
    BRICK_W,
    HEIGHT,
    PADDING,
    PADDLE_H,
    PADDLE_W,
    START_LIVES,
    TOP_OFFSET,
    WIDTH,
    Ball,
    BreakoutGame,
    Brick,
    Paddle,
    generate_bricks,
)
from tinyarcade.frame import Controls
from tinyarcade.geometry import Rect, Vector2

NO_KEYS = Controls()


def keys(*held):
    return Controls(down=frozenset(held))


@pytest.fixture
def game():
    return BreakoutGame(random.Random(7))


def test_generate_bricks_shape_and_layout():
    bricks = generate_bricks()
    assert len(bricks) == BRICK_ROWS
    assert all(len(row) == BRICK_COLS for row in bricks)
    assert all(brick.active for row in bricks for brick in row)
    first = bricks[0][0]
    assert first.rect == Rect(0.0, TOP_OFFSET, BRICK_W - PADDING, BRICK_H - PADDING)
    assert bricks[2][3].rect.x == 3 * BRICK_W
    assert bricks[2][3].rect.y == 2 * BRICK_H + TOP_OFFSET


def test_generate_bricks_colors_by_row():
    bricks = generate_bricks()
    for index, row in enumerate(bricks):
        assert {brick.color for brick in row} == {BRICK_COLORS[index]}


def test_paddle_starts_centered_near_bottom():
    paddle = Paddle()
    assert paddle.rect.x == WIDTH / 2 - PADDLE_W / 2
    assert paddle.rect.y == HEIGHT - PADDLE_H - 20


def test_paddle_without_keys_stays_put():
    paddle = Paddle()
    start = paddle.rect.x
    paddle.update(0.5, NO_KEYS)
    assert paddle.rect.x == start
    assert paddle.direction.x == 0


def test_paddle_moves_left_and_right():
    paddle = Paddle()
    start = paddle.rect.x
    paddle.update(0.1, keys(pygame.K_LEFT))
    assert paddle.rect.x < start
    assert paddle.direction.x == -1
    paddle.update(0.2, keys(pygame.K_RIGHT))
    assert paddle.rect.x > start
    assert paddle.direction.x == 1


def test_paddle_clamped_to_window():
    paddle = Paddle()
    paddle.update(10.0, keys(pygame.K_LEFT))
    assert paddle.rect.x == 0
    paddle.update(10.0, keys(pygame.K_RIGHT))
    assert paddle.rect.x == WIDTH - PADDLE_W


def test_ball_starts_in_center_with_base_speed():
    ball = Ball(Vector2(1.0, -1.0))
    assert ball.position == Vector2(WIDTH / 2, HEIGHT / 2)
    assert ball.speed == Vector2(BALL_SPEED, BALL_SPEED)


def test_ball_moves_along_direction():
    ball = Ball(Vector2(1.0, -1.0))
    ball.update(0.1, Paddle())
    assert ball.position.x > WIDTH / 2
    assert ball.position.y < HEIGHT / 2


def test_ball_bounces_off_top():
    ball = Ball(Vector2(1.0, -1.0), position=Vector2(WIDTH / 2, BALL_RADIUS / 2))
    below = ball.update(0.0, Paddle())
    assert ball.direction.y == 1
    assert below is False


def test_ball_bounces_off_side_walls():
    ball = Ball(Vector2(-1.0, 1.0), position=Vector2(BALL_RADIUS / 2, HEIGHT / 2))
    ball.update(0.0, Paddle())
    assert ball.direction.x == 1
    ball = Ball(Vector2(1.0, 1.0), position=Vector2(WIDTH - BALL_RADIUS / 2, HEIGHT / 2))
    ball.update(0.0, Paddle())
    assert ball.direction.x == -1


def test_ball_reports_falling_past_bottom():
    ball = Ball(Vector2(1.0, 1.0), position=Vector2(100.0, HEIGHT - 5))
    assert ball.update(0.0, Paddle()) is True


def test_ball_hitting_paddle_center_goes_straight_up():
    paddle = Paddle()
    center_x = paddle.rect.x + PADDLE_W / 2
    ball = Ball(Vector2(1.0, 1.0), position=Vector2(center_x, paddle.rect.y - 5))
    ball.update(0.0, paddle)
    assert ball.direction.y == -1
    assert ball.speed.x == pytest.approx(0.0)


def test_ball_hitting_paddle_edge_keeps_full_magnitude():
    paddle = Paddle()
    edge_x = paddle.rect.x + PADDLE_W
    ball = Ball(Vector2(1.0, 1.0), position=Vector2(edge_x, paddle.rect.y - 5))
    ball.update(0.0, paddle)
    assert ball.speed.x == pytest.approx(math.hypot(BALL_SPEED, BALL_SPEED))
    assert ball.direction.y == -1


def test_game_starts_with_full_lives(game):
    assert game.lives == START_LIVES
    assert game.game_over is False
    assert game.ball.direction.y == -1
    assert game.ball.direction.x in (-1.0, 1.0)


def test_losing_ball_costs_a_life_and_resets(game):
    game.ball.position = Vector2(300.0, HEIGHT)
    game.update(0.0, NO_KEYS)
    assert game.lives == START_LIVES - 1
    assert game.ball.position == Vector2(WIDTH / 2, HEIGHT / 2)
    assert game.ball.direction.y == -1
    assert game.game_over is False


def test_losing_all_lives_ends_game(game):
    for _ in range(START_LIVES):
        game.ball.position = Vector2(300.0, HEIGHT)
        game.update(0.0, NO_KEYS)
    assert game.lives == 0
    assert game.game_over is True


def test_ball_knocks_out_brick(game):
    brick = game.bricks[1][5]
    game.ball.position = Vector2(brick.rect.x + 20, brick.rect.y + 20)
    game.ball.direction = Vector2(1.0, -1.0)
    game.update(0.0, NO_KEYS)
    assert brick.active is False
    assert game.ball.direction.y == 1
    remaining = sum(b.active for row in game.bricks for b in row)
    assert remaining == BRICK_ROWS * BRICK_COLS - 1


def test_clearing_wall_ends_game_as_win(game):
    for row in game.bricks:
        for brick in row:
            brick.active = False
    game.update(0.0, NO_KEYS)
    assert game.game_over is True
    assert game.lives == START_LIVES


def test_game_over_freezes_ball(game):
    game.game_over = True
    before = Vector2(game.ball.position.x, game.ball.position.y)
    game.update(1.0, keys(pygame.K_LEFT))
    assert game.ball.position == before


def test_reset_ball_keeps_direction_choice_in_options(game):
    for _ in range(10):
        game.ball.position = Vector2(1.0, 2.0)
        game.reset_ball()
        assert game.ball.direction.x in (-1.0, 1.0)
        assert game.ball.position == Vector2(WIDTH / 2, HEIGHT / 2)


def test_brick_draw_paints_its_color():
    surface = pygame.Surface((200, 200))
    brick = Brick(Rect(10.0, 10.0, 50.0, 30.0), BRICK_COLORS[0])
    brick.draw(surface)
    assert tuple(surface.get_at((20, 20)))[:3] == BRICK_COLORS[0]
    assert tuple(surface.get_at((150, 150)))[:3] == (0, 0, 0)