import pygame
import pytest

from tinyarcade.frame import Controls
from tinyarcade.geometry import Vector2
from tinyarcade.tic_tac_toe import CELL_COLOR, HEIGHT, OFFSET, SIZE, WIDTH, TicTacToe


def cell_point(i, j):
    return OFFSET + i * SIZE + SIZE / 2, OFFSET + j * SIZE + SIZE / 2


def play(game, moves):
    for i, j in moves:
        assert game.click(*cell_point(i, j))


DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
WIN_ON_FULL_BOARD = [(0, 0), (1, 0), (0, 1), (1, 1), (1, 2), (2, 1), (2, 0), (2, 2), (0, 2)]


def test_new_game_state():
    game = TicTacToe()
    assert game.player == "X"
    assert game.display_text == "Player X's turn."
    assert not game.game_over
    assert all(cell == " " for line in game.board for cell in line)


def test_click_places_mark_and_switches_player():
    game = TicTacToe()
    assert game.click(*cell_point(1, 2))
    assert game.board[1][2] == "X"
    assert game.player == "O"
    assert game.display_text == f"Player {game.player}'s turn."


def test_occupied_cell_is_ignored():
    game = TicTacToe()
    game.click(*cell_point(0, 0))
    assert not game.click(*cell_point(0, 0))
    assert game.board[0][0] == "X"
    assert game.player == "O"


@pytest.mark.parametrize("point", [(OFFSET - 1, OFFSET + 10), (OFFSET + 10, OFFSET + SIZE * 3 + 1), (0, 0)])
def test_click_outside_board_is_ignored(point):
    game = TicTacToe()
    assert not game.click(*point)
    assert all(cell == " " for line in game.board for cell in line)


def test_click_on_far_edge_lands_in_last_cell():
    game = TicTacToe()
    assert game.click(OFFSET + SIZE * 3, OFFSET + SIZE * 3)
    assert game.board[2][2] == "X"


def test_column_win():
    game = TicTacToe()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert game.check_win()
    assert game.game_over
    assert game.display_text == "Player X WON!"


def test_diagonal_win_for_o():
    game = TicTacToe()
    play(game, [(1, 0), (0, 0), (2, 0), (1, 1), (0, 1), (2, 2)])
    assert game.check_win()
    assert game.game_over
    assert game.player == "O"
    assert game.display_text == "Player O WON!"


def test_full_board_without_line_is_draw():
    game = TicTacToe()
    play(game, DRAW_MOVES)
    assert game.is_draw()
    assert not game.check_win()
    assert game.game_over
    assert game.display_text == "It is Draw!"


def test_full_board_reports_draw_even_with_line():
    game = TicTacToe()
    play(game, WIN_ON_FULL_BOARD)
    assert game.check_win()
    assert game.display_text == "It is Draw!"


def test_update_click_plays_only_while_running():
    game = TicTacToe()
    x, y = cell_point(2, 0)
    game.update(0.0, Controls(mouse=Vector2(x, y), clicked=True))
    assert game.board[2][0] == "X"

    play(game, [(0, 0), (2, 1), (0, 1), (2, 2)])
    assert game.game_over
    x, y = cell_point(1, 1)
    game.update(0.0, Controls(mouse=Vector2(x, y), clicked=True))
    assert game.board[1][1] == " "


def test_space_restarts_finished_game():
    game = TicTacToe()
    play(game, DRAW_MOVES)
    game.update(0.0, Controls(pressed=frozenset({pygame.K_SPACE})))
    assert not game.game_over
    assert game.player == "X"
    assert game.display_text == "Player X's turn."
    assert all(cell == " " for line in game.board for cell in line)


def test_space_does_nothing_while_playing():
    game = TicTacToe()
    game.click(*cell_point(0, 0))
    game.update(0.0, Controls(pressed=frozenset({pygame.K_SPACE})))
    assert game.board[0][0] == "X"
    assert game.player == "O"


def test_draw_paints_cells():
    game = TicTacToe()
    surface = pygame.Surface((WIDTH, HEIGHT))
    game.draw(surface)
    assert tuple(surface.get_at((OFFSET + 5, OFFSET + 5)))[:3] == CELL_COLOR