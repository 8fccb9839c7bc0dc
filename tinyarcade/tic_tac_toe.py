"""Two-player tic-tac-toe played with the mouse; space restarts a finished game."""

from __future__ import annotations

import argparse

import pygame

from .frame import Controls, run

WIDTH = 1000
HEIGHT = 1000
SIZE = 200
OFFSET = 200

EMPTY = " "
BACKGROUND = (255, 255, 255)
CELL_COLOR = (245, 245, 245)
INK = (0, 0, 0)


def _draw_text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    surface.blit(pygame.font.Font(None, size).render(text, True, color), (int(x), int(y)))


class TicTacToe:
    """The board, whose turn it is and the message shown below the board.

    ``board[i][j]`` is the cell in column ``i`` (from the left) and row ``j`` (from the top).
    """

    def __init__(self) -> None:
        self.board: list[list[str]] = []
        self.player = "X"
        self.display_text = ""
        self.game_over = False
        self.restart()

    def restart(self) -> None:
        """Clear the board and give the first move to X."""
        self.game_over = False
        self.board = [[EMPTY] * 3 for _ in range(3)]
        self.player = "X"
        self.display_text = "Player X's turn."

    def is_draw(self) -> bool:
        """Return True when every cell is taken."""
        return all(cell in ("X", "O") for line in self.board for cell in line)

    def check_win(self) -> bool:
        """Return True when any line of three holds the same mark."""
        b = self.board
        lines = [list(line) for line in b]
        lines.append([b[0][0], b[1][1], b[2][2]])
        lines.append([b[0][2], b[1][1], b[2][0]])
        lines.extend([b[0][i], b[1][i], b[2][i]] for i in range(3))
        return any(line[0] != EMPTY and line.count(line[0]) == 3 for line in lines)

    def click(self, x: float, y: float) -> bool:
        """Place the current player's mark at a screen point; return True if one was placed."""
        limit = OFFSET + SIZE * 3
        if x < OFFSET or x > limit or y < OFFSET or y > limit:
            return False

        # A click on the far edge belongs to the last cell.
        i = min(int((x - OFFSET) / SIZE), 2)
        j = min(int((y - OFFSET) / SIZE), 2)
        if self.board[i][j] != EMPTY:
            return False

        self.board[i][j] = self.player
        # A full board counts as a draw even when the last move completed a line.
        if self.is_draw():
            self.display_text = "It is Draw!"
            self.game_over = True
        elif self.check_win():
            self.display_text = f"Player {self.player} WON!"
            self.game_over = True
        else:
            self.player = "O" if self.player == "X" else "X"
            self.display_text = f"Player {self.player}'s turn."
        return True

    def update(self, dt: float, controls: Controls) -> None:
        """Handle a click while playing, or space to restart once the game is over."""
        if controls.clicked and not self.game_over:
            self.click(controls.mouse.x, controls.mouse.y)
        elif self.game_over and controls.was_pressed(pygame.K_SPACE):
            self.restart()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the grid, the marks and the messages."""
        for i, line in enumerate(self.board):
            for j, cell in enumerate(line):
                x = OFFSET + i * SIZE
                y = OFFSET + j * SIZE
                pygame.draw.rect(surface, CELL_COLOR, (x, y, SIZE, SIZE))
                _draw_text(surface, cell, x + 70, y + 70, 72, INK)

        end = OFFSET + SIZE * 3
        for k in (1, 2):
            pos = OFFSET + k * SIZE
            pygame.draw.line(surface, INK, (OFFSET, pos), (end, pos), 2)
            pygame.draw.line(surface, INK, (pos, OFFSET), (pos, end), 2)

        if self.game_over:
            _draw_text(surface, "Press Spacebar to restart...", OFFSET + 70, OFFSET - 80, 40, INK)
        _draw_text(surface, self.display_text, OFFSET + 100, end + 50, 48, INK)


def main(argv=None) -> None:
    """Open the tic-tac-toe window."""
    argparse.ArgumentParser(prog="tic-tac-toe", description="Two-player tic-tac-toe.").parse_args(argv)
    run("Tic Tac Toe!", WIDTH, HEIGHT, TicTacToe(), BACKGROUND)