"""Ten small pygame arcade games and toys, from Pong and Breakout to Tic Tac Toe."""

__version__ = "0.1.0"