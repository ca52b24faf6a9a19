"""Small console programs: a todo list, a fruit guessing game, a tic-tac-toe move prompt and collection helpers."""

__version__ = "0.1.0"