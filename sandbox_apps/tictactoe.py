"""A two-player tic-tac-toe prompt loop on a 3x3 board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

PLAYER_X = "X"
PLAYER_O = "O"
EMPTY = " "
BOARD_SIZE = 3

Board = list[list[str]]


class InvalidMove(ValueError):
    """A move that cannot be parsed or played."""


def initialize_board() -> Board:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def render_board(board: Board) -> str:
    """Render each row as ``| a | b | c |`` followed by a newline."""
    return "".join("".join(f"| {cell} " for cell in row) + "|\n" for row in board)


def _parse_index(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def parse_move(text: str, board: Board) -> tuple[int, int]:
    """Parse ``"row col"`` into a free cell's coordinates, or raise InvalidMove."""
    parts = text.split()
    if len(parts) != 2:
        raise InvalidMove("Invalid input. Please enter row and column separated by space.")
    row = _parse_index(parts[0])
    if row is None:
        raise InvalidMove("Invalid row. Please enter a number.")
    col = _parse_index(parts[1])
    if col is None:
        raise InvalidMove("Invalid column. Please enter a number.")
    if row >= BOARD_SIZE or col >= BOARD_SIZE:
        raise InvalidMove(
            f"Invalid move. Row and column must be between 0 and {BOARD_SIZE - 1}."
        )
    if board[row][col] != EMPTY:
        raise InvalidMove("Cell already taken. Try again.")
    return row, col


def get_player_move(
    current_player: str, board: Board, lines: Iterable[str], out: TextIO
) -> tuple[int, int]:
    """Prompt until a valid move is read; raise EOFError if input runs out."""
    source = iter(lines)
    while True:
        out.write(f"Player {current_player}: Enter your move (row and column): \n")
        line = next(source, None)
        if line is None:
            raise EOFError("no more input")
        try:
            return parse_move(line, board)
        except InvalidMove as exc:
            out.write(f"{exc}\n")


def next_player(current_player: str) -> str:
    return PLAYER_O if current_player == PLAYER_X else PLAYER_X


def play_game(lines: Iterable[str], out: TextIO) -> list[tuple[int, int]]:
    """Alternate players, reading moves until input ends; return the moves read.

    Moves are read and validated but not placed on the board.
    """
    source = iter(lines)
    board = initialize_board()
    current_player = PLAYER_X
    moves: list[tuple[int, int]] = []
    while True:
        out.write("Current board:\n")
        out.write(render_board(board))
        try:
            moves.append(get_player_move(current_player, board, source, out))
        except EOFError:
            return moves
        current_player = next_player(current_player)


def main(argv: Optional[list[str]] = None) -> int:
    """Play on standard input and output."""
    parser = argparse.ArgumentParser(prog="tictactoe", description=__doc__)
    parser.parse_args(argv)
    play_game(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())