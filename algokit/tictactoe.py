"""Two-player tic-tac-toe on a 3 x 3 board."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

EMPTY = " "
SIZE = 3


class InvalidMoveError(ValueError):
    """Raised for a move off the board, onto a taken cell, or after the end."""


class Outcome(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


class TicTacToe:
    """A game between X and O; X moves first."""

    def __init__(self) -> None:
        self.board: list[list[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.current_player = "X"
        self.winner: str | None = None
        self.outcome = Outcome.IN_PROGRESS

    def play(self, row: int, col: int) -> Outcome:
        """Place the current player's mark and return the state of the game."""
        if self.outcome is not Outcome.IN_PROGRESS:
            raise InvalidMoveError("The game is already over!")
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMoveError(
                "This is not a valid move! Please enter a row and column between 0 and 2."
            )
        if self.board[row][col] != EMPTY:
            raise InvalidMoveError("This cell is already taken!")
        self.board[row][col] = self.current_player
        if self.has_won(self.current_player):
            self.winner = self.current_player
            self.outcome = Outcome.WON
        elif self.is_draw():
            self.outcome = Outcome.DRAW
        else:
            self.current_player = "O" if self.current_player == "X" else "X"
        return self.outcome

    def has_won(self, player: str) -> bool:
        """Return True if ``player`` fills a row, column or diagonal."""
        lines = [list(row) for row in self.board]
        lines += [list(column) for column in zip(*self.board)]
        lines.append([self.board[i][i] for i in range(SIZE)])
        lines.append([self.board[i][SIZE - 1 - i] for i in range(SIZE)])
        return any(all(cell == player for cell in line) for line in lines)

    def is_draw(self) -> bool:
        """Return True when no empty cell is left."""
        return all(cell != EMPTY for row in self.board for cell in row)

    def render(self) -> str:
        """Draw the board with ``|`` between cells and dashes between rows."""
        return "\n----------\n".join(" | ".join(row) for row in self.board)


def _read_int(prompt: str) -> int:
    print(prompt)
    return int(input().strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game on the terminal, reading moves from standard input."""
    game = TicTacToe()
    print("Welcome to our little game!")
    while game.outcome is Outcome.IN_PROGRESS:
        print(game.render())
        print(f"Player {game.current_player} please make a move!")
        try:
            row = _read_int("Please Enter the row (0-2): ")
            col = _read_int("Please Enter the column (0-2): ")
        except EOFError:
            print("No more input.", file=sys.stderr)
            return 1
        except ValueError:
            print("This is not a valid move! Please enter a row and column between 0 and 2.")
            continue
        try:
            game.play(row, col)
        except InvalidMoveError as exc:
            print(exc)
    print(game.render())
    if game.outcome is Outcome.WON:
        print(f"Player {game.winner} has won the game! Hooray!")
    else:
        print("The game is a draw!")
    print("End of the game")
    return 0


if __name__ == "__main__":
    sys.exit(main())