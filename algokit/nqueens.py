"""The N-Queens puzzle solved by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _is_safe(board: list[int], row: int, col: int) -> bool:
    return all(
        placed != col and abs(placed - col) != row - earlier
        for earlier, placed in enumerate(board[:row])
    )


def _solutions(n: int) -> Iterator[tuple[int, ...]]:
    board = [-1] * n

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(board)
            return
        for col in range(n):
            if _is_safe(board, row, col):
                board[row] = col
                yield from place(row + 1)
                board[row] = -1

    yield from place(0)


def solve_n_queens(n: int) -> list[tuple[int, ...]]:
    """Return every placement; entry ``i`` of a board is the column in row ``i``."""
    if n < 0:
        raise ValueError("board size must not be negative")
    return list(_solutions(n))


def count_solutions(n: int) -> int:
    """Return how many ways ``n`` queens fit on an ``n`` x ``n`` board."""
    if n < 0:
        raise ValueError("board size must not be negative")
    return sum(1 for _ in _solutions(n))


def render_board(board: Sequence[int]) -> str:
    """Draw a board with ``Q`` for a queen and ``.`` for an empty square."""
    size = len(board)
    return "\n".join(
        " ".join("Q" if board[row] == col else "." for col in range(size))
        for row in range(size)
    )