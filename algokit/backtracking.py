"""Backtracking searches: paths through a maze and the n-queens puzzle."""

from __future__ import annotations

from collections.abc import Sequence

# Moves tried in lexicographic order so that paths come out sorted.
_MOVES: tuple[tuple[str, int, int], ...] = (
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
    ("U", -1, 0),
)


def find_maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell of ``maze``.

    ``maze`` is a square grid where 1 marks an open cell and 0 a blocked one.
    Each path is a string of the moves D, L, R and U, no cell is visited twice,
    and the paths come out in lexicographic order.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be a square grid")
    if size == 0 or grid[0][0] != 1:
        return []

    target = (size - 1, size - 1)
    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    route: list[str] = []

    def explore(row: int, col: int) -> None:
        if (row, col) == target:
            paths.append("".join(route))
            return
        visited.add((row, col))
        for move, d_row, d_col in _MOVES:
            nxt_row, nxt_col = row + d_row, col + d_col
            if (
                0 <= nxt_row < size
                and 0 <= nxt_col < size
                and (nxt_row, nxt_col) not in visited
                and grid[nxt_row][nxt_col] == 1
            ):
                route.append(move)
                explore(nxt_row, nxt_col)
                route.pop()
        visited.discard((row, col))

    explore(0, 0)
    return paths


def _render_row(col: int, n: int) -> str:
    return "." * col + "Q" + "." * (n - col - 1)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each board is a list of rows, with 'Q' for a queen and '.' for an empty square.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    solutions: list[list[str]] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placement: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append([_render_row(col, n) for col in placement])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions