"""Text rendering of knight paths: step listing and board grid."""

from typing import Iterable, List, Optional, Sequence, Tuple

import chess

Step = Tuple[int, int, int]  # (row, col, depth)


def square_name(row: int, col: int) -> str:
    """Algebraic name of a square, e.g. (0, 0) -> 'a1'.

    Squares that fit a standard chessboard are named by python-chess; larger
    boards keep counting file letters past 'h'.
    """
    if 0 <= row < 8 and 0 <= col < 8:
        return chess.square_name(chess.square(col, row))
    return f"{chr(ord('a') + col)}{row + 1}"


def path_lines(path: Iterable[Step]) -> List[str]:
    return [
        f"Step {depth}: ({row}, {col}) -> {square_name(row, col)}"
        for row, col, depth in path
    ]


def board_grid(path: Iterable[Step], n: int) -> List[List[Optional[int]]]:
    """n x n grid indexed [row][col] holding visit depth, None where unvisited."""
    grid: List[List[Optional[int]]] = [[None] * n for _ in range(n)]
    for row, col, depth in path:
        grid[row][col] = depth
    return grid


def path_from_grid(grid: Sequence[Sequence[Optional[int]]]) -> List[Step]:
    """Rebuild the visit order from a grid by sorting filled cells on depth."""
    steps = [
        (row, col, depth)
        for row, cells in enumerate(grid)
        for col, depth in enumerate(cells)
        if depth is not None
    ]
    steps.sort(key=lambda s: s[2])
    return steps


def board_lines(path: Iterable[Step], n: int) -> List[str]:
    """Grid rows from the highest row index down, 1-based depth per cell."""
    grid = board_grid(path, n)
    lines = []
    for row in range(n - 1, -1, -1):
        cells = []
        for depth in grid[row]:
            cells.append("    - " if depth is None else f"{depth:4d} ")
        lines.append("".join(cells))
    return lines
