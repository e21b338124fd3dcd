"""Spiral traversals and fills of rectangular grids."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import cycle, islice
from typing import Any, Optional

from puzzlekit.nodes import ListNode, list_values

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield the cells of a rows x cols grid clockwise from the top-left, inward."""
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for c in range(left, right + 1):
            yield top, c
        top += 1
        for r in range(top, bottom + 1):
            yield r, right
        right -= 1
        if top <= bottom:
            for c in range(right, left - 1, -1):
                yield bottom, c
            bottom -= 1
        if left <= right:
            for r in range(bottom, top - 1, -1):
                yield r, left
            left += 1


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the elements of a matrix in clockwise spiral order."""
    if not matrix:
        return []
    return [matrix[r][c] for r, c in _spiral_cells(len(matrix), len(matrix[0]))]


def generate_matrix(n: int) -> list[list[int]]:
    """Return an n x n matrix filled with 1 to n*n in clockwise spiral order."""
    matrix = [[0] * n for _ in range(n)]
    for count, (r, c) in enumerate(_spiral_cells(n, n), start=1):
        matrix[r][c] = count
    return matrix


def _square_walk(r: int, c: int) -> Iterator[tuple[int, int]]:
    """Walk an ever-growing clockwise square spiral from (r, c): east, south, west, north."""
    for turn, (dr, dc) in enumerate(cycle(_DIRECTIONS)):
        for _ in range(turn // 2 + 1):
            r += dr
            c += dc
            yield r, c


def spiral_matrix_iii(rows: int, cols: int, r_start: int, c_start: int) -> list[list[int]]:
    """Return every grid cell in the order met walking a clockwise spiral from the start."""
    if not (0 <= r_start < rows and 0 <= c_start < cols):
        raise ValueError("start cell lies outside the grid")
    inside = (
        [r, c] for r, c in _square_walk(r_start, c_start) if 0 <= r < rows and 0 <= c < cols
    )
    return [[r_start, c_start], *islice(inside, rows * cols - 1)]


def spiral_matrix_iv(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Fill an m x n matrix spirally with a linked list's values; unfilled cells hold -1."""
    matrix = [[-1] * n for _ in range(m)]
    for (r, c), value in zip(_spiral_cells(m, n), list_values(head)):
        matrix[r][c] = value
    return matrix