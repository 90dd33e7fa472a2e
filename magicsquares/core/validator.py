"""Validation utilities for magic squares."""

from __future__ import annotations
from typing import List, Optional
import numpy as np


def line_sums(grid: np.ndarray) -> List[int]:
    """
    Sums of every line of a square grid.

    Returns:
        Row sums, then column sums, then the main and anti-diagonal sums.
    """
    grid = np.asarray(grid)
    sums = list(grid.sum(axis=1)) + list(grid.sum(axis=0))
    sums.append(np.trace(grid))
    sums.append(np.trace(np.fliplr(grid)))
    return [int(s) for s in sums]


def is_normal(grid: np.ndarray) -> bool:
    """Check that the grid holds each of 1..n^2 exactly once."""
    grid = np.asarray(grid)
    n = grid.shape[0]
    return sorted(grid.flatten().tolist()) == list(range(1, n * n + 1))


def is_magic_square(grid: np.ndarray, magic_constant: Optional[int] = None) -> bool:
    """
    Check that a grid is a normal magic square.

    Args:
        grid: Square 2D array.
        magic_constant: Expected line sum (default n(n^2 + 1) / 2).

    Returns:
        True if the values are a permutation of 1..n^2 and every row,
        column and main diagonal sums to the magic constant.
    """
    grid = np.asarray(grid)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
        return False

    n = grid.shape[0]
    if magic_constant is None:
        magic_constant = n * (n * n + 1) // 2

    if not is_normal(grid):
        return False
    return all(s == magic_constant for s in line_sums(grid))
