"""Solved magic square representation."""

from __future__ import annotations
from typing import List, Optional
import numpy as np

from .validator import is_magic_square


class MagicSquare:
    """An n x n grid of integers, typically produced by the solver."""

    def __init__(self, grid: np.ndarray):
        grid = np.asarray(grid)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Grid must be square, got shape {grid.shape}")
        self.order = grid.shape[0]
        self.grid = grid.copy().astype(np.int64)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> MagicSquare:
        """Create a square from a 2D list."""
        return cls(np.array(data, dtype=np.int64))

    def get(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def to_list(self) -> List[List[int]]:
        return self.grid.tolist()

    def is_magic(self, magic_constant: Optional[int] = None) -> bool:
        """Check the normal magic square property."""
        return is_magic_square(self.grid, magic_constant)

    def to_string(self) -> str:
        """Space-separated values, one row per line."""
        return "\n".join(" ".join(str(v) for v in row) for row in self.grid.tolist())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"MagicSquare(order={self.order})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagicSquare):
            return False
        return self.order == other.order and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
