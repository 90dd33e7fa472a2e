"""Constraint model of a normal magic square of order n."""

from __future__ import annotations
from typing import List, Optional, Tuple
import numbers

from ..engine import AllDifferent, IntVar, LinearSumEquals, Solver, SolverStats
from ..engine.constraints import Constraint
from .square import MagicSquare


def magic_constant(n: int) -> int:
    """Common sum of every row, column and main diagonal: n(n^2 + 1) / 2."""
    return n * (n * n + 1) // 2


class MagicSquareModel:
    """
    The n x n grid of cells and its constraints, posted on a fresh Solver.

    Constraints (1 + 2n + 2 in total), each line summing to the magic constant:
    - one AllDifferent over all n^2 cells
    - n row sums, n column sums
    - the main diagonal and the anti-diagonal
    """

    def __init__(self, order: int):
        if isinstance(order, bool) or not isinstance(order, numbers.Integral):
            raise ValueError(f"Order must be an integer, got {order!r}")
        if order <= 0:
            raise ValueError(f"Order must be positive, got {order}")

        self.order = int(order)
        self.magic_constant = magic_constant(self.order)
        self.solver = Solver(name=f"magic-square-{self.order}")

        n = self.order
        self.cells: List[List[IntVar]] = [
            [self.solver.int_var(f"cell[{r}][{c}]", 1, n * n) for c in range(n)]
            for r in range(n)
        ]
        self._post_constraints()

    def _post_constraints(self) -> None:
        n = self.order
        self.solver.post(AllDifferent(self.flat_cells))

        for i in range(n):
            self.solver.post(LinearSumEquals(self.get_row(i), self.magic_constant))
            self.solver.post(LinearSumEquals(self.get_col(i), self.magic_constant))

        diagonal, anti_diagonal = self.get_diagonals()
        self.solver.post(LinearSumEquals(diagonal, self.magic_constant))
        self.solver.post(LinearSumEquals(anti_diagonal, self.magic_constant))

    @property
    def flat_cells(self) -> List[IntVar]:
        """All cells in row-major order (flattened index = row * n + col)."""
        return [cell for row in self.cells for cell in row]

    @property
    def constraints(self) -> List[Constraint]:
        return self.solver.constraints

    def get_row(self, row: int) -> List[IntVar]:
        return list(self.cells[row])

    def get_col(self, col: int) -> List[IntVar]:
        return [self.cells[r][col] for r in range(self.order)]

    def get_diagonals(self) -> Tuple[List[IntVar], List[IntVar]]:
        n = self.order
        diagonal = [self.cells[i][i] for i in range(n)]
        anti_diagonal = [self.cells[i][n - i - 1] for i in range(n)]
        return diagonal, anti_diagonal

    def solve(self, time_limit: Optional[float] = None) -> Tuple[Optional[MagicSquare], SolverStats]:
        """
        Run the solver with whatever strategy is attached.

        Returns:
            Tuple of (solution or None, stats). None means the engine proved
            there is no solution (or ran out of time).
        """
        if self.solver.find_solution(time_limit=time_limit) and self.solver.is_satisfied():
            return self.to_square(), self.solver.stats
        return None, self.solver.stats

    def to_square(self) -> MagicSquare:
        """Read the current assignment. All cells must be instantiated."""
        return MagicSquare.from_2d_list([[cell.value for cell in row] for row in self.cells])

    def __repr__(self) -> str:
        return f"MagicSquareModel(order={self.order}, magic_constant={self.magic_constant})"


def build_model(n: int) -> MagicSquareModel:
    """Build the cells and constraints of an order-n magic square."""
    return MagicSquareModel(n)


def solve_magic_square(n: int, strategy=None, time_limit: Optional[float] = None
                       ) -> Tuple[Optional[MagicSquare], SolverStats]:
    """
    Build a model, attach a strategy and search for the first solution.

    Args:
        n: Order of the square.
        strategy: A StrategySpec (or anything with ``build(model)``), or None
                  for the engine's default ordering.
        time_limit: Optional wall-clock cap in seconds.
    """
    model = build_model(n)
    if strategy is not None:
        model.solver.set_strategy(strategy.build(model))
    return model.solve(time_limit=time_limit)
