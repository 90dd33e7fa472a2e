"""Finite-domain constraint engine used to solve magic square models."""

from .variables import IntVar, ContradictionError
from .constraints import Constraint, AllDifferent, LinearSumEquals
from .search import Decision, SearchStrategy, default_strategy, first_unassigned, lowest_value
from .solver import Solver, SolverStats, SolveStatus

__all__ = [
    "IntVar",
    "ContradictionError",
    "Constraint",
    "AllDifferent",
    "LinearSumEquals",
    "Decision",
    "SearchStrategy",
    "default_strategy",
    "first_unassigned",
    "lowest_value",
    "Solver",
    "SolverStats",
    "SolveStatus",
]
