"""Depth-first constraint solver with propagation and pluggable search."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import time

from .constraints import Constraint
from .search import SearchStrategy, default_strategy
from .variables import IntVar, ContradictionError


class SolveStatus(Enum):
    """Outcome of a call to Solver.find_solution."""
    UNKNOWN = "unknown"
    SOLVED = "solved"
    UNSATISFIABLE = "unsatisfiable"
    TIMEOUT = "timeout"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    status: SolveStatus = SolveStatus.UNKNOWN
    time_seconds: float = 0.0

    # Search tree metrics
    nodes: int = 0
    backtracks: int = 0
    fails: int = 0

    strategy: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "status": self.status.value,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "nodes": self.nodes,
            "backtracks": self.backtracks,
            "fails": self.fails,
            "strategy": self.strategy,
            **self.extra
        }


class Solver:
    """
    A small finite-domain constraint solver.

    - Variables are IntVar objects with set domains.
    - Constraints are propagated round-robin until no domain changes.
    - Search is depth-first with binary branching: ``x = v`` first, then
      ``x != v`` on backtrack. An explicit stack replaces recursion so deep
      refutation chains on large orders do not hit the recursion limit.
    - Only the first solution is searched for.
    """

    def __init__(self, name: str = "solver"):
        self.name = name
        self.variables: List[IntVar] = []
        self.constraints: List[Constraint] = []
        self.strategy: Optional[SearchStrategy] = None
        self.stats = SolverStats()

    def int_var(self, name: str, lb: int, ub: int) -> IntVar:
        """Create a variable with domain [lb, ub] owned by this solver."""
        var = IntVar(name, lb, ub, index=len(self.variables))
        self.variables.append(var)
        return var

    def post(self, constraint: Constraint) -> None:
        self.constraints.append(constraint)

    def set_strategy(self, strategy: Optional[SearchStrategy]) -> None:
        """Install a search strategy. None restores the default ordering."""
        self.strategy = strategy

    def find_solution(self, time_limit: Optional[float] = None) -> bool:
        """
        Search for the first solution.

        Args:
            time_limit: Optional wall-clock cap in seconds.

        Returns:
            True if every variable is instantiated and all constraints hold.
            The outcome is also recorded in ``self.stats.status``.
        """
        self.stats = SolverStats(
            strategy=self.strategy.name if self.strategy else "default"
        )
        deadline = None if time_limit is None else time.perf_counter() + time_limit

        start_time = time.perf_counter()
        self.stats.status = self._search(deadline)
        self.stats.time_seconds = time.perf_counter() - start_time

        return self.stats.solved

    def _search(self, deadline: Optional[float]) -> SolveStatus:
        fallback = default_strategy(self.variables)
        stack = []
        consistent = self._apply(None, None)

        while True:
            if deadline is not None and time.perf_counter() > deadline:
                return SolveStatus.TIMEOUT

            if consistent:
                decision = None
                if self.strategy is not None:
                    decision = self.strategy.next_decision()
                if decision is None:
                    decision = fallback.next_decision()
                if decision is None:
                    return SolveStatus.SOLVED

                self.stats.nodes += 1
                stack.append((self._snapshot(), decision))
                consistent = self._apply(decision.variable.instantiate_to, decision.value)
                continue

            # Dead end: refute the most recent decision
            self.stats.fails += 1
            if not stack:
                return SolveStatus.UNSATISFIABLE
            snapshot, decision = stack.pop()
            self._restore(snapshot)
            self.stats.backtracks += 1
            consistent = self._apply(decision.variable.remove_value, decision.value)

    def _apply(self, operation: Optional[Callable[[int], bool]], value: Optional[int]) -> bool:
        """Apply a domain operation then propagate. False on contradiction."""
        try:
            if operation is not None:
                operation(value)
            self._propagate()
        except ContradictionError:
            return False
        return True

    def _propagate(self) -> None:
        changed = True
        while changed:
            changed = False
            for constraint in self.constraints:
                changed |= constraint.propagate()

    def _snapshot(self) -> List[set]:
        return [set(var.domain) for var in self.variables]

    def _restore(self, snapshot: List[set]) -> None:
        for var, domain in zip(self.variables, snapshot):
            var.domain = domain

    def is_satisfied(self) -> bool:
        """Check all constraints on the current (complete) assignment."""
        if not all(var.is_instantiated() for var in self.variables):
            return False
        return all(c.is_satisfied() for c in self.constraints)

    def __repr__(self) -> str:
        return (
            f"Solver({self.name}, vars={len(self.variables)}, "
            f"constraints={len(self.constraints)})"
        )
