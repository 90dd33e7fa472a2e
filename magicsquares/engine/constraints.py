"""Propagators for the constraints used by magic square models."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from .variables import IntVar, ContradictionError


class Constraint(ABC):
    """A constraint over a fixed list of variables."""

    name: str = "Constraint"

    def __init__(self, variables: Sequence[IntVar]):
        self.variables: List[IntVar] = list(variables)

    @abstractmethod
    def propagate(self) -> bool:
        """
        Narrow the domains of the constraint's variables.

        Returns:
            True if any domain changed.

        Raises:
            ContradictionError: If the constraint can no longer be satisfied.
        """
        pass

    @abstractmethod
    def is_satisfied(self) -> bool:
        """Check the constraint on fully instantiated variables."""
        pass

    def __repr__(self) -> str:
        return f"{self.name}({len(self.variables)} vars)"


class AllDifferent(Constraint):
    """
    Pairwise distinct values.

    Filtering:
    - Values of instantiated variables are removed from the others.
    - Pigeonhole: fail if the candidate values cannot cover all variables.
    - Hidden singles: when the variables must use every candidate value
      (a permutation), a value left in a single domain is assigned there.
    """

    name = "AllDifferent"

    def propagate(self) -> bool:
        changed = False
        seen_fixed = True
        while seen_fixed:
            seen_fixed = False
            fixed = [v for v in self.variables if v.is_instantiated()]
            taken = {}
            for var in fixed:
                if var.value in taken:
                    raise ContradictionError(var, f"{var.value} used twice")
                taken[var.value] = var
            for var in self.variables:
                if var.is_instantiated():
                    continue
                if var.remove_values(taken):
                    changed = True
                    if var.is_instantiated():
                        seen_fixed = True

        union = set()
        for var in self.variables:
            union |= var.domain
        if len(union) < len(self.variables):
            raise ContradictionError(message="Not enough values for AllDifferent")

        if len(union) == len(self.variables):
            supports: Dict[int, List[IntVar]] = {}
            for var in self.variables:
                for value in var.domain:
                    supports.setdefault(value, []).append(var)
            for value, holders in supports.items():
                if len(holders) == 1 and holders[0].instantiate_to(value):
                    changed = True
        return changed

    def is_satisfied(self) -> bool:
        values = [v.value for v in self.variables]
        return len(values) == len(set(values))


class LinearSumEquals(Constraint):
    """sum(variables) == total, filtered with bounds consistency."""

    name = "LinearSumEquals"

    def __init__(self, variables: Sequence[IntVar], total: int):
        super().__init__(variables)
        self.total = total

    def propagate(self) -> bool:
        changed = False
        while True:
            lbs = [v.lb for v in self.variables]
            ubs = [v.ub for v in self.variables]
            sum_lb = sum(lbs)
            sum_ub = sum(ubs)
            if sum_lb > self.total or sum_ub < self.total:
                raise ContradictionError(message=f"Sum cannot reach {self.total}")

            narrowed = False
            for var, lb, ub in zip(self.variables, lbs, ubs):
                narrowed |= var.update_lower_bound(self.total - (sum_ub - ub))
                narrowed |= var.update_upper_bound(self.total - (sum_lb - lb))
            if not narrowed:
                return changed
            changed = True

    def is_satisfied(self) -> bool:
        return sum(v.value for v in self.variables) == self.total

    def __repr__(self) -> str:
        return f"{self.name}({len(self.variables)} vars, total={self.total})"
