"""Integer variables with finite set domains."""

from __future__ import annotations
from typing import Iterable, List, Optional, Set


class ContradictionError(Exception):
    """Raised when a domain becomes empty during propagation."""

    def __init__(self, variable: Optional[IntVar] = None, message: str = ""):
        self.variable = variable
        if not message and variable is not None:
            message = f"Domain of {variable.name} wiped out"
        super().__init__(message)


class IntVar:
    """
    A bounded integer variable.

    The domain is a plain set of candidate values. Mutators return True when
    the domain actually changed and raise ContradictionError when it would
    become empty.
    """

    def __init__(self, name: str, lb: int, ub: int, index: int = 0):
        if lb > ub:
            raise ValueError(f"Empty initial domain [{lb}, {ub}] for {name}")
        self.name = name
        self.index = index
        self.domain: Set[int] = set(range(lb, ub + 1))

    @property
    def lb(self) -> int:
        return min(self.domain)

    @property
    def ub(self) -> int:
        return max(self.domain)

    @property
    def size(self) -> int:
        return len(self.domain)

    @property
    def value(self) -> int:
        """The assigned value. Only valid once the variable is instantiated."""
        if len(self.domain) != 1:
            raise ValueError(f"{self.name} is not instantiated")
        return next(iter(self.domain))

    def is_instantiated(self) -> bool:
        return len(self.domain) == 1

    def contains(self, value: int) -> bool:
        return value in self.domain

    def values(self) -> List[int]:
        """Remaining candidate values in increasing order."""
        return sorted(self.domain)

    def instantiate_to(self, value: int) -> bool:
        if value not in self.domain:
            raise ContradictionError(self, f"{value} not in domain of {self.name}")
        if len(self.domain) == 1:
            return False
        self.domain = {value}
        return True

    def remove_value(self, value: int) -> bool:
        if value not in self.domain:
            return False
        if len(self.domain) == 1:
            raise ContradictionError(self)
        self.domain.discard(value)
        return True

    def remove_values(self, values: Iterable[int]) -> bool:
        remaining = self.domain.difference(values)
        if len(remaining) == len(self.domain):
            return False
        if not remaining:
            raise ContradictionError(self)
        self.domain = remaining
        return True

    def update_lower_bound(self, bound: int) -> bool:
        return self.remove_values([v for v in self.domain if v < bound])

    def update_upper_bound(self, bound: int) -> bool:
        return self.remove_values([v for v in self.domain if v > bound])

    def __repr__(self) -> str:
        if self.is_instantiated():
            return f"IntVar({self.name}={self.value})"
        return f"IntVar({self.name}, size={self.size}, [{self.lb}, {self.ub}])"
