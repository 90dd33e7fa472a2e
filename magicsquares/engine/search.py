"""Search strategies: how the solver picks the next decision."""

from __future__ import annotations
from typing import Callable, List, NamedTuple, Optional, Sequence

from .variables import IntVar


VariableSelector = Callable[[Sequence[IntVar]], Optional[IntVar]]
ValueSelector = Callable[[IntVar], int]


class Decision(NamedTuple):
    """Branch on ``variable == value`` (refuted with ``variable != value``)."""
    variable: IntVar
    value: int


def first_unassigned(variables: Sequence[IntVar]) -> Optional[IntVar]:
    """Engine default: first uninstantiated variable in declaration order."""
    for var in variables:
        if not var.is_instantiated():
            return var
    return None


def lowest_value(variable: IntVar) -> int:
    return variable.lb


class SearchStrategy:
    """
    Pairs a variable selector with a value selector over a fixed scope.

    The selectors are called synchronously at every search node. A variable
    selector may return None (or an already instantiated variable) to give up
    the decision, in which case the solver falls back to its default ordering.
    """

    def __init__(
        self,
        variables: Sequence[IntVar],
        variable_selector: VariableSelector,
        value_selector: ValueSelector,
        name: str = "custom"
    ):
        self.variables: List[IntVar] = list(variables)
        self.variable_selector = variable_selector
        self.value_selector = value_selector
        self.name = name

    def next_decision(self) -> Optional[Decision]:
        variable = self.variable_selector(self.variables)
        if variable is None or variable.is_instantiated():
            return None
        return Decision(variable, self.value_selector(variable))

    def __repr__(self) -> str:
        return f"SearchStrategy({self.name})"


def default_strategy(variables: Sequence[IntVar]) -> SearchStrategy:
    return SearchStrategy(variables, first_unassigned, lowest_value, name="default")
