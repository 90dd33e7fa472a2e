"""
Variable and value selection policies.

Every policy is a plain function over the current domains. Random policies
take their generator as an argument so the caller decides its lifetime
(one generator per solve, seeded with RANDOM_SEED).
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional, Sequence
import random

from ..engine import IntVar


RANDOM_SEED = 42


class VariableSelection(Enum):
    """Which unassigned cell to branch on next."""
    SMALLEST = "smallest-domain"
    LARGEST = "largest-domain"
    RANDOM = "random"


class ValueSelection(Enum):
    """Which candidate value to try first."""
    MIN = "min"
    MAX = "max"
    MIDDLE = "middle"
    RANDOM = "random"


def select_smallest_domain(variables: Sequence[IntVar], rng: Optional[random.Random] = None) -> Optional[IntVar]:
    """Fewest remaining values; ties go to the lowest index."""
    best = None
    for var in variables:
        if var.is_instantiated():
            continue
        if best is None or var.size < best.size:
            best = var
    return best


def select_largest_domain(variables: Sequence[IntVar], rng: Optional[random.Random] = None) -> Optional[IntVar]:
    """Most remaining values; ties go to the lowest index."""
    best = None
    for var in variables:
        if var.is_instantiated():
            continue
        if best is None or var.size > best.size:
            best = var
    return best


def select_random_variable(variables: Sequence[IntVar], rng: random.Random) -> Optional[IntVar]:
    """Uniform choice among unassigned variables."""
    unassigned = [var for var in variables if not var.is_instantiated()]
    if not unassigned:
        return None
    return rng.choice(unassigned)


def select_min_value(variable: IntVar, rng: Optional[random.Random] = None) -> int:
    return variable.lb


def select_max_value(variable: IntVar, rng: Optional[random.Random] = None) -> int:
    return variable.ub


def select_middle_value(variable: IntVar, rng: Optional[random.Random] = None) -> int:
    """
    Value closest to (lb + ub) / 2; the lower one wins an exact tie.

    Distances are compared doubled to stay in integers.
    """
    doubled_mid = variable.lb + variable.ub
    return min(variable.values(), key=lambda v: (abs(2 * v - doubled_mid), v))


def select_random_value(variable: IntVar, rng: random.Random) -> int:
    """Uniform choice among the remaining values."""
    return rng.choice(variable.values())


VARIABLE_SELECTORS: Dict[VariableSelection, Callable] = {
    VariableSelection.SMALLEST: select_smallest_domain,
    VariableSelection.LARGEST: select_largest_domain,
    VariableSelection.RANDOM: select_random_variable,
}

VALUE_SELECTORS: Dict[ValueSelection, Callable] = {
    ValueSelection.MIN: select_min_value,
    ValueSelection.MAX: select_max_value,
    ValueSelection.MIDDLE: select_middle_value,
    ValueSelection.RANDOM: select_random_value,
}


def make_variable_selector(kind: VariableSelection, seed: int = RANDOM_SEED
                           ) -> Callable[[Sequence[IntVar]], Optional[IntVar]]:
    """Bind a variable policy to a freshly seeded generator."""
    policy = VARIABLE_SELECTORS[kind]
    rng = random.Random(seed)
    return lambda variables: policy(variables, rng)


def make_value_selector(kind: ValueSelection, seed: int = RANDOM_SEED) -> Callable[[IntVar], int]:
    """Bind a value policy to a freshly seeded generator."""
    policy = VALUE_SELECTORS[kind]
    rng = random.Random(seed)
    return lambda variable: policy(variable, rng)
