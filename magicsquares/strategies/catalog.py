"""Named search strategies benchmarked on magic squares."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Dict, List, Optional

from ..engine import SearchStrategy
from .selectors import (
    RANDOM_SEED,
    ValueSelection,
    VariableSelection,
    make_value_selector,
    make_variable_selector,
    select_min_value,
)
from .siamese import select_siamese


class StrategyKind(Enum):
    DEFAULT = "default"
    COMPOSED = "composed"
    SIAMESE = "siamese"


@dataclass(frozen=True)
class StrategySpec:
    """
    Immutable description of a search strategy.

    ``build`` turns it into an engine SearchStrategy for one model, with fresh
    random generators, or returns None to keep the engine's default ordering.
    """
    name: str
    kind: StrategyKind
    variable: Optional[VariableSelection] = None
    value: Optional[ValueSelection] = None
    seed: int = RANDOM_SEED

    def build(self, model) -> Optional[SearchStrategy]:
        if self.kind is StrategyKind.DEFAULT:
            return None

        cells = model.flat_cells
        if self.kind is StrategyKind.SIAMESE:
            if model.order % 2 == 0:
                return None
            return SearchStrategy(
                cells,
                partial(select_siamese, order=model.order),
                select_min_value,
                name=self.name
            )

        return SearchStrategy(
            cells,
            make_variable_selector(self.variable, self.seed),
            make_value_selector(self.value, self.seed),
            name=self.name
        )

    def __str__(self) -> str:
        return self.name


def composed(variable: VariableSelection, value: ValueSelection) -> StrategySpec:
    return StrategySpec(
        name=f"{variable.value}/{value.value}",
        kind=StrategyKind.COMPOSED,
        variable=variable,
        value=value
    )


DEFAULT = StrategySpec(name="default", kind=StrategyKind.DEFAULT)
SIAMESE = StrategySpec(name="siamese", kind=StrategyKind.SIAMESE)

# Benchmark matrix order: default, largest, smallest, random, siamese
_VARIABLE_ORDER = [VariableSelection.LARGEST, VariableSelection.SMALLEST, VariableSelection.RANDOM]
_VALUE_ORDER = [ValueSelection.MAX, ValueSelection.MIDDLE, ValueSelection.MIN, ValueSelection.RANDOM]

ALL_STRATEGIES: List[StrategySpec] = (
    [DEFAULT]
    + [composed(var, val) for var in _VARIABLE_ORDER for val in _VALUE_ORDER]
    + [SIAMESE]
)

STRATEGIES_BY_NAME: Dict[str, StrategySpec] = {s.name: s for s in ALL_STRATEGIES}


def get_strategy(name: str) -> StrategySpec:
    """Look up a strategy by name. Raises KeyError for unknown names."""
    try:
        return STRATEGIES_BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown strategy {name!r}; choose from {', '.join(STRATEGIES_BY_NAME)}"
        ) from None


def strategy_names() -> List[str]:
    return [s.name for s in ALL_STRATEGIES]
