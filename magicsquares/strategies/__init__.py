"""Search strategies for magic square models."""

from .selectors import (
    RANDOM_SEED,
    VariableSelection,
    ValueSelection,
    VARIABLE_SELECTORS,
    VALUE_SELECTORS,
    make_variable_selector,
    make_value_selector,
)
from .siamese import select_siamese
from .catalog import (
    StrategyKind,
    StrategySpec,
    DEFAULT,
    SIAMESE,
    ALL_STRATEGIES,
    composed,
    get_strategy,
    strategy_names,
)

__all__ = [
    "RANDOM_SEED",
    "VariableSelection",
    "ValueSelection",
    "VARIABLE_SELECTORS",
    "VALUE_SELECTORS",
    "make_variable_selector",
    "make_value_selector",
    "select_siamese",
    "StrategyKind",
    "StrategySpec",
    "DEFAULT",
    "SIAMESE",
    "ALL_STRATEGIES",
    "composed",
    "get_strategy",
    "strategy_names",
]
