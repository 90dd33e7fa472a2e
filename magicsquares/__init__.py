"""Magic square constraint model and search strategy benchmark."""

from .core import MagicSquare, MagicSquareModel, build_model, magic_constant, solve_magic_square
from .strategies import ALL_STRATEGIES, DEFAULT, SIAMESE, StrategySpec, get_strategy

__version__ = "1.0.0"

__all__ = [
    "MagicSquare",
    "MagicSquareModel",
    "build_model",
    "magic_constant",
    "solve_magic_square",
    "ALL_STRATEGIES",
    "DEFAULT",
    "SIAMESE",
    "StrategySpec",
    "get_strategy",
]
