"""Core module for the magic square model and solutions."""

from .square import MagicSquare
from .model import MagicSquareModel, build_model, magic_constant, solve_magic_square
from .validator import is_magic_square, is_normal, line_sums

__all__ = [
    "MagicSquare",
    "MagicSquareModel",
    "build_model",
    "magic_constant",
    "solve_magic_square",
    "is_magic_square",
    "is_normal",
    "line_sums",
]
