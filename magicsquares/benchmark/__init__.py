"""Benchmark module for comparing search strategies."""

from .benchmark import Benchmark, BenchmarkResult, run_benchmark, DEFAULT_MAX_ORDER, DEFAULT_OUTPUT, TIME_UNIT
from .visualizer import Visualizer

__all__ = [
    "Benchmark",
    "BenchmarkResult",
    "run_benchmark",
    "DEFAULT_MAX_ORDER",
    "DEFAULT_OUTPUT",
    "TIME_UNIT",
    "Visualizer",
]
