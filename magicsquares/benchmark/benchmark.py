"""Benchmarking framework for comparing search strategies on magic squares."""

from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TextIO
import json
import os

from tqdm import tqdm

from ..core.model import build_model
from ..engine import SolveStatus
from ..strategies import ALL_STRATEGIES, StrategySpec


DEFAULT_MAX_ORDER = 10
DEFAULT_OUTPUT = "compute.csv"

# Elapsed times in the results table are wall-clock milliseconds
TIME_UNIT = "ms"


@dataclass
class BenchmarkResult:
    """Results from a single (strategy, order) trial."""
    strategy: str
    order: int
    status: str
    elapsed_ms: float
    nodes: int = 0
    backtracks: int = 0
    fails: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status == SolveStatus.SOLVED.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "strategy": self.strategy,
            "order": self.order,
            "status": self.status,
            "solved": self.solved,
            "elapsed_ms": self.elapsed_ms,
            "nodes": self.nodes,
            "backtracks": self.backtracks,
            "fails": self.fails,
            **self.extra
        }


class Benchmark:
    """
    Benchmark framework for comparing search strategies.

    For every strategy (outer loop) and every order 1..max_order (inner loop)
    a fresh model is built, the strategy is attached unless it declines, and
    only the solver call is timed. Unsatisfiable orders (n = 2) are timed
    like any other.
    """

    def __init__(
        self,
        max_order: int = DEFAULT_MAX_ORDER,
        strategies: Optional[Sequence[StrategySpec]] = None,
        time_limit: Optional[float] = None
    ):
        """
        Initialize the benchmark.

        Args:
            max_order: Largest order to solve (orders 1..max_order).
            strategies: Strategies to compare (default: all 14).
            time_limit: Optional wall-clock cap per solve, in seconds.
        """
        if max_order < 1:
            raise ValueError(f"max_order must be at least 1, got {max_order}")
        self.max_order = max_order
        self.strategies = list(strategies) if strategies is not None else list(ALL_STRATEGIES)
        self.time_limit = time_limit
        self.results: List[BenchmarkResult] = []

    @property
    def orders(self) -> List[int]:
        return list(range(1, self.max_order + 1))

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects, strategy-major.
        """
        self.results = []

        total_tests = len(self.strategies) * self.max_order
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for strategy in self.strategies:
            for order in self.orders:
                pbar.set_postfix(strategy=strategy.name, n=order)
                self.results.append(self._run_single(strategy, order))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, strategy: StrategySpec, order: int) -> BenchmarkResult:
        """Run a single strategy on a single order."""
        model = build_model(order)
        search = strategy.build(model)
        if search is not None:
            model.solver.set_strategy(search)

        start = time.perf_counter()
        model.solver.find_solution(time_limit=self.time_limit)
        elapsed = time.perf_counter() - start

        stats = model.solver.stats
        return BenchmarkResult(
            strategy=strategy.name,
            order=order,
            status=stats.status.value,
            elapsed_ms=elapsed * 1000.0,
            nodes=stats.nodes,
            backtracks=stats.backtracks,
            fails=stats.fails,
            extra=stats.extra
        )

    def get_table(self) -> Dict[str, Dict[int, float]]:
        """Elapsed milliseconds keyed by strategy name, then order."""
        table: Dict[str, Dict[int, float]] = {}
        for r in self.results:
            table.setdefault(r.strategy, {})[r.order] = r.elapsed_ms
        return table

    def write_table(self, sink: TextIO) -> None:
        """
        Write the tab-separated results table.

        The header is ``Strategy`` followed by ``n=1`` .. ``n=N``; each row is
        a strategy name followed by its elapsed times in milliseconds.
        """
        sink.write("Strategy")
        for order in self.orders:
            sink.write(f"\tn={order}")
        sink.write("\n")

        table = self.get_table()
        for strategy in self.strategies:
            times = table.get(strategy.name, {})
            sink.write(strategy.name)
            for order in self.orders:
                elapsed = times.get(order)
                sink.write("\t" + ("" if elapsed is None else f"{elapsed:.3f}"))
            sink.write("\n")
        sink.flush()

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "max_order": self.max_order,
            "time_unit": TIME_UNIT,
            "strategies_tested": [s.name for s in self.strategies],
            "results_by_strategy": {}
        }

        for strategy in self.strategies:
            strategy_results = [r for r in self.results if r.strategy == strategy.name]
            if strategy_results:
                times = [r.elapsed_ms for r in strategy_results]
                summary["results_by_strategy"][strategy.name] = {
                    "total_ms": sum(times),
                    "max_ms": max(times),
                    "solved": [r.order for r in strategy_results if r.solved],
                    "unsatisfiable": [
                        r.order for r in strategy_results
                        if r.status == SolveStatus.UNSATISFIABLE.value
                    ],
                    "timed_out": [
                        r.order for r in strategy_results
                        if r.status == SolveStatus.TIMEOUT.value
                    ],
                    "total_nodes": sum(r.nodes for r in strategy_results)
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)


def run_benchmark(
    max_order: int,
    sink: TextIO,
    strategies: Optional[Sequence[StrategySpec]] = None,
    time_limit: Optional[float] = None,
    show_progress: bool = False
) -> Benchmark:
    """Run every strategy on orders 1..max_order and write the table to ``sink``."""
    benchmark = Benchmark(max_order=max_order, strategies=strategies, time_limit=time_limit)
    benchmark.run(show_progress=show_progress)
    benchmark.write_table(sink)
    return benchmark
