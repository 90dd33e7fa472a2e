"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult, TIME_UNIT


class Visualizer:
    """
    Chart generator for strategy benchmark results.

    Creates charts comparing solve time across orders and strategies.
    """

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    @property
    def strategies(self) -> List[str]:
        # First-seen order, i.e. the order strategies were benchmarked in
        return list(dict.fromkeys(r.strategy for r in self.results))

    @property
    def orders(self) -> List[int]:
        return sorted(set(r.order for r in self.results))

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_order(),
            self.plot_time_heatmap(),
        ]

    def _time_matrix(self) -> np.ndarray:
        strategies = self.strategies
        orders = self.orders
        matrix = np.full((len(strategies), len(orders)), np.nan)
        for r in self.results:
            matrix[strategies.index(r.strategy), orders.index(r.order)] = r.elapsed_ms
        return matrix

    def plot_time_by_order(self) -> str:
        """Line chart of solve time against order, one line per strategy."""
        fig, ax = plt.subplots(figsize=(12, 7))

        orders = self.orders
        matrix = self._time_matrix()
        for i, strategy in enumerate(self.strategies):
            ax.plot(orders, matrix[i], marker='o', linewidth=1.5, label=strategy)

        ax.set_xlabel('Order n', fontsize=12)
        ax.set_ylabel(f'Time ({TIME_UNIT}, log scale)', fontsize=12)
        ax.set_title('Solve Time by Order and Strategy', fontsize=14, fontweight='bold')
        ax.set_xticks(orders)
        ax.set_yscale('log')
        ax.legend(title='Strategy', bbox_to_anchor=(1.05, 1), loc='upper left')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_order.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_time_heatmap(self) -> str:
        """Heatmap of log10 solve time, strategies by orders."""
        fig, ax = plt.subplots(figsize=(12, 8))

        # Clamp to 1 microsecond so log10 stays finite
        matrix = np.log10(np.maximum(self._time_matrix(), 1e-3))
        sns.heatmap(
            matrix,
            ax=ax,
            cmap="rocket_r",
            annot=True,
            fmt=".1f",
            xticklabels=[f"n={n}" for n in self.orders],
            yticklabels=self.strategies,
            cbar_kws={"label": f"log10 time ({TIME_UNIT})"}
        )

        ax.set_xlabel('Order', fontsize=12)
        ax.set_ylabel('Strategy', fontsize=12)
        ax.set_title('Solve Time Heatmap', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_heatmap.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        orders = self.orders
        lines = [
            "# Benchmark Summary\n",
            "| Strategy | " + " | ".join(f"n={n}" for n in orders) + " | Total |",
            "|----------|" + "|".join("------" for _ in orders) + "|-------|"
        ]

        for strategy in self.strategies:
            by_order = {r.order: r for r in self.results if r.strategy == strategy}
            cells = []
            for n in orders:
                r = by_order.get(n)
                if r is None:
                    cells.append("")
                elif r.solved:
                    cells.append(f"{r.elapsed_ms:.2f}")
                else:
                    cells.append(f"{r.elapsed_ms:.2f} ({r.status})")
            total = sum(r.elapsed_ms for r in by_order.values())
            lines.append(f"| {strategy} | " + " | ".join(cells) + f" | {total:.2f} |")

        content = "\n".join(lines) + "\n"

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
