"""Command-line interface for the magic square strategy benchmark."""

import argparse
import sys
from typing import List, Optional

from .benchmark import Benchmark, DEFAULT_MAX_ORDER, DEFAULT_OUTPUT, TIME_UNIT, run_benchmark
from .benchmark.visualizer import Visualizer
from .core.model import solve_magic_square
from .strategies import ALL_STRATEGIES, get_strategy


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Magic Square Solver & Search Strategy Benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Benchmark all strategies on orders 1..6, writing compute.csv
  python -m magicsquares.cli benchmark 6

  # Full matrix up to n=10, capping each solve at 30 seconds
  python -m magicsquares.cli benchmark 10 --time-limit 30

  # Solve an order 5 square with the Siamese strategy
  python -m magicsquares.cli solve 5 --strategy siamese
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Benchmark command
    bench_parser = subparsers.add_parser(
        "benchmark",
        help="Time every strategy on orders 1..N",
        description=(
            "Time every strategy on orders 1..N. Solves are uncapped by default and "
            "orders above 5 can take very long; use --time-limit to cap each solve."
        )
    )
    bench_parser.add_argument(
        "max_order", type=int, nargs="?", default=DEFAULT_MAX_ORDER,
        help=f"Largest order to solve (default: {DEFAULT_MAX_ORDER})"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=DEFAULT_OUTPUT,
        help=f"Results table file, or - for stdout (default: {DEFAULT_OUTPUT})"
    )
    bench_parser.add_argument(
        "--time-limit", "-t", type=float, default=None,
        help="Wall-clock cap per solve in seconds, recorded as timeout "
             "(default: none; recommended for N > 5)"
    )
    bench_parser.add_argument(
        "--charts", type=str, default=None,
        help="Directory for charts and JSON results (default: no charts)"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve one magic square")
    solve_parser.add_argument("order", type=int, help="Order n of the square")
    solve_parser.add_argument(
        "--strategy", "-s", type=str, default="default",
        help="Strategy name (see 'strategies', default: default)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show search statistics"
    )

    # Strategies command
    subparsers.add_parser("strategies", help="List strategy names")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "benchmark":
        cmd_benchmark(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "strategies":
        cmd_strategies(args)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.max_order < 1:
        print(f"Error: order must be at least 1, got {args.max_order}")
        sys.exit(1)

    try:
        if args.output == "-":
            benchmark = _benchmark_to(sys.stdout, args)
        else:
            # Sink is acquired before any solve runs
            with open(args.output, "w") as f:
                benchmark = _benchmark_to(f, args)
            print(f"Results ({TIME_UNIT}) written to {args.output}")

        if args.charts:
            benchmark.save_results(args.charts)
            visualizer = Visualizer(benchmark.results, args.charts)
            charts = visualizer.generate_all()
            charts.append(visualizer.generate_summary_table())
            print(f"Charts saved to {args.charts}/")
            for chart in charts:
                print(f"  - {chart}")
    except OSError as e:
        print(f"Error: could not write results: {e}")
        sys.exit(1)


def _benchmark_to(sink, args) -> Benchmark:
    return run_benchmark(
        args.max_order,
        sink,
        time_limit=args.time_limit,
        show_progress=not args.no_progress
    )


def cmd_solve(args):
    """Handle the solve command."""
    try:
        strategy = get_strategy(args.strategy)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        sys.exit(1)

    try:
        solution, stats = solve_magic_square(args.order, strategy)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if solution is not None:
        print(f"✓ Solved order {args.order} with {strategy.name} in {stats.time_seconds:.4f}s")
        print(solution)
    else:
        print(f"✗ No magic square of order {args.order} ({stats.status.value})")

    if args.verbose:
        print(f"  Nodes: {stats.nodes:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Fails: {stats.fails:,}")


def cmd_strategies(args):
    """Handle the strategies command."""
    for strategy in ALL_STRATEGIES:
        print(strategy.name)


if __name__ == "__main__":
    main()
