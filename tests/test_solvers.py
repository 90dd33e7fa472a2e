"""End-to-end tests: solving magic squares with each strategy."""

import pytest
from magicsquares.core import MagicSquare, solve_magic_square
from magicsquares.engine import SolveStatus
from magicsquares.strategies import ALL_STRATEGIES, DEFAULT, SIAMESE, get_strategy


LO_SHU = [[4, 9, 2], [3, 5, 7], [8, 1, 6]]

STRATEGY_IDS = [s.name for s in ALL_STRATEGIES]


class TestSmallOrders:
    """Orders with a known answer."""

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_order_one(self, strategy):
        solution, stats = solve_magic_square(1, strategy)
        assert stats.solved
        assert solution.to_list() == [[1]]

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_order_two_has_no_solution(self, strategy):
        solution, stats = solve_magic_square(2, strategy)
        assert solution is None
        assert stats.status is SolveStatus.UNSATISFIABLE

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_order_three(self, strategy):
        solution, stats = solve_magic_square(3, strategy)
        assert stats.solved
        assert solution.order == 3
        assert solution.is_magic()
        assert solution.get(1, 1) == 5

    def test_without_strategy(self):
        solution, stats = solve_magic_square(3)
        assert stats.solved
        assert solution.is_magic()
        assert stats.strategy == "default"

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            solve_magic_square(0, DEFAULT)


class TestSiamese:
    """Golden output of the diagonal method."""

    def test_lo_shu(self):
        solution, stats = solve_magic_square(3, SIAMESE)
        assert stats.solved
        assert solution == MagicSquare.from_2d_list(LO_SHU)
        assert solution.to_string() == "4 9 2\n3 5 7\n8 1 6"

    def test_repeatable(self):
        first, _ = solve_magic_square(3, SIAMESE)
        second, _ = solve_magic_square(3, SIAMESE)
        assert first == second

    def test_even_order_uses_default_ordering(self):
        siamese, _ = solve_magic_square(4, SIAMESE)
        default, _ = solve_magic_square(4, DEFAULT)
        assert siamese.is_magic()
        assert siamese == default


class TestLargerOrders:
    """Order 4 with the cheaper strategies."""

    @pytest.mark.parametrize("name", ["default", "smallest-domain/min"])
    def test_order_four(self, name):
        solution, stats = solve_magic_square(4, get_strategy(name))
        assert stats.solved
        assert solution.is_magic()
        assert sorted(v for row in solution.to_list() for v in row) == list(range(1, 17))


class TestDeterminism:
    """Seeded policies give identical grids across runs."""

    @pytest.mark.parametrize("name", [
        "random/random",
        "random/min",
        "smallest-domain/random",
        "largest-domain/random",
    ])
    def test_random_strategies_repeatable(self, name):
        strategy = get_strategy(name)
        grids = [solve_magic_square(3, strategy)[0] for _ in range(3)]
        assert grids[0].is_magic()
        assert grids[0] == grids[1] == grids[2]
