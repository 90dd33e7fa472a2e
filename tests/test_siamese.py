"""Unit tests for the Siamese (diagonal method) variable selection."""

import pytest
from magicsquares.engine import IntVar
from magicsquares.strategies import select_siamese


def make_cells(n, assigned=None, count=None):
    """Row-major cells of an order-n square with some values assigned."""
    count = n * n if count is None else count
    cells = [IntVar(f"cell{i}", 1, n * n, index=i) for i in range(count)]
    for index, value in (assigned or {}).items():
        cells[index].instantiate_to(value)
    return cells


class UntouchableCells:
    """A cell sequence that fails the test on any access."""

    def __len__(self):
        raise AssertionError("cells were inspected")

    def __getitem__(self, index):
        raise AssertionError("cells were inspected")

    def __iter__(self):
        raise AssertionError("cells were inspected")


class TestSiameseSelection:
    """Tests for the diagonal walk."""

    @pytest.mark.parametrize("n", [2, 4, 6, 10])
    def test_even_order_never_engages(self, n):
        assert select_siamese(UntouchableCells(), n) is None

    @pytest.mark.parametrize("n, center", [(3, 4), (5, 12), (7, 24)])
    def test_center_first(self, n, center):
        cells = make_cells(n)
        assert select_siamese(cells, n) is cells[center]

    def test_center_first_even_when_others_assigned(self):
        cells = make_cells(3, {0: 9, 8: 1})
        assert select_siamese(cells, 3) is cells[4]

    def test_up_right_from_center(self):
        cells = make_cells(3, {4: 5})
        # (1, 1) -> (0, 2)
        assert select_siamese(cells, 3) is cells[2]

    def test_wraps_to_bottom_row(self):
        cells = make_cells(3, {4: 1, 1: 9})
        # (0, 1) -> (-1 mod 3, 2) = (2, 2)
        assert select_siamese(cells, 3) is cells[8]

    def test_wraps_to_first_column(self):
        cells = make_cells(3, {4: 1, 5: 9})
        # (1, 2) -> (0, 0)
        assert select_siamese(cells, 3) is cells[0]

    def test_wraps_both_ways(self):
        cells = make_cells(5, {12: 1, 4: 25})
        # (0, 4) -> (4, 0)
        assert select_siamese(cells, 5) is cells[20]

    def test_falls_back_below_when_diagonal_taken(self):
        cells = make_cells(3, {4: 5, 2: 9, 6: 1})
        # (0, 2) -> (2, 0) is taken, so (1, 2)
        assert select_siamese(cells, 3) is cells[5]

    def test_fallback_wraps_vertically(self):
        cells = make_cells(3, {4: 5, 7: 9, 3: 1})
        # (2, 1) -> (1, 2) free
        assert select_siamese(cells, 3) is cells[5]
        cells[5].instantiate_to(2)
        # (2, 1) -> (1, 2) taken, so (0, 1)
        assert select_siamese(cells, 3) is cells[1]

    def test_last_maximum_wins(self):
        cells = make_cells(3, {4: 5, 0: 7, 8: 7})
        # Last 7 is at (2, 2) -> (1, 0); the first one would give (2, 1)
        assert select_siamese(cells, 3) is cells[3]

    def test_undersized_after_center(self):
        cells = make_cells(3, {4: 5}, count=6)
        assert select_siamese(cells, 3) is None

    def test_undersized_before_center(self):
        assert select_siamese(make_cells(3, count=4), 3) is None

    def test_does_not_mutate_cells(self):
        cells = make_cells(3, {4: 5, 2: 2})
        before = [set(c.domain) for c in cells]
        select_siamese(cells, 3)
        select_siamese(cells, 3)
        assert [c.domain for c in cells] == before
