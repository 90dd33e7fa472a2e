"""
Variable selection following the Siamese (diagonal) construction.

The classical hand method for odd orders walks up and to the right, wrapping
around the edges, and drops one cell down when the diagonal cell is taken.
Here the walk only decides which cell to branch on; with ``min`` value
selection, propagation leaves a single forced value at each step.
"""

from __future__ import annotations
from typing import Optional, Sequence

from ..engine import IntVar


def select_siamese(variables: Sequence[IntVar], order: int) -> Optional[IntVar]:
    """
    Pick the next cell of the diagonal walk.

    Args:
        variables: The n^2 cells, row-major.
        order: n. Only odd orders are supported.

    Returns:
        The cell to branch on, or None when the heuristic does not apply.
    """
    n = order
    if n % 2 == 0:
        return None

    center = (n // 2) * n + n // 2
    if len(variables) <= center:
        return None
    if not variables[center].is_instantiated():
        return variables[center]

    if len(variables) < n * n:
        return None

    # Greatest assigned value; ">=" so the last one in scan order wins
    index = -1
    max_value = None
    for i in range(n * n):
        var = variables[i]
        if var.is_instantiated() and (max_value is None or var.value >= max_value):
            index = i
            max_value = var.value
    if index == -1:
        return None

    row, col = divmod(index, n)
    target = ((row - 1) % n) * n + (col + 1) % n
    if variables[target].is_instantiated():
        return variables[((row + 1) % n) * n + col]
    return variables[target]
