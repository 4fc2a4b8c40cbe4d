# -*- coding: utf-8 -*-
"""
Dynamic-programming 0/1 knapsack solver.

Table layout
------------
A flat, row-major list of (N + 1) * (W + 1) cells, W = capacity:

    cell(i, c) = table[i * (W + 1) + c]
               = best value using only the first i items within capacity c

Row 0 is all zeros. For item i (1-based row) and column c:

    cell(i, c) = max(cell(i-1, c), value_i + cell(i-1, c - w_i))   if w_i <= c
    cell(i, c) = cell(i-1, c)                                       otherwise

Traceback starts at cell(N, W) and walks the rows upward: a row whose cell
differs from the one above it selected its item, and the column cursor moves
left by that item's weight.

Integral weights
----------------
Columns are integer capacity units, so the capacity must be a non-negative
integer and each item weight is rounded UP to a whole unit (math.ceil).
For integral weights this changes nothing; for fractional weights the DP
stays feasible but may miss selections that only fit with exact fractions.
Scale weights and capacity to a finer unit beforehand if that matters.

Runtime and memory are O(N * W).
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import Iterator, List, Sequence

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import InvalidArgumentError
from knapsack01.planning.solution import Subset

logger = logging.getLogger(__name__)


def _capacity_units(capacity: float) -> int:
    """Validate `capacity` and return it as a whole number of weight units."""
    if isinstance(capacity, bool):
        raise InvalidArgumentError(f"capacity must be a number, got {capacity!r}.")
    if isinstance(capacity, numbers.Integral):
        units = int(capacity)
    elif isinstance(capacity, numbers.Real) and float(capacity).is_integer():
        units = int(capacity)
    else:
        raise InvalidArgumentError(
            f"Dynamic programming needs an integral capacity, got {capacity!r}."
        )
    if units < 0:
        raise InvalidArgumentError(f"capacity must be >= 0, got {capacity!r}.")
    return units


def _weight_units(weight: float) -> int:
    return int(math.ceil(weight))


def _traceback(
    table: Sequence[float],
    width: int,
    weights: Sequence[int],
    capacity: int,
) -> Iterator[int]:
    """Yield the 0-based catalog positions selected by a filled table, last item first."""
    step = capacity
    row = len(weights)
    while row > 0 and step > 0:
        if table[row * width + step] != table[(row - 1) * width + step]:
            yield row - 1
            step -= weights[row - 1]
        row -= 1


def dynamic_max_value(catalog: ItemCatalog, capacity: int) -> Subset:
    """
    Compute an optimal subset of `catalog` within `capacity` by dynamic programming.

    Parameters
    ----------
    catalog : ItemCatalog
        Items to choose from.
    capacity : int
        Maximum total weight, as a non-negative whole number of weight units.
        A float is accepted only if it has an integral value.

    Returns
    -------
    Subset
        Selected catalog positions in traceback order (last catalog item first).
        Its total value equals the table's bottom-right cell.

    Raises
    ------
    InvalidArgumentError
        If capacity is negative or not integral.
    """
    units = _capacity_units(capacity)
    n = len(catalog)
    if n == 0 or units == 0:
        logger.debug("Dynamic solve short-circuit: %d items, capacity=%d", n, units)
        return Subset.empty(catalog)

    weights: List[int] = [_weight_units(it.weight) for it in catalog]
    values = [it.value for it in catalog]

    width = units + 1
    table: List[float] = [0.0] * ((n + 1) * width)
    for i in range(1, n + 1):
        w = weights[i - 1]
        v = values[i - 1]
        row = i * width
        above = (i - 1) * width
        for c in range(width):
            skip = table[above + c]
            if w <= c:
                take = v + table[above + c - w]
                table[row + c] = take if take > skip else skip
            else:
                table[row + c] = skip

    best_value = table[n * width + units]
    selected = tuple(_traceback(table, width, weights, units))
    logger.debug(
        "Dynamic solve over %d items, capacity=%d (%d cells): best value %s with %d items",
        n, units, len(table), best_value, len(selected),
    )
    return Subset(catalog=catalog, indices=selected)
