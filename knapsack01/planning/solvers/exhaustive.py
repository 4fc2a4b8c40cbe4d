# -*- coding: utf-8 -*-
"""
Exhaustive (brute-force) 0/1 knapsack solver.

Every subset of the catalog is encoded as an integer bit mask in [0, 2**N):
bit j set means item j is selected. Each mask's total weight and value are
summed; the best feasible one wins. Runtime is O(2**N * N), so the catalog
must be small; use planning.filtering.filter_catalog to bound it first.

Tie-break: a subset only replaces the current best if its value is strictly
greater, so among equally good subsets the one with the smallest mask (the
earliest catalog items) is returned.
"""

from __future__ import annotations
import logging
import math
import numbers
from typing import List

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import InvalidArgumentError, PreconditionViolationError
from knapsack01.planning.solution import Subset

logger = logging.getLogger(__name__)

# Masks are conceptually 64-bit words; N must fit strictly below that width.
MAX_EXHAUSTIVE_ITEMS: int = 63


def exhaustive_max_value(catalog: ItemCatalog, capacity: float) -> Subset:
    """
    Among all subsets of `catalog`, return the one whose total weight fits
    within `capacity` and whose total value is greatest.

    Parameters
    ----------
    catalog : ItemCatalog
        Items to choose from. Must hold fewer than 64 items.
    capacity : float
        Maximum total weight. Zero or negative capacity yields the empty subset.

    Returns
    -------
    Subset
        Selected catalog positions in ascending order. Empty if nothing fits
        or no item has a positive value.

    Raises
    ------
    InvalidArgumentError
        If capacity is not a real number (or is NaN).
    PreconditionViolationError
        If the catalog holds 64 or more items.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Real) or math.isnan(capacity):
        raise InvalidArgumentError(f"capacity must be a real number, got {capacity!r}.")

    n = len(catalog)
    if n > MAX_EXHAUSTIVE_ITEMS:
        raise PreconditionViolationError(
            f"Exhaustive search needs fewer than {MAX_EXHAUSTIVE_ITEMS + 1} items, got {n}; "
            "filter the catalog first."
        )

    weights = [it.weight for it in catalog]
    values = [it.value for it in catalog]

    best_mask = 0
    best_value = 0.0
    for mask in range(1 << n):
        cand_weight = 0.0
        cand_value = 0.0
        for j in range(n):
            if (mask >> j) & 1:
                cand_weight += weights[j]
                cand_value += values[j]
        if cand_weight <= capacity and cand_value > best_value:
            best_mask = mask
            best_value = cand_value

    selected: List[int] = [j for j in range(n) if (best_mask >> j) & 1]
    logger.debug(
        "Exhaustive search over %d items (%d subsets), capacity=%s: best value %s with %d items",
        n, 1 << n, capacity, best_value, len(selected),
    )
    return Subset(catalog=catalog, indices=tuple(selected))
