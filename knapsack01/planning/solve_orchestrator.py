# -*- coding: utf-8 -*-
"""
Solve Orchestrator: Filter -> Solve -> Summarise

Thin layer that connects Policy -> filtering -> solvers, and packs each
solver's subset into a Solution with totals and timing.

- solve(): run one registered solver on a catalog
- run_pipeline(): optional filtering, then every solver named by the policy,
  with a cross-check that they reach the same total value

This module never mutates the catalog it is given; each call builds fresh
results.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Optional

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import InvalidArgumentError
from knapsack01.planning.filtering import filter_catalog
from knapsack01.planning.policy import Policy
from knapsack01.planning.solution import Solution, Subset
from knapsack01.planning.solvers.dynamic import dynamic_max_value
from knapsack01.planning.solvers.exhaustive import exhaustive_max_value
from knapsack01.quality_metrics.core import solutions_agree, totals

logger = logging.getLogger(__name__)

# Solver signature: (catalog, capacity) -> Subset
SolverFn = Callable[[ItemCatalog, float], Subset]

SOLVERS: Dict[str, SolverFn] = {
    "exhaustive": exhaustive_max_value,
    "dynamic": dynamic_max_value,
}


def solve(catalog: ItemCatalog, capacity: float, method: str) -> Solution:
    """
    Run a single registered solver and summarise its selection.

    Raises
    ------
    InvalidArgumentError
        If `method` is not registered, or the solver rejects its arguments.
    PreconditionViolationError
        If the catalog is too large for the chosen solver.
    """
    try:
        solver = SOLVERS[method]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown solver method '{method}'; allowed: {sorted(SOLVERS)}"
        ) from None

    start = time.perf_counter()
    subset = solver(catalog, capacity)
    elapsed = time.perf_counter() - start

    agg = totals(subset)
    logger.info(
        "%s solver: %d of %d items selected, weight=%s, value=%s (%.6fs)",
        method, len(subset), len(catalog), agg.weight, agg.value, elapsed,
    )
    return Solution(
        method=method,
        subset=subset,
        capacity=capacity,
        total_weight=agg.weight,
        total_value=agg.value,
        elapsed_seconds=elapsed,
    )


def run_pipeline(
    catalog: ItemCatalog,
    capacity: float,
    policy: Optional[Policy] = None,
) -> Dict[str, Solution]:
    """
    Filter the catalog per `policy`, then run each of `policy.methods`.

    Parameters
    ----------
    catalog : ItemCatalog
        Full, unfiltered catalog.
    capacity : float
        Maximum total weight, in the same units as item weights.
    policy : Policy | None
        Filtering/solving knobs; defaults to Policy().

    Returns
    -------
    dict[str, Solution]
        One Solution per method, in policy order. All subsets borrow from the
        same (possibly filtered) catalog.
    """
    if policy is None:
        policy = Policy()

    working = catalog
    if policy.max_count is not None:
        working = filter_catalog(
            catalog,
            min_value=policy.min_value,
            max_value=policy.max_value,
            max_count=policy.max_count,
        )
        logger.info("Filtered catalog from %d to %d items", len(catalog), len(working))

    solutions: Dict[str, Solution] = {}
    for method in policy.methods:
        solutions[method] = solve(working, capacity, method)

    if policy.check_agreement and len(solutions) > 1:
        ordered = list(solutions.values())
        reference = ordered[0]
        for other in ordered[1:]:
            if not solutions_agree(reference, other, tol=policy.value_tolerance):
                logger.warning(
                    "Solvers disagree: %s value=%s vs %s value=%s "
                    "(fractional weights are rounded up by the dynamic solver)",
                    reference.method, reference.total_value, other.method, other.total_value,
                )

    return solutions
