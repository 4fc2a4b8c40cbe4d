#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load a food database, filter it, and pick the highest-calorie selection that
fits a weight budget with both the exhaustive and the dynamic solver.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py
"""

from __future__ import annotations
import logging
from typing import Dict

# ====== CONFIGURATION ======
ITEMS_PATH = "data/food_items.txt"
DELIMITER = "^"

# Weight budget (ounces). Must be a whole number for the dynamic solver.
CAPACITY = 30

# Filtering: keep the first MAX_COUNT items with calories in [MIN_VALUE, MAX_VALUE]
MIN_VALUE = 1.0
MAX_VALUE = 2500.0
MAX_COUNT = 12

# Solvers to run, in order: "exhaustive", "dynamic"
METHODS = ("exhaustive", "dynamic")

LOG_LEVEL = logging.INFO
# ============================

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.planning import Policy, Solution
from knapsack01.planning.solve_orchestrator import run_pipeline
from knapsack01.quality_metrics.core import compute_selection_metrics
from knapsack01.utils.printing import print_solution
from knapsack01.utils.read_items import read_items_delimited


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Load problem
    catalog: ItemCatalog = read_items_delimited(ITEMS_PATH, delimiter=DELIMITER)

    policy = Policy(
        min_value=MIN_VALUE,
        max_value=MAX_VALUE,
        max_count=MAX_COUNT,
        methods=tuple(METHODS),
    )

    solutions: Dict[str, Solution] = run_pipeline(catalog, CAPACITY, policy)

    for sol in solutions.values():
        print()
        print_solution(sol)
        metrics = compute_selection_metrics(sol.subset.catalog, sol.subset, sol.capacity)
        print(f"> Utilization: {metrics['Utilization']:.1f}%  "
              f"Selection rate: {metrics['Selection Rate']:.1f}%  "
              f"Value per weight: {metrics['Value Per Weight']:.2f}")


if __name__ == "__main__":
    main()
