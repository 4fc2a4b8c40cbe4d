#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Compare the exhaustive and dynamic solvers on growing prefixes of a catalog.

For n = 1..MAX_N, take the first n items (after value filtering), run both
solvers at a fixed capacity, and print best values and timings side by side.
The values must match whenever weights are whole numbers.

Usage:
  python scripts/run_comparison.py
"""

from __future__ import annotations
import logging

# ====== CONFIGURATION ======
ITEMS_PATH = "data/food_items.txt"
DELIMITER = "^"
CAPACITY = 25
MIN_VALUE = 1.0
MAX_VALUE = 2500.0
MAX_N = 15
LOG_LEVEL = logging.WARNING
# ===========================

from knapsack01.planning.filtering import filter_catalog
from knapsack01.planning.solve_orchestrator import solve
from knapsack01.quality_metrics.core import solutions_agree
from knapsack01.utils.read_items import read_items_delimited


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(levelname)s - %(asctime)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    catalog = read_items_delimited(ITEMS_PATH, delimiter=DELIMITER)

    print(f"{'n':>3}  {'exhaustive':>12}  {'time(s)':>10}  {'dynamic':>12}  {'time(s)':>10}  agree")
    for n in range(1, MAX_N + 1):
        prefix = filter_catalog(catalog, MIN_VALUE, MAX_VALUE, max_count=n)
        if len(prefix) < n:
            break
        ex = solve(prefix, CAPACITY, "exhaustive")
        dp = solve(prefix, CAPACITY, "dynamic")
        print(
            f"{n:>3}  {ex.total_value:>12g}  {ex.elapsed_seconds:>10.6f}  "
            f"{dp.total_value:>12g}  {dp.elapsed_seconds:>10.6f}  {solutions_agree(ex, dp)}"
        )


if __name__ == "__main__":
    main()
