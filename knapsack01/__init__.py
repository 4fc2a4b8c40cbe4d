# -*- coding: utf-8 -*-
"""
knapsack01: 0/1 knapsack selection by exhaustive search and dynamic programming.

Typical flow:
    catalog = read_items_delimited("data/food_items.txt")
    small = filter_catalog(catalog, min_value=1, max_value=2500, max_count=20)
    best = dynamic_max_value(small, capacity=40)
    print(totals(best))
"""

from knapsack01.business_objects import (
    Item,
    ItemCatalog,
    SchemaError,
    StateValidationError,
    InvalidArgumentError,
    PreconditionViolationError,
)
from knapsack01.planning import Subset, Solution, Policy, filter_catalog
from knapsack01.planning.solvers.exhaustive import exhaustive_max_value
from knapsack01.planning.solvers.dynamic import dynamic_max_value
from knapsack01.planning.solve_orchestrator import solve, run_pipeline
from knapsack01.quality_metrics.core import Totals, totals

__version__ = "0.1.0"

__all__ = [
    "Item",
    "ItemCatalog",
    "SchemaError",
    "StateValidationError",
    "InvalidArgumentError",
    "PreconditionViolationError",
    "Subset",
    "Solution",
    "Policy",
    "filter_catalog",
    "exhaustive_max_value",
    "dynamic_max_value",
    "solve",
    "run_pipeline",
    "Totals",
    "totals",
]
