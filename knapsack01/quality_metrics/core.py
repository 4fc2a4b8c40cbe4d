# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to aggregate and score knapsack selections.
- No side effects
- No external dependencies
- Works off any iterable of Items (Subset, ItemCatalog, plain lists)

Public API:
  - totals(items) -> Totals
  - compute_selection_metrics(catalog, subset, capacity) -> Dict[str, float]
  - solutions_agree(a, b, tol) -> bool
"""

from __future__ import annotations
from typing import Dict, Iterable, NamedTuple

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.items import Item
from knapsack01.planning.solution import Solution, Subset


class Totals(NamedTuple):
    weight: float
    value: float


# ---------------------------------------------------------------------------
# 1) Aggregation
# ---------------------------------------------------------------------------
def totals(items: Iterable[Item]) -> Totals:
    """Sum weight and value over `items`."""
    total_weight = 0.0
    total_value = 0.0
    for it in items:
        total_weight += it.weight
        total_value += it.value
    return Totals(weight=total_weight, value=total_value)


# ---------------------------------------------------------------------------
# 2) Selection KPIs
# ---------------------------------------------------------------------------
def compute_selection_metrics(
    catalog: ItemCatalog,
    subset: Subset,
    capacity: float,
) -> Dict[str, float]:
    """
    Returns:
      {
        "Total Value": ...,
        "Total Weight": ...,
        "Capacity": ...,
        "Utilization": ...,          # percent of capacity used (0..100)
        "Items Selected": ...,
        "Total Items": ...,
        "Selection Rate": ...,       # percent of catalog items selected (0..100)
        "Value Per Weight": ...,
        "Total Possible Value": ...,
      }
    """
    chosen = totals(subset)
    everything = totals(catalog)
    n_total = len(catalog)
    n_chosen = len(subset)

    cap = float(capacity)
    utilization = 0.0 if cap <= 0.0 else (chosen.weight / cap) * 100.0
    rate = 0.0 if n_total == 0 else (n_chosen / n_total) * 100.0
    vpw = 0.0 if chosen.weight == 0.0 else chosen.value / chosen.weight

    return {
        "Total Value": float(chosen.value),
        "Total Weight": float(chosen.weight),
        "Capacity": cap,
        "Utilization": float(utilization),
        "Items Selected": float(n_chosen),
        "Total Items": float(n_total),
        "Selection Rate": float(rate),
        "Value Per Weight": float(vpw),
        "Total Possible Value": float(everything.value),
    }


# ---------------------------------------------------------------------------
# 3) Cross-solver checks
# ---------------------------------------------------------------------------
def solutions_agree(a: Solution, b: Solution, tol: float = 1e-9) -> bool:
    """True when both solutions reach the same total value (membership may differ under ties)."""
    return abs(a.total_value - b.total_value) <= tol
