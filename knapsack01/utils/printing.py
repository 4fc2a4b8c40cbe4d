# -*- coding: utf-8 -*-
"""
Console formatting for selections and solver results.

format_* helpers return plain strings (easy to test); print_* helpers write
them to stdout.
"""

from __future__ import annotations
from typing import Iterable, List

from knapsack01.business_objects.items import Item
from knapsack01.planning.solution import Solution
from knapsack01.quality_metrics.core import totals


def format_items(items: Iterable[Item]) -> str:
    """
    One line per item followed by the grand totals, e.g.

        *** item list ***
        spicy chicken breast ==> weight 6.5; value 310
        > Grand total weight: 6.5
        > Grand total value: 310
    """
    items = list(items)
    lines: List[str] = ["*** item list ***"]
    if not items:
        lines.append("[empty item list]")
        return "\n".join(lines)

    for it in items:
        lines.append(f"{it.description} ==> weight {it.weight:g}; value {it.value:g}")

    agg = totals(items)
    lines.append(f"> Grand total weight: {agg.weight:g}")
    lines.append(f"> Grand total value: {agg.value:g}")
    return "\n".join(lines)


def format_solution(solution: Solution) -> str:
    header = (
        f"=== {solution.method} (capacity {solution.capacity:g}, "
        f"{solution.elapsed_seconds:.6f}s) ==="
    )
    return header + "\n" + format_items(solution.subset)


def print_items(items: Iterable[Item]) -> None:
    print(format_items(items))


def print_solution(solution: Solution) -> None:
    print(format_solution(solution))
