# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the knapsack solve pipeline.

Filtering (applied before any solver runs):
  - min_value / max_value: inclusive value band an item must fall into
  - max_count: keep only the first max_count matching items; None disables
    filtering altogether

Solving:
  - methods: registered solver names, run in the given order. Allowed:
      * "exhaustive" (all subsets; needs fewer than 64 items)
      * "dynamic"    (DP table; needs an integral capacity)
  - check_agreement: log a warning when two solvers disagree on total value
  - value_tolerance: absolute tolerance used by that comparison
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from knapsack01.business_objects.errors import InvalidArgumentError

KNOWN_METHODS: Tuple[str, ...] = ("exhaustive", "dynamic")


@dataclass(frozen=True)
class Policy:
    """
    Pipeline knobs (pure data holder).

    Attributes
    ----------
    # Filtering
    min_value : float
        Lowest accepted item value (inclusive). The default keeps non-negative values.
    max_value : float
        Highest accepted item value (inclusive).
    max_count : int | None
        Maximum number of items to keep after filtering. None skips the filter.

    # Solving
    methods : tuple[str, ...]
        Solvers to run, in order.
    check_agreement : bool
        Compare total values across solvers and warn on mismatch.
    value_tolerance : float
        Absolute tolerance for that comparison.
    """
    # Filtering
    min_value: float = 0.0
    max_value: float = float("inf")
    max_count: Optional[int] = 20

    # Solving
    methods: Tuple[str, ...] = KNOWN_METHODS
    check_agreement: bool = True
    value_tolerance: float = 1e-9

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.max_count is not None and self.max_count <= 0:
            raise InvalidArgumentError(f"Policy.max_count must be > 0 or None, got {self.max_count}.")
        if not self.methods:
            raise InvalidArgumentError("Policy.methods must name at least one solver.")
        unknown = [m for m in self.methods if m not in KNOWN_METHODS]
        if unknown:
            raise InvalidArgumentError(f"Unknown solver method(s): {unknown}; allowed: {list(KNOWN_METHODS)}")
        if self.value_tolerance < 0:
            raise InvalidArgumentError("Policy.value_tolerance must be >= 0.")
