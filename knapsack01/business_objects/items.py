# -*- coding: utf-8 -*-
"""
Item model for the 0/1 knapsack.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    A single selectable item, e.g. one food on the menu.

    Attributes
    ----------
    description : str
        Human-readable label, e.g. "spicy chicken breast". Must be non-empty.
    weight : float
        Capacity consumption if selected. Must be positive.
    value : float
        Objective contribution if selected. Expected to be >= 0; not enforced,
        so callers can keep negative rows around and filter them later.
    """
    description: str
    weight: float
    value: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("Item.description must be non-empty.")
        if not self.weight > 0:
            raise StateValidationError(f"Item[{self.description}] weight must be > 0.")
