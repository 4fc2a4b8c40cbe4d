# -*- coding: utf-8 -*-
"""
Selection and solution models for knapsack planning results.

These data classes define the shape of outputs produced by the solvers
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Set, Tuple

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import StateValidationError
from knapsack01.business_objects.items import Item


@dataclass(frozen=True)
class Subset:
    """
    A 0/1 selection of catalog items, stored as positions into the catalog.

    Attributes
    ----------
    catalog : ItemCatalog
        The catalog the selection borrows from. Never copied.
    indices : tuple[int, ...]
        Catalog positions of the selected items, in selection order.
        Each position appears at most once.
    """
    catalog: ItemCatalog
    indices: Tuple[int, ...] = ()

    def __post_init__(self) -> None:  # type: ignore[override]
        indices = tuple(self.indices)
        n = len(self.catalog)
        seen: Set[int] = set()
        for idx in indices:
            if not 0 <= idx < n:
                raise StateValidationError(f"Subset index {idx} out of range for catalog of size {n}.")
            if idx in seen:
                raise StateValidationError(f"Duplicate Subset index: {idx}")
            seen.add(idx)
        object.__setattr__(self, "indices", indices)

    @classmethod
    def empty(cls, catalog: ItemCatalog) -> "Subset":
        return cls(catalog=catalog, indices=())

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[Item]:
        for idx in self.indices:
            yield self.catalog[idx]

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self)

    def is_empty(self) -> bool:
        return not self.indices


@dataclass(frozen=True)
class Solution:
    """
    Outcome of a single solver run.

    Attributes
    ----------
    method : str
        Registered solver name (e.g. "exhaustive", "dynamic").
    subset : Subset
        The selected items.
    capacity : float
        Capacity the solver was given.
    total_weight : float
        Sum of weights of the selected items.
    total_value : float
        Sum of values of the selected items.
    elapsed_seconds : float
        Wall-clock solve time.
    """
    method: str
    subset: Subset
    capacity: float
    total_weight: float
    total_value: float
    elapsed_seconds: float = 0.0
