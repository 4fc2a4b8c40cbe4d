# -*- coding: utf-8 -*-
"""
Catalog model: the ordered, read-only pool of items a selection is drawn from.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Tuple, Union, overload

from .errors import StateValidationError
from .items import Item

if TYPE_CHECKING:  # pragma: no cover
    from knapsack01.planning.solution import Subset


@dataclass(frozen=True)
class ItemCatalog:
    """
    Immutable ordered collection of items.

    Attributes
    ----------
    items : tuple[Item, ...]
        Items in insertion order (file order, minus skipped rows).
        Any iterable is accepted and frozen into a tuple.

    Notes
    -----
    Items are shared by reference: filtered catalogs and solver subsets point
    at the same Item objects rather than copies.
    """
    items: Tuple[Item, ...] = ()

    def __post_init__(self) -> None:  # type: ignore[override]
        items = tuple(self.items)
        for idx, it in enumerate(items):
            if not isinstance(it, Item):
                raise StateValidationError(f"Catalog[{idx}] is not an Item: {it!r}")
            if not it.description:
                raise StateValidationError(f"Catalog[{idx}] has an empty description.")
            if not it.weight > 0:
                raise StateValidationError(f"Catalog[{idx}] ({it.description}) weight must be > 0.")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    @overload
    def __getitem__(self, index: int) -> Item: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Item, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Item, Tuple[Item, ...]]:
        return self.items[index]

    def size(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def subset(self, indices: Iterable[int]) -> "Subset":
        """Build a Subset view over this catalog from item positions."""
        from knapsack01.planning.solution import Subset

        return Subset(catalog=self, indices=tuple(indices))
