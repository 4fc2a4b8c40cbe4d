# -*- coding: utf-8 -*-
"""
Catalog filtering ahead of a solve.

Intended to:
  1) drop items whose value falls outside a caller-chosen band (typically
     zero or negative values, which can never improve an optimal selection)
  2) bound the input size fed to the exhaustive solver, whose cost doubles
     with every extra item
"""

from __future__ import annotations
import logging
from typing import List

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import InvalidArgumentError
from knapsack01.business_objects.items import Item

logger = logging.getLogger(__name__)


def filter_catalog(
    source: ItemCatalog,
    min_value: float,
    max_value: float,
    max_count: int,
) -> ItemCatalog:
    """
    Return a new catalog with the first `max_count` items whose value lies in
    [min_value, max_value] (inclusive at both ends).

    Parameters
    ----------
    source : ItemCatalog
        Catalog to scan, in order. Left untouched.
    min_value, max_value : float
        Inclusive value band.
    max_count : int
        Maximum number of items kept; scanning stops once it is reached.

    Returns
    -------
    ItemCatalog
        Matching items in source order, shared by reference.

    Raises
    ------
    InvalidArgumentError
        If max_count <= 0.
    """
    if max_count <= 0:
        raise InvalidArgumentError(f"max_count must be > 0, got {max_count}.")

    kept: List[Item] = []
    for item in source:
        if len(kept) >= max_count:
            break
        if min_value <= item.value <= max_value:
            kept.append(item)

    logger.debug(
        "Filtered catalog: kept %d of %d items (value in [%s, %s], max_count=%d)",
        len(kept), len(source), min_value, max_value, max_count,
    )
    return ItemCatalog(items=kept)
