# -*- coding: utf-8 -*-
"""
Shared fixtures for the knapsack01 test suite.
"""

from __future__ import annotations
from typing import Sequence, Tuple

import pytest

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.items import Item


def _build_catalog(pairs: Sequence[Tuple[float, float]]) -> ItemCatalog:
    """Build a catalog from (weight, value) pairs; descriptions are item0, item1, ..."""
    return ItemCatalog(items=[Item(f"item{i}", w, v) for i, (w, v) in enumerate(pairs)])


@pytest.fixture
def make_catalog():
    """Factory fixture: make_catalog([(weight, value), ...]) -> ItemCatalog."""
    return _build_catalog


@pytest.fixture
def textbook_catalog() -> ItemCatalog:
    return _build_catalog([(2, 3), (3, 4), (4, 5), (5, 6)])


@pytest.fixture
def empty_catalog() -> ItemCatalog:
    return ItemCatalog()
