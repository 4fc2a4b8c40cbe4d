# -*- coding: utf-8 -*-
"""
I/O helpers for loading knapsack item catalogs.

Two formats are supported:

- Delimited text (default delimiter '^'), first line is a header:
      description^weight^value
      spicy chicken breast^6.5^310
- JSON array:
      [{"description": "...", "weight": <number>, "value": <number>}, ...]

Both map directly to:
- business_objects.items.Item
- business_objects.catalog.ItemCatalog

Rows with invalid values (non-numeric or non-finite numbers, empty description,
non-positive weight) are skipped with a warning. Structural problems
(wrong field count, not a JSON array, missing keys) abort the load.
"""

from __future__ import annotations
import json
import logging
import math
from typing import List, Optional

from knapsack01.business_objects.catalog import ItemCatalog
from knapsack01.business_objects.errors import SchemaError, StateValidationError
from knapsack01.business_objects.items import Item

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _require_number(obj: dict, key: str, path: str) -> float:
    raw = _require(obj, key, path)
    # bool is an int subclass; JSON true/false is not a weight
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaError(f"'{key}' must be a number, got {raw!r}")
    try:
        return float(raw)
    except OverflowError:
        return float("inf") if raw > 0 else float("-inf")


def _parse_float(field: str) -> Optional[float]:
    try:
        x = float(field)
    except ValueError:
        return None
    return x if math.isfinite(x) else None


def _make_item(description: str, weight: float, value: float, where: str) -> Optional[Item]:
    try:
        return Item(description=description, weight=weight, value=value)
    except StateValidationError as e:
        logger.warning("%s: skipping invalid item: %s", where, e)
        return None


def read_items_delimited(path: str, delimiter: str = "^") -> ItemCatalog:
    """
    Load items from a delimited text file. Each data row must have exactly
    three fields: description, weight, value.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise SchemaError(f"{path}: failed to read file: {e}") from e

    items: List[Item] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        # First line is a header row
        if line_number == 1 or not line.strip():
            continue

        fields = line.split(delimiter)
        if len(fields) != FIELD_COUNT:
            raise SchemaError(
                f"{path}:{line_number}: invalid field count; want {FIELD_COUNT} but got {len(fields)}. "
                f"Line: {line}"
            )

        description, weight_field, value_field = fields
        weight = _parse_float(weight_field)
        value = _parse_float(value_field)
        where = f"{path}:{line_number}"
        if weight is None or value is None:
            logger.warning("%s: skipping row with non-numeric or non-finite weight/value: %s", where, line)
            skipped += 1
            continue

        item = _make_item(description, weight, value, where)
        if item is None:
            skipped += 1
            continue
        items.append(item)

    logger.info("Loaded %d items from %s (%d skipped)", len(items), path, skipped)
    return ItemCatalog(items=items)


def read_items_json(path: str) -> ItemCatalog:
    """
    Load items from a JSON array. Each element must have:
      - description (str)
      - weight (number)
      - value (number)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    skipped = 0
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            description = _require(obj, "description", path)
            if not isinstance(description, str):
                raise SchemaError(f"'description' must be a string, got {description!r}")
            weight = _require_number(obj, "weight", path)
            value = _require_number(obj, "value", path)
        except ValueError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e

        where = f"{path}[{idx}]"
        if not (math.isfinite(weight) and math.isfinite(value)):
            logger.warning("%s: skipping row with non-numeric or non-finite weight/value: %s", where, obj)
            skipped += 1
            continue

        item = _make_item(description, weight, value, where)
        if item is None:
            skipped += 1
            continue
        items.append(item)

    logger.info("Loaded %d items from %s (%d skipped)", len(items), path, skipped)
    return ItemCatalog(items=items)
