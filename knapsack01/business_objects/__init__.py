# -*- coding: utf-8 -*-
"""
Public exports for the business objects layer.
"""

from .errors import (
    SchemaError,
    StateValidationError,
    InvalidArgumentError,
    PreconditionViolationError,
)
from .items import Item
from .catalog import ItemCatalog

__all__ = [
    # errors
    "SchemaError",
    "StateValidationError",
    "InvalidArgumentError",
    "PreconditionViolationError",
    # core models
    "Item",
    "ItemCatalog",
]
