# -*- coding: utf-8 -*-
"""
Common exceptions for the knapsack01 package.

Every error derives from ValueError so callers can catch the whole family
with a single clause, or pick out the specific failure they care about.
"""


class SchemaError(ValueError):
    """Raised when an input file (delimited text/JSON) violates the expected schema."""


class StateValidationError(ValueError):
    """Raised when an item, catalog or subset violates domain constraints."""


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a nonsensical parameter (e.g. max_count <= 0)."""


class PreconditionViolationError(ValueError):
    """Raised when an input is valid but too large or too coarse for the chosen algorithm."""
