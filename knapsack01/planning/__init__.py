# -*- coding: utf-8 -*-
"""
Planning layer public API for the knapsack pipeline.

This module exposes the core planning-time data contracts:
  - Selection models (Subset, Solution)
  - Policy configuration
  - Catalog filtering

Solvers and the orchestrator (planning.solvers.*, planning.solve_orchestrator)
are intentionally not exported here to keep this import light. They should be
imported explicitly when needed.
"""

from .solution import Subset, Solution
from .policy import Policy
from .filtering import filter_catalog

__all__ = [
    "Subset",
    "Solution",
    "Policy",
    "filter_catalog",
]
