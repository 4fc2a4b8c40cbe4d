# -*- coding: utf-8 -*-
import logging

import pytest

from knapsack01.business_objects import InvalidArgumentError, PreconditionViolationError
from knapsack01.planning import Policy
from knapsack01.planning.solve_orchestrator import SOLVERS, run_pipeline, solve


def test_registry_names():
    assert set(SOLVERS) == {"exhaustive", "dynamic"}


@pytest.mark.parametrize("method", ["exhaustive", "dynamic"])
def test_solve_builds_solution(textbook_catalog, method):
    sol = solve(textbook_catalog, 5, method)

    assert sol.method == method
    assert sol.capacity == 5
    assert sol.total_value == 7
    assert sol.total_weight == 5
    assert sol.elapsed_seconds >= 0.0
    assert sol.subset.catalog is textbook_catalog


def test_solve_unknown_method(textbook_catalog):
    with pytest.raises(InvalidArgumentError):
        solve(textbook_catalog, 5, "greedy")


def test_pipeline_runs_every_method(textbook_catalog):
    solutions = run_pipeline(textbook_catalog, 5)

    assert list(solutions) == ["exhaustive", "dynamic"]
    assert {s.total_value for s in solutions.values()} == {7}


def test_pipeline_filters_before_solving(make_catalog):
    catalog = make_catalog([(1, 1)] * 70 + [(1, 0)])
    solutions = run_pipeline(catalog, 5, Policy(min_value=1, max_count=10))

    for sol in solutions.values():
        assert len(sol.subset.catalog) == 10
        assert sol.total_value == 5


def test_pipeline_without_filter_hits_exhaustive_limit(make_catalog):
    catalog = make_catalog([(1, 1)] * 64)
    with pytest.raises(PreconditionViolationError):
        run_pipeline(catalog, 5, Policy(max_count=None))


def test_pipeline_dynamic_only_needs_no_filter(make_catalog):
    catalog = make_catalog([(1, 1)] * 64)
    solutions = run_pipeline(catalog, 5, Policy(max_count=None, methods=("dynamic",)))
    assert solutions["dynamic"].total_value == 5


def test_pipeline_warns_on_disagreement(make_catalog, caplog):
    catalog = make_catalog([(1.2, 5), (1.2, 5)])
    with caplog.at_level(logging.WARNING, logger="knapsack01.planning.solve_orchestrator"):
        solutions = run_pipeline(catalog, 3, Policy(max_count=None))

    assert solutions["exhaustive"].total_value == 10
    assert solutions["dynamic"].total_value == 5
    assert any("disagree" in r.getMessage() for r in caplog.records)


def test_pipeline_agreement_check_can_be_disabled(make_catalog, caplog):
    catalog = make_catalog([(1.2, 5), (1.2, 5)])
    with caplog.at_level(logging.WARNING, logger="knapsack01.planning.solve_orchestrator"):
        run_pipeline(catalog, 3, Policy(max_count=None, check_agreement=False))

    assert not any("disagree" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_count": 0},
        {"max_count": -3},
        {"methods": ()},
        {"methods": ("greedy",)},
        {"value_tolerance": -1.0},
    ],
)
def test_policy_validation(kwargs):
    with pytest.raises(InvalidArgumentError):
        Policy(**kwargs)
