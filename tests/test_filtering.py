# -*- coding: utf-8 -*-
import pytest

from knapsack01.business_objects import InvalidArgumentError
from knapsack01.planning.filtering import filter_catalog


@pytest.fixture
def value_catalog(make_catalog):
    return make_catalog([(1, 5), (2, 50), (3, 10), (4, 200), (5, 15)])


def test_filter_keeps_first_matches_in_source_order(value_catalog):
    out = filter_catalog(value_catalog, min_value=10, max_value=100, max_count=2)

    assert [it.value for it in out] == [50, 10]
    assert out[0] is value_catalog[1]
    assert out[1] is value_catalog[2]


def test_filter_bounds_are_inclusive(value_catalog):
    out = filter_catalog(value_catalog, min_value=10, max_value=50, max_count=10)
    assert [it.value for it in out] == [50, 10, 15]


def test_filter_leaves_source_untouched(value_catalog):
    before = value_catalog.items
    filter_catalog(value_catalog, min_value=0, max_value=1000, max_count=1)
    assert value_catalog.items == before
    assert len(value_catalog) == 5


def test_filter_max_count_larger_than_matches(value_catalog):
    out = filter_catalog(value_catalog, min_value=0, max_value=1000, max_count=99)
    assert len(out) == 5


def test_filter_with_inverted_band_is_empty(value_catalog):
    out = filter_catalog(value_catalog, min_value=100, max_value=10, max_count=3)
    assert out.is_empty()


def test_filter_excludes_non_positive_values(make_catalog):
    catalog = make_catalog([(1, 0), (1, -4), (1, 7)])
    out = filter_catalog(catalog, min_value=1e-9, max_value=float("inf"), max_count=5)
    assert [it.value for it in out] == [7]


@pytest.mark.parametrize("max_count", [0, -1])
def test_filter_rejects_non_positive_max_count(value_catalog, max_count):
    with pytest.raises(InvalidArgumentError):
        filter_catalog(value_catalog, min_value=0, max_value=100, max_count=max_count)
