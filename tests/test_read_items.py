# -*- coding: utf-8 -*-
import json
import logging

import pytest

from knapsack01.business_objects import SchemaError
from knapsack01.utils.read_items import read_items_delimited, read_items_json


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_delimited_skips_header_and_keeps_order(tmp_path):
    path = _write(
        tmp_path,
        "foods.txt",
        "description^weight_ounces^calories\n"
        "spicy chicken breast^6.5^310\n"
        "apple^3^95\n",
    )
    catalog = read_items_delimited(path)

    assert [it.description for it in catalog] == ["spicy chicken breast", "apple"]
    assert catalog[0].weight == 6.5
    assert catalog[0].value == 310


def test_delimited_skips_invalid_rows(tmp_path, caplog):
    path = _write(
        tmp_path,
        "foods.txt",
        "description^weight^value\n"
        "apple^3^95\n"
        "mystery^heavy^10\n"
        "air^0^5\n"
        "^2^40\n"
        "ghost^inf^1\n"
        "\n"
        "banana^4^105\n",
    )
    with caplog.at_level(logging.WARNING, logger="knapsack01.utils.read_items"):
        catalog = read_items_delimited(path)

    assert [it.description for it in catalog] == ["apple", "banana"]
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 4


def test_delimited_wrong_field_count_aborts(tmp_path):
    path = _write(tmp_path, "foods.txt", "d^w^v\napple^3^95\nbanana^4\n")
    with pytest.raises(SchemaError, match=":3:"):
        read_items_delimited(path)


def test_delimited_custom_delimiter(tmp_path):
    path = _write(tmp_path, "foods.csv", "description,weight,value\napple,3,95\n")
    catalog = read_items_delimited(path, delimiter=",")
    assert catalog[0].description == "apple"


def test_delimited_missing_file(tmp_path):
    with pytest.raises(SchemaError):
        read_items_delimited(str(tmp_path / "nope.txt"))


def test_delimited_header_only(tmp_path):
    path = _write(tmp_path, "foods.txt", "description^weight^value\n")
    assert read_items_delimited(path).is_empty()


def test_json_reader(tmp_path):
    rows = [
        {"description": "apple", "weight": 3, "value": 95},
        {"description": "air", "weight": 0, "value": 1},
        {"description": "banana", "weight": 4.5, "value": 105},
    ]
    path = _write(tmp_path, "items.json", json.dumps(rows))
    catalog = read_items_json(path)

    assert [it.description for it in catalog] == ["apple", "banana"]
    assert catalog[1].weight == 4.5


@pytest.mark.parametrize(
    "payload",
    [
        '{"description": "apple"}',
        '[1, 2, 3]',
        '[{"description": "apple", "weight": 3}]',
        '[{"description": "apple", "weight": "heavy", "value": 3}]',
        '[{"description": "apple", "weight": null, "value": 3}]',
        "not json at all",
    ],
)
def test_json_reader_schema_errors(tmp_path, payload):
    path = _write(tmp_path, "items.json", payload)
    with pytest.raises(SchemaError):
        read_items_json(path)


def test_json_reader_skips_non_finite_numbers(tmp_path, caplog):
    payload = (
        '[{"description": "a", "weight": 1, "value": NaN},'
        ' {"description": "b", "weight": Infinity, "value": 3},'
        ' {"description": "c", "weight": 2, "value": -Infinity},'
        ' {"description": "d", "weight": 2, "value": 7}]'
    )
    path = _write(tmp_path, "items.json", payload)
    with caplog.at_level(logging.WARNING, logger="knapsack01.utils.read_items"):
        catalog = read_items_json(path)

    assert [it.description for it in catalog] == ["d"]
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3


@pytest.mark.parametrize(
    "row",
    [
        '{"description": null, "weight": 2, "value": 3}',
        '{"description": 42, "weight": 2, "value": 3}',
        '{"description": "b", "weight": true, "value": 3}',
        '{"description": "b", "weight": 2, "value": false}',
        '{"description": "b", "weight": [2], "value": 3}',
    ],
)
def test_json_reader_rejects_wrong_field_types(tmp_path, row):
    path = _write(tmp_path, "items.json", f"[{row}]")
    with pytest.raises(SchemaError):
        read_items_json(path)
