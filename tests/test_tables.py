"""Unit tests for admin table helpers"""
from vci.tables import (
    ROAD_COLUMNS,
    Column,
    describe_columns,
    filter_rows,
    format_cell_value,
    format_column_header,
    paginate,
    sort_rows,
)

ROWS = [
    {"id": "a", "road_name": "Burgos Avenue", "vci": 5.7},
    {"id": "b", "road_name": "Sanctuary Road", "vci": None},
    {"id": "c", "road_name": "Maharlika Highway", "vci": 78.2},
    {"id": "d", "road_name": "bypass road", "vci": 44.1},
]


def test_format_column_header():
    assert format_column_header("road_name") == "Road Name"
    assert format_column_header("surface_type") == "Surface Type"
    assert Column("vci", "VCI").header == "VCI"
    assert Column("updated_at").header == "Updated At"


def test_format_cell_value():
    assert format_cell_value(None) == "-"
    assert format_cell_value(True) == "Yes"
    assert format_cell_value(False) == "No"
    assert format_cell_value({"rows": 2}) == '{"rows": 2}'
    assert format_cell_value(44.1) == "44.1"


def test_describe_columns_is_explicit():
    described = describe_columns(ROAD_COLUMNS)
    assert described[0] == {"key": "id", "header": "ID"}
    assert [c["key"] for c in described] == [c.key for c in ROAD_COLUMNS]


def test_filter_rows_case_insensitive():
    assert [r["id"] for r in filter_rows(ROWS, "ROAD", ["road_name"])] == ["b", "d"]
    assert filter_rows(ROWS, "", ["road_name"]) == ROWS


def test_sort_rows_missing_last():
    assert [r["id"] for r in sort_rows(ROWS, "vci")] == ["a", "d", "c", "b"]
    assert [r["id"] for r in sort_rows(ROWS, "vci", descending=True)] == ["c", "d", "a", "b"]
    assert [r["id"] for r in sort_rows(ROWS, "road_name")] == ["a", "d", "c", "b"]


def test_paginate():
    assert [r["id"] for r in paginate(ROWS, 2, 1)] == ["b", "c"]
    assert paginate(ROWS, 10, 10) == []
