"""
tables.py - Column descriptors and search/sort/paginate for admin tables
"""
import json
from dataclasses import dataclass
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class Column:
    key: str
    label: str = ""

    @property
    def header(self) -> str:
        return self.label or format_column_header(self.key)


def format_column_header(key: str) -> str:
    """'road_name' -> 'Road Name'"""
    return " ".join(word[:1].upper() + word[1:] for word in key.replace("_", " ").split(" "))


def format_cell_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


ROAD_COLUMNS: tuple[Column, ...] = (
    Column("id", "ID"),
    Column("road_name"),
    Column("location"),
    Column("start"),
    Column("end"),
    Column("vci", "VCI"),
    Column("condition"),
    Column("surface_type"),
    Column("updated_at"),
)

REPORT_COLUMNS: tuple[Column, ...] = (
    Column("id", "ID"),
    Column("road_name"),
    Column("vci_value", "VCI"),
    Column("surface_type"),
    Column("user_email"),
    Column("created_at"),
)


def describe_columns(columns: Iterable[Column]) -> list[dict[str, str]]:
    return [{"key": c.key, "header": c.header} for c in columns]


def filter_rows(rows: Sequence[dict], query: str | None, keys: Iterable[str]) -> list[dict]:
    """Case-insensitive substring match on any of the given keys."""
    if not query:
        return list(rows)
    needle = query.lower()
    keys = tuple(keys)
    return [
        row for row in rows
        if any(row.get(k) is not None and needle in str(row.get(k)).lower() for k in keys)
    ]


def sort_rows(rows: Sequence[dict], key: str | None, descending: bool = False) -> list[dict]:
    """Sort by one key; rows missing the key always go last."""
    if not key:
        return list(rows)
    present = [r for r in rows if r.get(key) is not None]
    missing = [r for r in rows if r.get(key) is None]

    def sort_key(row: dict):
        value = row[key]
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return (0, value, "")
        return (1, 0, str(value).lower())

    return sorted(present, key=sort_key, reverse=descending) + missing


def paginate(rows: Sequence[dict], limit: int, offset: int = 0) -> list[dict]:
    offset = max(0, offset)
    return list(rows[offset:offset + max(0, limit)])
