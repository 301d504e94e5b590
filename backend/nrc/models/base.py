"""
Table definitions and cell codecs.

Every record is a flat dict of strings. A `Table` names the file a record
lives in and fixes its column order; columns listed in `json_columns` hold
JSON-encoded lists or objects.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Table:
    name: str
    columns: tuple
    json_columns: frozenset = field(default_factory=frozenset)

    @property
    def filename(self) -> str:
        return f"{self.name}.csv"

    @property
    def header(self) -> str:
        return ",".join(self.columns)

    def has_column(self, column: str) -> bool:
        return column in self.columns


def encode_cell(value: Any) -> str:
    """Convert a Python value into the string stored in a single cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)


def encode_record(table: Table, record: dict) -> dict:
    """Project a record onto the table schema, encoding every cell."""
    return {column: encode_cell(record.get(column)) for column in table.columns}


# Decoding helpers used when shaping rows for the API

def json_cell(value: str, default=None):
    if not value:
        return [] if default is None else default
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return [] if default is None else default


def int_cell(value: str) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(float(value))
    except ValueError:
        return None


def float_cell(value: str) -> Optional[float]:
    if value in (None, ""):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def bool_cell(value: str) -> bool:
    return value == "true"


def str_cell(value: str) -> Optional[str]:
    return value or None
