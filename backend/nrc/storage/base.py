"""
Store contract shared by the CSV and SQLite backends.

A store reads and writes flat string records keyed by `Table`. Backends
implement `read_all`, `append` and `rewrite`; the query and update helpers
are expressed on top of those and may be overridden with native versions.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

from nrc.clock import now_iso
from nrc.models import ALL_TABLES, Table
from nrc.models.base import encode_cell, encode_record

logger = logging.getLogger(__name__)


class Store(ABC):
    backend_name = ""

    def __init__(self, tables=ALL_TABLES):
        self.tables = tuple(tables)
        self.lock = threading.RLock()

    def initialize(self) -> None:
        """Create whatever the backend needs for every table."""

    @property
    def location(self) -> str:
        return ""

    @abstractmethod
    def read_all(self, table: Table) -> list[dict]:
        ...

    @abstractmethod
    def append(self, table: Table, record: dict) -> dict:
        ...

    @abstractmethod
    def rewrite(self, table: Table, rows: list[dict]) -> None:
        ...

    def update(self, table: Table, record_id: str, changes: dict) -> Optional[dict]:
        """Merge `changes` into the row with `record_id`; None when absent."""
        with self.lock:
            rows = self.read_all(table)
            for index, row in enumerate(rows):
                if row.get("id") == record_id:
                    break
            else:
                logger.warning("Record %s not found in %s", record_id, table.filename)
                return None

            merged = {**row, **{k: encode_cell(v) for k, v in changes.items()}}
            if table.has_column("updated_at"):
                merged["updated_at"] = now_iso()
            rows[index] = merged
            self.rewrite(table, rows)
        logger.info("Updated record %s in %s", record_id, table.filename)
        return encode_record(table, merged)

    def delete(self, table: Table, record_id: str) -> bool:
        with self.lock:
            rows = self.read_all(table)
            remaining = [row for row in rows if row.get("id") != record_id]
            if len(remaining) == len(rows):
                logger.warning("Record %s not found in %s", record_id, table.filename)
                return False
            self.rewrite(table, remaining)
        logger.info("Deleted record %s from %s", record_id, table.filename)
        return True

    def find_by_id(self, table: Table, record_id: str) -> Optional[dict]:
        return next((row for row in self.read_all(table) if row.get("id") == record_id), None)

    def find_by_field(self, table: Table, field: str, value: str) -> list[dict]:
        return [row for row in self.read_all(table) if row.get(field) == value]

    def find_one(self, table: Table, criteria: dict) -> Optional[dict]:
        for row in self.read_all(table):
            if all(row.get(key) == value for key, value in criteria.items()):
                return row
        return None

    def count(self, table: Table) -> int:
        return len(self.read_all(table))

    def is_empty(self, table: Table) -> bool:
        return self.count(table) == 0
