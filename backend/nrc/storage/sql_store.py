"""
Embedded SQLite backend implementing the same store contract.

Each table definition maps to one SQL table of text columns with `id` as
primary key, so rows come back in exactly the shape the CSV backend yields.
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import Column, MetaData, String, Text, create_engine, delete, insert, select, update
from sqlalchemy import Table as SqlTable
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from nrc.clock import now_iso
from nrc.exceptions import StorageError
from nrc.models import ALL_TABLES, Table
from nrc.models.base import encode_cell, encode_record
from nrc.storage.base import Store

logger = logging.getLogger(__name__)


class SqlStore(Store):
    backend_name = "SQLite"

    def __init__(self, database_url: str, tables=ALL_TABLES):
        super().__init__(tables)
        self.database_url = database_url
        connect_args = {}
        if make_url(database_url).get_backend_name() == "sqlite":
            # Request handlers run in a thread pool
            connect_args["check_same_thread"] = False
        self.engine = create_engine(database_url, connect_args=connect_args)
        self.metadata = MetaData()
        self._sql_tables = {table.name: self._define(table) for table in self.tables}

    def _define(self, table: Table) -> SqlTable:
        columns = [Column("id", String(64), primary_key=True)]
        columns += [
            Column(name, Text, nullable=False, default="")
            for name in table.columns if name != "id"
        ]
        return SqlTable(table.name, self.metadata, *columns)

    @property
    def location(self) -> str:
        return self.database_url

    def initialize(self) -> None:
        database = make_url(self.database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        try:
            self.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not initialize database: {exc}") from exc

    def read_all(self, table: Table) -> list[dict]:
        sql_table = self._sql_tables[table.name]
        try:
            with self.engine.connect() as conn:
                result = conn.execute(select(sql_table))
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as exc:
            raise StorageError(f"Error reading {table.name}: {exc}") from exc

    def append(self, table: Table, record: dict) -> dict:
        row = encode_record(table, record)
        try:
            with self.engine.begin() as conn:
                conn.execute(insert(self._sql_tables[table.name]).values(**row))
        except SQLAlchemyError as exc:
            raise StorageError(f"Error writing to {table.name}: {exc}") from exc
        logger.info("Record %s written to %s", row.get("id"), table.name)
        return row

    def rewrite(self, table: Table, rows: list[dict]) -> None:
        sql_table = self._sql_tables[table.name]
        try:
            with self.engine.begin() as conn:
                conn.execute(delete(sql_table))
                if rows:
                    conn.execute(insert(sql_table), [encode_record(table, row) for row in rows])
        except SQLAlchemyError as exc:
            raise StorageError(f"Error rewriting {table.name}: {exc}") from exc

    def update(self, table: Table, record_id: str, changes: dict) -> Optional[dict]:
        sql_table = self._sql_tables[table.name]
        values = {k: encode_cell(v) for k, v in changes.items() if table.has_column(k) and k != "id"}
        if table.has_column("updated_at"):
            values["updated_at"] = now_iso()
        try:
            with self.engine.begin() as conn:
                if values:
                    result = conn.execute(
                        update(sql_table).where(sql_table.c.id == record_id).values(**values)
                    )
                    if result.rowcount == 0:
                        logger.warning("Record %s not found in %s", record_id, table.name)
                        return None
                row = conn.execute(select(sql_table).where(sql_table.c.id == record_id)).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"Error updating {table.name}: {exc}") from exc
        if row is None:
            return None
        logger.info("Updated record %s in %s", record_id, table.name)
        return dict(row._mapping)

    def delete(self, table: Table, record_id: str) -> bool:
        sql_table = self._sql_tables[table.name]
        try:
            with self.engine.begin() as conn:
                result = conn.execute(delete(sql_table).where(sql_table.c.id == record_id))
        except SQLAlchemyError as exc:
            raise StorageError(f"Error deleting from {table.name}: {exc}") from exc
        return result.rowcount > 0

    def find_by_id(self, table: Table, record_id: str) -> Optional[dict]:
        sql_table = self._sql_tables[table.name]
        try:
            with self.engine.connect() as conn:
                row = conn.execute(select(sql_table).where(sql_table.c.id == record_id)).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"Error reading {table.name}: {exc}") from exc
        return dict(row._mapping) if row else None

    def find_by_field(self, table: Table, field: str, value: str) -> list[dict]:
        if not table.has_column(field):
            return []
        sql_table = self._sql_tables[table.name]
        try:
            with self.engine.connect() as conn:
                result = conn.execute(select(sql_table).where(sql_table.c[field] == value))
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as exc:
            raise StorageError(f"Error reading {table.name}: {exc}") from exc

    def dispose(self) -> None:
        self.engine.dispose()
