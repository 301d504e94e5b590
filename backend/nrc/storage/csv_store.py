"""
Flat-file store: one CSV file per table inside the data directory.

Rows are appended in place; updates and deletes rewrite the whole file
through a temporary file that replaces the original. Fields containing a
comma, a double quote or a line break are quoted and inner quotes doubled,
so quoted fields may span lines.
"""

import csv
import logging
import os
import shutil
import tempfile
from pathlib import Path

from nrc.exceptions import StorageError
from nrc.models import ALL_TABLES, Table
from nrc.models.base import encode_record
from nrc.storage.base import Store

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\r\n"


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


DEFAULT_FILE_MODE = _default_file_mode()


class CsvStore(Store):
    backend_name = "CSV File Storage"

    def __init__(self, data_dir: str, tables=ALL_TABLES):
        super().__init__(tables)
        self.data_dir = Path(data_dir)

    @property
    def location(self) -> str:
        return str(self.data_dir.resolve())

    def path_for(self, table: Table) -> Path:
        return self.data_dir / table.filename

    def initialize(self) -> None:
        try:
            if not self.data_dir.exists():
                self.data_dir.mkdir(parents=True, exist_ok=True)
                logger.info("Created data directory %s", self.data_dir)
            for table in self.tables:
                path = self.path_for(table)
                if not path.exists():
                    self._write_rows(path, table, [])
                    logger.info("Created %s", table.filename)
        except OSError as exc:
            raise StorageError(f"Could not initialize data directory {self.data_dir}: {exc}") from exc

    def read_all(self, table: Table) -> list[dict]:
        path = self.path_for(table)
        if not path.exists():
            logger.warning("CSV file %s not found", table.filename)
            return []

        try:
            with open(path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                header = next(reader, None)
                if not header:
                    return []
                rows = []
                for values in reader:
                    if len(values) != len(header):
                        continue
                    row = dict.fromkeys(table.columns, "")
                    row.update(zip(header, values))
                    rows.append(row)
        except (OSError, csv.Error) as exc:
            raise StorageError(f"Error reading {table.filename}: {exc}") from exc

        logger.debug("Read %d records from %s", len(rows), table.filename)
        return rows

    def append(self, table: Table, record: dict) -> dict:
        path = self.path_for(table)
        row = encode_record(table, record)
        with self.lock:
            try:
                if not path.exists():
                    self._write_rows(path, table, [])
                with open(path, "a", newline="", encoding="utf-8") as f:
                    self._writer(f).writerow(row[column] for column in table.columns)
            except (OSError, csv.Error) as exc:
                raise StorageError(f"Error writing to {table.filename}: {exc}") from exc

        logger.info("Record %s written to %s", row.get("id"), table.filename)
        return row

    def rewrite(self, table: Table, rows: list[dict]) -> None:
        with self.lock:
            try:
                self._write_rows(self.path_for(table), table, rows)
            except (OSError, csv.Error) as exc:
                raise StorageError(f"Error rewriting {table.filename}: {exc}") from exc

    def _write_rows(self, path: Path, table: Table, rows: list[dict]) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{table.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                writer = self._writer(f)
                writer.writerow(table.columns)
                for row in rows:
                    encoded = encode_record(table, row)
                    writer.writerow(encoded[column] for column in table.columns)
            # mkstemp creates 0600 files
            if path.exists():
                shutil.copymode(path, tmp_path)
            else:
                os.chmod(tmp_path, DEFAULT_FILE_MODE)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    @staticmethod
    def _writer(f):
        return csv.writer(f, quoting=csv.QUOTE_MINIMAL, lineterminator=LINE_TERMINATOR)
