from nrc.config import Settings
from nrc.storage.base import Store
from nrc.storage.csv_store import CsvStore
from nrc.storage.sql_store import SqlStore


def build_store(settings: Settings) -> Store:
    """Create the store selected by `settings.storage_backend`."""
    backend = settings.storage_backend.lower()
    if backend == "csv":
        return CsvStore(settings.data_dir)
    if backend == "sqlite":
        return SqlStore(settings.sqlite_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = ["Store", "CsvStore", "SqlStore", "build_store"]
