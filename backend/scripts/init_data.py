"""
Initialize the data store: create every table and load the demo records.
Run with: python -m scripts.init_data
"""

from nrc.config import get_settings
from nrc.storage import SqlStore, build_store
from nrc.storage.seed import seed_sample_data


def init():
    settings = get_settings()
    store = build_store(settings)
    print(f"Creating {settings.storage_backend} tables at {store.location}...")
    store.initialize()
    if seed_sample_data(store):
        print("Sample data loaded.")
    else:
        print("Users already present, sample data skipped.")
    if isinstance(store, SqlStore):
        store.dispose()
    print("All tables created successfully.")


if __name__ == "__main__":
    init()
