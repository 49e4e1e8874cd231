from .store import Store
from .json_store import JsonFileStore
from .sqlite_store import SqliteStore


def create_store(settings) -> Store:
    """Build the store selected by ``STORE_BACKEND``"""
    if settings.STORE_BACKEND == "json":
        return JsonFileStore(settings.DATA_FILE)
    if settings.STORE_BACKEND == "sqlite":
        return SqliteStore(settings.SQLITE_PATH)
    raise ValueError(f"Unknown STORE_BACKEND: {settings.STORE_BACKEND!r}")


__all__ = [
    "Store",
    "JsonFileStore",
    "SqliteStore",
    "create_store",
]
