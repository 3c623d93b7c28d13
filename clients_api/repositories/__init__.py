"""
Persistence adapters.

Each module implements ClientRepository for one medium (JSON file, process
memory, SQL). Services depend on the interface; the backend is picked once at
startup by build_repository().
"""

from __future__ import annotations

from clients_api.core.config import Settings
from clients_api.repositories.base import ClientRepository, StorageError
from clients_api.repositories.json_storage import JSONFileRepository
from clients_api.repositories.memory_storage import InMemoryRepository

STORAGE_BACKENDS = ("file", "memory", "sql")


def build_repository(settings: Settings) -> ClientRepository:
    backend = settings.storage_backend
    if backend == "file":
        return JSONFileRepository(settings.data_file)
    if backend == "memory":
        return InMemoryRepository()
    if backend == "sql":
        from clients_api.db.session import create_tables
        from clients_api.repositories.sql_repository import SQLRepository

        create_tables(settings.database_url)
        return SQLRepository(settings.database_url)
    raise ValueError(f"unknown storage backend: {backend!r}; expected one of {STORAGE_BACKENDS}")


__all__ = [
    "ClientRepository",
    "StorageError",
    "JSONFileRepository",
    "InMemoryRepository",
    "STORAGE_BACKENDS",
    "build_repository",
]
