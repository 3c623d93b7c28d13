"""
Configuration helpers for the Clients API.

Settings are read from environment variables once and cached, so that
routers/services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    storage_backend: str
    data_file: str
    database_url: str
    id_strategy: str
    host: str
    port: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _name(value: str | None, default: str) -> str:
        return (value or default).strip().lower()

    return Settings(
        storage_backend=_name(os.getenv("CLIENTS_STORAGE"), "file"),
        data_file=os.getenv("CLIENTS_DATA_FILE", "clients.json"),
        database_url=os.getenv("DATABASE_URL", "sqlite:///clients.db"),
        id_strategy=_name(os.getenv("CLIENTS_ID_STRATEGY"), "max"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
