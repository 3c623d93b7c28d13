"""Engine/session helpers for the SQL client backend, one engine per database URL."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


@lru_cache
def get_engine(url: str) -> Engine:
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be set when CLIENTS_STORAGE=sql.")
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)


@lru_cache
def _get_sessionmaker(url: str):
    return sessionmaker(bind=get_engine(url), autoflush=False, expire_on_commit=False, future=True)


def create_tables(url: str) -> None:
    from . import models  # noqa: F401  # registers ClientRow on Base.metadata

    Base.metadata.create_all(bind=get_engine(url))


@contextmanager
def get_session(url: str) -> Session:
    session: Session = _get_sessionmaker(url)()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
