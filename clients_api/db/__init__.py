"""SQL backend plumbing: engine, sessions and the clients table."""

from .session import Base, create_tables, get_engine, get_session

__all__ = ["Base", "create_tables", "get_engine", "get_session"]
