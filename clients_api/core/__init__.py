"""
Core utilities shared across the Clients API.

This package hosts configuration helpers (env vars, storage selection) and
the logging setup. Routers, services and repositories depend on these
primitives instead of reading the environment themselves.
"""
