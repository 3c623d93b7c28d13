"""
High-level use cases for the Clients API.

Routers call these services instead of touching a repository directly; the
service owns the lock that serializes access to the shared store.
"""
