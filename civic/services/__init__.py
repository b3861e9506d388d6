"""
High-level use cases for the civic API.

Routers (FastAPI endpoints) call these services instead of touching the
repository directly; not-found lookups surface as service exceptions.
"""
