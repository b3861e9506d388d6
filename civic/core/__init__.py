"""
Core utilities shared across the civic API.

This package hosts configuration (env vars, feature flags), logging setup,
the request rate limiter and small clock/identifier helpers. Services and
routers depend on these primitives instead of reading the environment.
"""
