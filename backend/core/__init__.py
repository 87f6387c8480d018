"""
Core utilities shared across the users backend.

This package hosts:
- configuration helpers (env vars)
- logging setup for scripts

Storage and service modules should depend on these primitives instead of
reading os.environ or configuring handlers themselves.
"""
