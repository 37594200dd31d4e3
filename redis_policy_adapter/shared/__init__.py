"""
Shared utilities for the Redis policy adapter.

This package aggregates the ambient building blocks used across the
adapter:

- config: Adapter configuration via pydantic-settings
- logging: Structured logging with structlog
- errors: Canonical error types and responses

Keep this package free of imports from the rules/store/adapter modules
to avoid import cycles.
"""
