"""Ordered store implementations of `Reference`.

Each provider module exports a `Provider` class alias for its main class.

Available providers:
- memory: in-process mapping, no dependencies
- postgres: PostgreSQL via asyncpg (requires the `postgres` extra)
"""

from ordered_paginate.providers import memory

__all__ = [
    "memory",
]
