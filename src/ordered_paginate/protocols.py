"""Core protocols for ordered stores and item callbacks."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, Self, runtime_checkable

from ordered_paginate.datatypes import Item

# Called once per item; may return a plain value or an awaitable of one.
type Transformer[T] = Callable[[Item], T | Awaitable[T]]

# Called once per item in `for_each`; a truthy result requests a stop.
type Iterator = Callable[[Item], Any]


@runtime_checkable
class Query(Protocol):
    """An ordered query over the children of a reference.

    Bounds are inclusive. The optional `key` compounds the bound with a
    child key so a query can start (or end) in the middle of a run of
    children sharing the same order value. Builders return a new query.
    """

    def start_at(self, value: Any, key: str | None = None) -> Self:
        """Restrict to children ordered at or after `value` (and `key`)."""
        ...

    def end_at(self, value: Any, key: str | None = None) -> Self:
        """Restrict to children ordered at or before `value` (and `key`)."""
        ...

    def equal_to(self, value: Any) -> Self:
        """Restrict to children whose order value equals `value`."""
        ...

    def limit_to_first(self, limit: int) -> Self:
        """Return at most the first `limit` matching children."""
        ...

    async def fetch(self) -> Sequence[Item]:
        """Run the query and return matching children in ascending order."""
        ...


@runtime_checkable
class Reference(Protocol):
    """A keyed collection in a remote ordered store."""

    def order_by_key(self) -> Query:
        """Query ordered by child key."""
        ...

    def order_by_value(self) -> Query:
        """Query ordered by whole child value, ties broken by key."""
        ...

    def order_by_child(self, path: str) -> Query:
        """Query ordered by the value at `path` below each child, ties broken by key."""
        ...

    async def child(self, key: str) -> Item | None:
        """Fetch a single child by key, or None if absent."""
        ...
