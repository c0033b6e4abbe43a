"""In-process ordered store.

Children order the way keyed document stores order them:
null < false < true < numbers < strings < objects, ties broken by key, and
keys that look like 32-bit integers sort numerically ahead of other keys.
"""

import asyncio
import re
from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, ClassVar, Self

from ordered_paginate.datatypes import Item, JsonValue

type Position = tuple[Any, ...]

_INT_KEY = re.compile(r"0|-?[1-9][0-9]*")


def key_rank(key: str) -> Position:
    """Sort position of a child key."""
    if _INT_KEY.fullmatch(key):
        number = int(key)
        if -(2**31) <= number < 2**31:
            return (0, number)
    return (1, key)


def value_rank(value: Any) -> Position:
    """Sort position of an order value."""
    if value is None:
        return (0,)
    if isinstance(value, bool):
        return (1, value)
    if isinstance(value, int | float):
        return (2, value)
    if isinstance(value, str):
        return (3, value)
    return (4,)


class MemoryQuery:
    """Ordered query over a snapshot of a `MemoryReference`."""

    __slots__: ClassVar[tuple[str, ...]] = (
        "_by_key",
        "_extract",
        "_limit",
        "_lower",
        "_ref",
        "_upper",
    )

    _ref: "MemoryReference"
    _by_key: bool
    _extract: Callable[[Item], Any]
    _lower: Position | None
    _upper: Position | None
    _limit: int | None

    def __init__(
        self,
        ref: "MemoryReference",
        extract: Callable[[Item], Any] | None = None,
        lower: Position | None = None,
        upper: Position | None = None,
        limit: int | None = None,
    ) -> None:
        self._ref = ref
        self._by_key = extract is None
        self._extract = extract or (lambda item: item.key)
        self._lower = lower
        self._upper = upper
        self._limit = limit

    def _with(self, **changes: Any) -> Self:
        state = {
            "extract": None if self._by_key else self._extract,
            "lower": self._lower,
            "upper": self._upper,
            "limit": self._limit,
        }
        state.update(changes)
        return type(self)(self._ref, **state)

    def _bound(self, value: Any, key: str | None) -> Position:
        if self._by_key:
            return (key_rank(str(value)),)
        if key is None:
            return (value_rank(value),)
        return (value_rank(value), key_rank(key))

    def position(self, item: Item) -> Position:
        if self._by_key:
            return (key_rank(item.key),)
        return (value_rank(self._extract(item)), key_rank(item.key))

    def start_at(self, value: Any, key: str | None = None) -> Self:
        return self._with(lower=self._bound(value, key))

    def end_at(self, value: Any, key: str | None = None) -> Self:
        return self._with(upper=self._bound(value, key))

    def equal_to(self, value: Any) -> Self:
        bound = self._bound(value, None)
        return self._with(lower=bound, upper=bound)

    def limit_to_first(self, limit: int) -> Self:
        return self._with(limit=limit)

    def _matches(self, position: Position) -> bool:
        if self._lower is not None and position[: len(self._lower)] < self._lower:
            return False
        return self._upper is None or position[: len(self._upper)] <= self._upper

    async def fetch(self) -> Sequence[Item]:
        self._ref.queries.append(self)
        await asyncio.sleep(0)
        ordered = sorted(self._ref.items(), key=self.position)
        matched = [item for item in ordered if self._matches(self.position(item))]
        return matched if self._limit is None else matched[: self._limit]


class MemoryReference:
    """A keyed collection held in a mutable mapping.

    The mapping is read on every query, so changes made between pages are
    visible to later pages. `queries` and `lookups` record what was asked of
    the store.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_data", "lookups", "queries")

    _data: MutableMapping[str, JsonValue]
    queries: list[MemoryQuery]
    lookups: list[str]

    def __init__(self, data: MutableMapping[str, JsonValue] | None = None) -> None:
        self._data = {} if data is None else data
        self.queries = []
        self.lookups = []

    def items(self) -> list[Item]:
        # Null children do not exist
        return [Item(key=k, value=v) for k, v in self._data.items() if v is not None]

    def order_by_key(self) -> MemoryQuery:
        return MemoryQuery(self)

    def order_by_value(self) -> MemoryQuery:
        return MemoryQuery(self, lambda item: item.value)

    def order_by_child(self, path: str) -> MemoryQuery:
        return MemoryQuery(self, lambda item: item.child(path))

    async def child(self, key: str) -> Item | None:
        self.lookups.append(key)
        await asyncio.sleep(0)
        value = self._data.get(key)
        return None if value is None else Item(key=key, value=value)


Provider = MemoryReference
