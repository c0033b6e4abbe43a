"""Applies caller callbacks to the items of a page."""

import asyncio
import inspect
from collections.abc import Sequence

from ordered_paginate.datatypes import Item
from ordered_paginate.protocols import Iterator, Transformer


class StopSignal:
    """Stop flag shared between a `for_each` run and its pipeline."""

    __slots__ = ("requested",)

    def __init__(self) -> None:
        self.requested = False

    def request(self) -> None:
        self.requested = True


async def _apply[T](transformer: Transformer[T], item: Item) -> T:
    result = transformer(item)
    if inspect.isawaitable(result):
        return await result
    return result


async def transform_concurrently[T](items: Sequence[Item], transformer: Transformer[T]) -> list[T]:
    """Transform every item concurrently and return results in item order.

    Transformers are started in item order. The first failure propagates
    as-is and the transforms still running are cancelled.
    """
    if not items:
        return []
    tasks = [asyncio.ensure_future(_apply(transformer, item)) for item in items]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def transform_serially(items: Sequence[Item], iterator: Iterator, signal: StopSignal) -> None:
    """Call `iterator` on each item in turn until it returns something truthy."""
    for item in items:
        if await _apply(iterator, item):
            signal.request()
            return
