"""Pagination driver and public entry points.

Walks an ordered collection with bounded range queries, one page at a
time, resuming each page from the last item of the one before:

    items = await by_key(reference, 100)
    names = await by_field.transformed(reference, "name", 50, lambda item: item.key)
    stopped = await by_value.for_each(reference, 20, visit, {"start_at": 10})
"""

import logging
import warnings
from collections.abc import Mapping
from typing import Any

from ordered_paginate.contexts import Cursor
from ordered_paginate.cursor import advance
from ordered_paginate.datatypes import Item
from ordered_paginate.errors import InvalidPageSizeError, PageSizeWarning
from ordered_paginate.fetcher import fetch_page
from ordered_paginate.ordering import OrderByField, OrderByKey, OrderByValue, OrderingMode
from ordered_paginate.params import RangeLimits, normalize_limits
from ordered_paginate.pipeline import StopSignal, transform_concurrently, transform_serially
from ordered_paginate.protocols import Iterator, Reference, Transformer

logger = logging.getLogger(__name__)

type Limits = RangeLimits | Mapping[str, Any] | None


async def paginate(
    reference: Reference,
    ordering: OrderingMode,
    max_page_size: int,
    limits: Limits = None,
    *,
    transformer: Transformer[Any] | None = None,
    signal: StopSignal | None = None,
    caller: str = "paginate",
    stacklevel: int = 2,
) -> list[Any]:
    """Return every item of `reference` within `limits`, in collection order.

    With a `transformer`, items are replaced by its results. When `signal` is
    given the transformer is run serially as a `for_each` iterator instead,
    nothing is accumulated, and the run ends as soon as the signal is set.

    `caller` names the public entry point in errors and warnings, and
    `stacklevel` is forwarded to `warnings.warn` so advisories point at the
    caller's line.
    """
    if isinstance(max_page_size, bool) or not isinstance(max_page_size, int) or max_page_size <= 1:
        raise InvalidPageSizeError(caller, max_page_size)
    if max_page_size == 2:
        warnings.warn(
            f"{caller}: max_page_size of {max_page_size} is inefficient "
            "and will only result in a single new item on each query",
            PageSizeWarning,
            stacklevel=stacklevel,
        )

    bounds = normalize_limits(limits)
    cursor: Cursor | None = Cursor(start_value=bounds.start_at)
    results: list[Any] = []
    pages = 0

    while cursor is not None:
        page = await fetch_page(reference, ordering, bounds, cursor, max_page_size)
        pages += 1
        items, next_cursor = advance(page, cursor, ordering)
        logger.debug(
            "%s %s page %d: %d returned, %d new, next %s",
            caller,
            ordering.describe(),
            pages,
            len(page.items),
            len(items),
            next_cursor,
        )

        if signal is not None:
            if transformer is not None:
                await transform_serially(items, transformer, signal)
            if signal.requested:
                logger.debug("%s stopped on page %d", caller, pages)
                break
        elif transformer is not None:
            results.extend(await transform_concurrently(items, transformer))
        else:
            results.extend(items)

        cursor = next_cursor

    logger.debug("%s finished after %d page(s) with %d result(s)", caller, pages, len(results))
    return results


class Paginator:
    """Entry point paginating by a fixed ordering.

    Calling it returns the items themselves; `transformed` and `for_each`
    are the variants applying a callback to each item.
    """

    __slots__ = ("_name", "_ordering")

    def __init__(self, name: str, ordering: OrderingMode) -> None:
        self._name = name
        self._ordering = ordering

    def __repr__(self) -> str:
        return f"<Paginator {self._name}>"

    async def __call__(
        self,
        reference: Reference,
        max_page_size: int,
        limits: Limits = None,
    ) -> list[Item]:
        return await paginate(
            reference, self._ordering, max_page_size, limits, caller=self._name, stacklevel=3
        )

    async def transformed[T](
        self,
        reference: Reference,
        max_page_size: int,
        transformer: Transformer[T],
        limits: Limits = None,
    ) -> list[T]:
        return await paginate(
            reference,
            self._ordering,
            max_page_size,
            limits,
            transformer=transformer,
            caller=f"{self._name}.transformed",
            stacklevel=3,
        )

    async def for_each(
        self,
        reference: Reference,
        max_page_size: int,
        iterator: Iterator,
        limits: Limits = None,
    ) -> bool:
        """Call `iterator` on each item in order; return True if it asked to stop."""
        signal = StopSignal()
        await paginate(
            reference,
            self._ordering,
            max_page_size,
            limits,
            transformer=iterator,
            signal=signal,
            caller=f"{self._name}.for_each",
            stacklevel=3,
        )
        return signal.requested


class FieldPaginator:
    """Entry point paginating by the value of a named field.

    Same shape as `Paginator`, with the field name after the reference.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return f"<FieldPaginator {self._name}>"

    async def __call__(
        self,
        reference: Reference,
        field: str,
        max_page_size: int,
        limits: Limits = None,
    ) -> list[Item]:
        return await paginate(
            reference,
            OrderByField(field=field),
            max_page_size,
            limits,
            caller=self._name,
            stacklevel=3,
        )

    async def transformed[T](
        self,
        reference: Reference,
        field: str,
        max_page_size: int,
        transformer: Transformer[T],
        limits: Limits = None,
    ) -> list[T]:
        return await paginate(
            reference,
            OrderByField(field=field),
            max_page_size,
            limits,
            transformer=transformer,
            caller=f"{self._name}.transformed",
            stacklevel=3,
        )

    async def for_each(
        self,
        reference: Reference,
        field: str,
        max_page_size: int,
        iterator: Iterator,
        limits: Limits = None,
    ) -> bool:
        signal = StopSignal()
        await paginate(
            reference,
            OrderByField(field=field),
            max_page_size,
            limits,
            transformer=iterator,
            signal=signal,
            caller=f"{self._name}.for_each",
            stacklevel=3,
        )
        return signal.requested


by_key = Paginator("by_key", OrderByKey())
by_value = Paginator("by_value", OrderByValue())
by_field = FieldPaginator("by_field")
