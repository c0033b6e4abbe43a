"""Derives the next page's cursor from the page just fetched."""

from ordered_paginate.contexts import Cursor, Page
from ordered_paginate.datatypes import Item
from ordered_paginate.errors import ErrorKind, PaginateError
from ordered_paginate.ordering import MISSING, OrderingMode


def advance(
    page: Page,
    starting: Cursor,
    ordering: OrderingMode,
) -> tuple[list[Item], Cursor | None]:
    """Split a page into its fresh items and the cursor for the next page.

    Range queries are inclusive, so every page after the first starts with
    the previous page's boundary item again; it is dropped here. The cursor
    is None when this was the last page.
    """
    items = page.items
    if items and starting.tiebreaker is not None and items[0].key == starting.tiebreaker:
        items = items[1:]

    candidate: Cursor | None = None
    for item in items:
        value = ordering.extract(item)
        if value is MISSING:
            msg = f"{ordering.describe()} produced no order value for child {item.key!r}"
            raise PaginateError(msg, kind=ErrorKind.INTERNAL)
        candidate = Cursor(start_value=value, tiebreaker=item.key)

    if page.terminal or not page.full:
        return items, None
    return items, candidate
