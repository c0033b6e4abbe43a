"""Builds and runs one bounded page query against a reference."""

import logging

from ordered_paginate.contexts import Cursor, Page
from ordered_paginate.ordering import OrderingMode
from ordered_paginate.params import UNBOUNDED, Range
from ordered_paginate.protocols import Query, Reference

logger = logging.getLogger(__name__)


def build_query(
    reference: Reference,
    ordering: OrderingMode,
    limits: Range,
    cursor: Cursor,
    page_size: int,
) -> Query:
    """Return the query for the page starting at `cursor`."""
    query = ordering.query(reference)

    if ordering.is_key:
        # Keys are unique, so the key itself is the resume point
        if cursor.start_value is not UNBOUNDED and cursor.start_value is not None:
            query = query.start_at(cursor.start_value)
        if limits.end_at is not UNBOUNDED:
            query = query.end_at(limits.end_at)
    elif cursor.tiebreaker is None and limits.is_singleton:
        query = query.equal_to(limits.end_at)
    else:
        # A pending tiebreaker resumes mid-run, so equal_to(value) would rescan it
        if cursor.start_value is not UNBOUNDED:
            query = query.start_at(cursor.start_value, cursor.tiebreaker)
        if limits.end_at is not UNBOUNDED:
            query = query.end_at(limits.end_at)

    return query.limit_to_first(page_size)


async def fetch_page(
    reference: Reference,
    ordering: OrderingMode,
    limits: Range,
    cursor: Cursor,
    page_size: int,
) -> Page:
    """Fetch the page of up to `page_size` items starting at `cursor`.

    The first page of a singleton range under key ordering is served by a
    point lookup; the resulting page is terminal.
    """
    if ordering.is_key and cursor.tiebreaker is None and limits.is_singleton:
        key = str(limits.end_at)
        logger.debug("Point lookup for key %r", key)
        item = await reference.child(key)
        items = [] if item is None else [item]
        return Page(items=items, requested=page_size, terminal=True)

    query = build_query(reference, ordering, limits, cursor, page_size)
    items = await query.fetch()
    return Page(items=list(items), requested=page_size)
