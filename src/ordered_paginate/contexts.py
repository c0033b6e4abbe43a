"""Context types for a pagination run.

Contexts carry state needed to resume reading from a specific position.
They only track *where* to resume, not *how much* to read (that's the page size).
"""

from typing import Any

from pydantic import BaseModel, Field

from ordered_paginate.datatypes import Item
from ordered_paginate.params import UNBOUNDED


class Cursor(BaseModel, frozen=True):
    """Resume position for the next page query.

    Uses compound keyset pagination: the next page starts at `start_value`,
    and when `tiebreaker` is set, at the child with that key among children
    sharing the order value.
    """

    start_value: Any = UNBOUNDED
    """Order value the next page starts at (inclusive), or `UNBOUNDED`."""

    tiebreaker: str | None = None
    """Key of the previous page's boundary item, or None on the first page."""


class Page(BaseModel, frozen=True):
    """One batch returned by a bounded range query."""

    items: list[Item] = Field(default_factory=list)
    """Items in ascending collection order."""

    requested: int
    """Page size that was asked for."""

    terminal: bool = False
    """Set when the query shape guarantees no further pages (point lookups)."""

    @property
    def full(self) -> bool:
        """Whether the store returned as many items as were requested."""
        return len(self.items) >= self.requested
