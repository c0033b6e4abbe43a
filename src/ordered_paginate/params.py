"""Range parameters for pagination.

`RangeLimits` is what a caller passes; `Range` is the canonical form the
driver works with once `equal_to` has been folded into the two bounds.
A bound left out is `UNBOUNDED`. `None` is a real bound on the null order
value, the lowest one a store has.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel


class _Unbounded(Enum):
    UNBOUNDED = "unbounded"

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED: Final = _Unbounded.UNBOUNDED
"""Marks an absent bound. Survives pydantic's default copying as itself."""


class RangeLimits(BaseModel, frozen=True):
    """Caller-supplied range restriction.

    Either bound form or the exact-match form may be given. When `equal_to`
    is present it wins and any other bound is ignored.
    """

    start_at: Any = UNBOUNDED
    """Inclusive lower bound on the order value."""

    end_at: Any = UNBOUNDED
    """Inclusive upper bound on the order value."""

    equal_to: Any = UNBOUNDED
    """Exact order value; alias for `start_at = end_at = equal_to`."""


class Range(BaseModel, frozen=True):
    """Canonical inclusive range over order values."""

    start_at: Any = UNBOUNDED
    end_at: Any = UNBOUNDED

    @property
    def is_singleton(self) -> bool:
        """Whether both bounds are set to the same order value.

        `1`, `1.0` and `True` compare equal in Python but order apart in a
        store, so the types must match too.
        """
        return (
            self.end_at is not UNBOUNDED
            and type(self.start_at) is type(self.end_at)
            and self.start_at == self.end_at
        )


def normalize_limits(limits: RangeLimits | Mapping[str, Any] | None) -> Range:
    """Fold a caller's limits into a canonical `Range`."""
    if limits is None:
        return Range()
    if not isinstance(limits, RangeLimits):
        limits = RangeLimits.model_validate(dict(limits))
    if limits.equal_to is not UNBOUNDED:
        return Range(start_at=limits.equal_to, end_at=limits.equal_to)
    return Range(start_at=limits.start_at, end_at=limits.end_at)
