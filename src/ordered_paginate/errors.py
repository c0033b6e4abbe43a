"""Error and warning types for pagination."""

from enum import StrEnum
from typing import final


class ErrorKind(StrEnum):
    """Classification of pagination errors."""

    CONNECTION = "connection"
    INVALID_INPUT = "invalid_input"
    PROVIDER = "provider"
    INTERNAL = "internal"


class PaginateError(Exception):
    """Base error for pagination and store operations."""

    __slots__ = ("kind", "message", "source")

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.PROVIDER,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.source = source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, kind={self.kind!r})"


@final
class InvalidPageSizeError(PaginateError, ValueError):
    """Raised by a public entry point when `max_page_size` is unusable.

    `caller` names the entry point the caller invoked (e.g. `"by_key.transformed"`),
    so the failure is attributed to the call site rather than to pagination internals.
    """

    __slots__ = ("caller", "value")

    def __init__(self, caller: str, value: object) -> None:
        msg = f"{caller}: max_page_size must be an int > 1 (provided {value!r})"
        super().__init__(msg, kind=ErrorKind.INVALID_INPUT)
        self.caller = caller
        self.value = value


class PageSizeWarning(UserWarning):
    """Advisory for page sizes that only make one item of progress per query."""
