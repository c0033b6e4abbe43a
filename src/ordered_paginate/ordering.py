"""Ordering modes a collection can be paginated by.

Each mode pairs the query a store should run with the function that reads
an item's order value back out, so the driver can derive the next cursor.
"""

from abc import abstractmethod
from typing import Any, ClassVar, Final, Literal

from pydantic import BaseModel, Field

from ordered_paginate.datatypes import Item
from ordered_paginate.protocols import Query, Reference

MISSING: Final = object()
"""Returned by an extractor that cannot find an order value; never valid."""


class OrderingMode(BaseModel, frozen=True):
    """Base for ordering modes; subclasses supply `query` and `extract`."""

    is_key: ClassVar[bool] = False
    """Key ordering has no separate tie-break: the order value is the key."""

    @abstractmethod
    def query(self, reference: Reference) -> Query:
        """Return the ordered query for `reference`."""

    @abstractmethod
    def extract(self, item: Item) -> Any:
        """Return the order value of `item`."""

    def describe(self) -> str:
        return self.__class__.__name__


class OrderByKey(OrderingMode, frozen=True):
    """Order children by their key."""

    kind: Literal["key"] = "key"
    is_key: ClassVar[bool] = True

    def query(self, reference: Reference) -> Query:
        return reference.order_by_key()

    def extract(self, item: Item) -> Any:
        return item.key


class OrderByValue(OrderingMode, frozen=True):
    """Order children by their whole value."""

    kind: Literal["value"] = "value"

    def query(self, reference: Reference) -> Query:
        return reference.order_by_value()

    def extract(self, item: Item) -> Any:
        return item.value


class OrderByField(OrderingMode, frozen=True):
    """Order children by the value of a named field.

    Children without the field order as null, like the store does.
    """

    kind: Literal["field"] = "field"
    field: str = Field(min_length=1)
    """Field name, or a `/`-separated path to a nested field."""

    def query(self, reference: Reference) -> Query:
        return reference.order_by_child(self.field)

    def extract(self, item: Item) -> Any:
        return item.child(self.field)

    def describe(self) -> str:
        return f"OrderByField({self.field!r})"
