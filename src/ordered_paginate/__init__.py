"""Exhaustive cursor pagination over ordered keyed stores."""

from ordered_paginate.contexts import Cursor, Page
from ordered_paginate.datatypes import Item, JsonValue
from ordered_paginate.driver import by_field, by_key, by_value, paginate
from ordered_paginate.errors import ErrorKind, InvalidPageSizeError, PageSizeWarning, PaginateError
from ordered_paginate.ordering import OrderByField, OrderByKey, OrderByValue, OrderingMode
from ordered_paginate.params import UNBOUNDED, Range, RangeLimits, normalize_limits
from ordered_paginate.protocols import Query, Reference

__all__ = [
    "Cursor",
    "ErrorKind",
    "InvalidPageSizeError",
    "Item",
    "JsonValue",
    "OrderByField",
    "OrderByKey",
    "OrderByValue",
    "OrderingMode",
    "Page",
    "PageSizeWarning",
    "PaginateError",
    "Query",
    "Range",
    "RangeLimits",
    "Reference",
    "UNBOUNDED",
    "by_field",
    "by_key",
    "by_value",
    "normalize_limits",
    "paginate",
]
