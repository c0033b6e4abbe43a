"""Shared fixtures for pagination tests.

Collections mirror the shapes pagination has to get right: empty, a single
child, many children, and a small set with tied order values.
"""

import pytest

from ordered_paginate.providers.memory import MemoryReference

CHILD_KEY = "bob"

MANY_COUNT = 400

SAME_VALUES = {
    "REF1": {CHILD_KEY: 10},
    "REF2": {CHILD_KEY: 5},
    "REF3": {CHILD_KEY: 100},
    "REF4": {CHILD_KEY: -2},
    "REF5": {CHILD_KEY: 200},
    "REF6": {CHILD_KEY: 10},
    "REF7": {CHILD_KEY: 10},
}

# Ordered by CHILD_KEY, ties broken by key
SAME_VALUE_ORDER = ["REF4", "REF2", "REF1", "REF6", "REF7", "REF3", "REF5"]


def keys(items) -> list[str]:
    return [item.key for item in items]


@pytest.fixture
def empty() -> MemoryReference:
    return MemoryReference({})


@pytest.fixture
def single() -> MemoryReference:
    return MemoryReference({"REF": {CHILD_KEY: 0}})


@pytest.fixture
def many_values() -> MemoryReference:
    """400 children REF_i whose CHILD_KEY field is i."""
    return MemoryReference({f"REF_{i}": {CHILD_KEY: i} for i in range(MANY_COUNT)})


@pytest.fixture
def same_values() -> MemoryReference:
    return MemoryReference(dict(SAME_VALUES))
