"""Tests for pagination ordered by key."""

import random
from unittest.mock import Mock

import pytest
from conftest import keys

from ordered_paginate import by_key
from ordered_paginate.datatypes import Item
from ordered_paginate.providers.memory import MemoryReference

MANY_CHILDREN_COUNT = 40


@pytest.fixture
def many_children() -> MemoryReference:
    """Children inserted in random key order."""
    rng = random.Random(1234)
    data: dict[str, str] = {}
    while len(data) < MANY_CHILDREN_COUNT:
        data[f"REF_{rng.randrange(MANY_CHILDREN_COUNT * 100)}"] = f"hello-{len(data)}"
    return MemoryReference(data)


@pytest.fixture
def limit_children() -> MemoryReference:
    order = [7, 1, 3, 2, 8, 4, 6, 5]
    return MemoryReference({f"REF_{i}": 0 for i in order})


@pytest.mark.asyncio
async def test_no_children(empty):
    assert await by_key(empty, 10) == []


@pytest.mark.asyncio
async def test_single_child():
    results = await by_key(MemoryReference({"REF": "hello"}), 10)

    assert results == [Item(key="REF", value="hello")]


@pytest.mark.asyncio
@pytest.mark.parametrize("page_size", [3, 39, 40, 41, 42, 50])
async def test_all_children_in_key_order(many_children, page_size):
    results = await by_key(many_children, page_size)

    assert keys(results) == sorted(keys(many_children.items()))


@pytest.mark.asyncio
async def test_integer_like_keys_sort_numerically_first():
    ref = MemoryReference({"10": 1, "a": 1, "9": 1, "-1": 1, "09": 1})

    results = await by_key(ref, 3)

    assert keys(results) == ["-1", "9", "10", "09", "a"]


class TestLimits:
    """Range restrictions on key ordering."""

    @pytest.mark.asyncio
    async def test_interval(self, limit_children):
        results = await by_key(limit_children, 3, {"start_at": "REF_3", "end_at": "REF_6"})
        assert keys(results) == ["REF_3", "REF_4", "REF_5", "REF_6"]

    @pytest.mark.asyncio
    async def test_page_ending_on_end_at_does_not_repeat_it(self, limit_children):
        results = await by_key(limit_children, 3, {"end_at": "REF_5"})

        assert keys(results) == ["REF_1", "REF_2", "REF_3", "REF_4", "REF_5"]
        assert limit_children.lookups == []

    @pytest.mark.asyncio
    async def test_start_at_only(self, limit_children):
        results = await by_key(limit_children, 3, {"start_at": "REF_6"})
        assert keys(results) == ["REF_6", "REF_7", "REF_8"]

    @pytest.mark.asyncio
    async def test_equal_to_is_a_point_lookup(self, limit_children):
        results = await by_key(limit_children, 3, {"equal_to": "REF_5"})

        assert keys(results) == ["REF_5"]
        assert limit_children.lookups == ["REF_5"]
        assert limit_children.queries == []

    @pytest.mark.asyncio
    async def test_equal_to_absent_key(self, limit_children):
        assert await by_key(limit_children, 3, {"start_at": "REF_9", "end_at": "REF_9"}) == []

    @pytest.mark.asyncio
    async def test_out_of_bounds(self, limit_children):
        assert await by_key(limit_children, 3, {"start_at": "REF_9"}) == []

    @pytest.mark.asyncio
    async def test_non_string_key_bound_matches_range_query(self):
        ref = MemoryReference({"5": "five", "6": "six"})

        looked_up = await by_key(ref, 3, {"equal_to": 5})
        ranged = await by_key(ref, 3, {"start_at": 5, "end_at": "5"})

        assert keys(looked_up) == keys(ranged) == ["5"]
        assert ref.lookups == ["5"]


class TestTransformed:
    """Tests for by_key.transformed."""

    @pytest.mark.asyncio
    async def test_called_once_per_child_in_order(self, many_children):
        transformer = Mock(side_effect=lambda item: item.value)
        expected = [item.value for item in sorted(many_children.items(), key=lambda i: i.key)]

        results = await by_key.transformed(many_children, 7, transformer)

        assert results == expected
        assert transformer.call_count == MANY_CHILDREN_COUNT

    @pytest.mark.asyncio
    async def test_point_lookup_is_transformed(self, limit_children):
        async def transform(item: Item) -> str:
            return item.key.lower()

        results = await by_key.transformed(limit_children, 3, transform, {"equal_to": "REF_2"})

        assert results == ["ref_2"]


class TestForEach:
    """Tests for by_key.for_each."""

    @pytest.mark.asyncio
    async def test_stops_on_first_signal(self, limit_children):
        seen: list[str] = []

        def visit(item: Item) -> bool:
            seen.append(item.key)
            return item.key == "REF_2"

        assert await by_key.for_each(limit_children, 3, visit) is True
        assert seen == ["REF_1", "REF_2"]
        assert len(limit_children.queries) == 1

    @pytest.mark.asyncio
    async def test_not_stopped(self, limit_children):
        visit = Mock(return_value=None)

        assert await by_key.for_each(limit_children, 3, visit) is False
        assert visit.call_count == 8
