"""Data types returned by ordered stores.

Every store hands back `Item`s: the child's unique key plus its full value.
Values are JSON-compatible, matching what keyed document stores hold.
"""

from pydantic import BaseModel

# JSON-compatible value type
type JsonValue = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]


class Item(BaseModel, frozen=True):
    """A single child of an ordered collection."""

    key: str
    """Unique key identifying this child; also the tie-break key."""

    value: JsonValue = None
    """Full value stored under the key."""

    def child(self, path: str) -> JsonValue:
        """Return the value at a `/`-separated path below this item, or None."""
        node: JsonValue = self.value
        for segment in path.strip("/").split("/"):
            if not isinstance(node, dict):
                return None
            node = node.get(segment)
        return node
