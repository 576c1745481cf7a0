"""Collection - ordered container keyed by position.

Indices are contiguous from 0. Removing an entry shifts every later entry down
by one, so an index identifies a position, not a value.
"""

from collections.abc import Iterable
from collections.abc import Iterator
from typing import Any

from .base import AbstractCollection
from .exceptions import InvalidKeyTypeError


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


class Collection(AbstractCollection):
    """
    Ordered collection of non-null values.

    Example:
        >>> collection = Collection(["x", "y"])
        >>> collection.remove_at(0).find(0)
        'y'
    """

    def __init__(self, items: Iterable[Any] | None = None):
        """Initialize with optional starter items.

        Args:
            items: Values to append in order

        Raises:
            NullValueError: If any item is None
        """
        self._items: list[Any] = []
        for item in items or ():
            self.add(item)

    def add(self, value: Any) -> "Collection":
        """
        Append a value at the next index.

        Raises:
            NullValueError: If value is None
        """
        self._require_value(value)
        self._items.append(value)
        return self

    def set(self, index: int | None, value: Any) -> None:
        """
        Store value at index.

        None appends; an existing index is overwritten. Any other index is
        rejected, so indices stay contiguous.

        Raises:
            NullValueError: If value is None
            KeyNotFoundError: If index does not exist
            InvalidKeyTypeError: If index is not an int
        """
        if index is None:
            self.add(value)
            return
        super().set(index, value)

    def _validate_key(self, key: Any) -> None:
        if not _is_index(key):
            raise InvalidKeyTypeError(
                f"Index to access must be an integer, got {type(key).__name__}.",
                context={"key": repr(key)},
            )

    def _contains(self, key: Any) -> bool:
        return _is_index(key) and 0 <= key < len(self._items)

    def _fetch(self, key: int) -> Any:
        return self._items[key]

    def _assign(self, key: int, value: Any) -> None:
        self._require_existing(key)
        self._items[key] = value

    def _discard(self, key: int) -> None:
        del self._items[key]

    def items(self) -> list[tuple[int, Any]]:
        return list(enumerate(self._items))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values())
