"""Dictionary - string-keyed container of non-null values."""

from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any

from .base import AbstractCollection
from .exceptions import InvalidKeyTypeError


class Dictionary(AbstractCollection):
    """
    String-keyed map of non-null values, iterated in insertion order.

    Any str is a valid key, including the empty string.
    """

    def __init__(self, items: Mapping[str, Any] | None = None):
        """Initialize with optional starter items.

        Args:
            items: Key/value pairs to add in order

        Raises:
            NullValueError: If any value is None
            InvalidKeyTypeError: If any key is not a str
        """
        self._items: dict[str, Any] = {}
        for key, value in (items or {}).items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> "Dictionary":
        """
        Store value under key, overwriting any previous value.

        Raises:
            NullValueError: If value is None
            InvalidKeyTypeError: If key is not a str
        """
        self._require_value(value)
        self._validate_key(key)
        self._items[key] = value
        return self

    def _validate_key(self, key: Any) -> None:
        if not isinstance(key, str):
            raise InvalidKeyTypeError(
                f"Offset to access must be a string, got {type(key).__name__}.",
                context={"key": repr(key)},
            )

    def _contains(self, key: Any) -> bool:
        return isinstance(key, str) and key in self._items

    def _fetch(self, key: str) -> Any:
        return self._items[key]

    def _assign(self, key: str, value: Any) -> None:
        self._items[key] = value

    def _discard(self, key: str) -> None:
        del self._items[key]

    def items(self) -> list[tuple[str, Any]]:
        return list(self._items.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
