"""Shared contract for Collection and Dictionary.

Subclasses provide storage and key validation; this class implements the
operations whose rules are identical for both containers: null rejection,
existence checks, removal by value, named offset access and iteration.
"""

import logging
from abc import ABC
from abc import abstractmethod
from collections.abc import Hashable
from typing import Any

from .cursor import Cursor
from .exceptions import KeyNotFoundError
from .exceptions import NullValueError

logger = logging.getLogger(__name__)


class AbstractCollection(ABC):
    """Core functionality for containers of non-null values."""

    _items: list | dict

    # Storage hooks

    @abstractmethod
    def _validate_key(self, key: Any) -> None:
        """Raise InvalidKeyTypeError if key is of the wrong kind."""

    @abstractmethod
    def _contains(self, key: Any) -> bool:
        """Check if key exists. Must not raise for keys of the wrong kind."""

    @abstractmethod
    def _fetch(self, key: Hashable) -> Any: ...

    @abstractmethod
    def _assign(self, key: Hashable, value: Any) -> None:
        """Store value at key (key already validated, value non-null)."""

    @abstractmethod
    def _discard(self, key: Hashable) -> None:
        """Remove existing key."""

    @abstractmethod
    def items(self) -> list[tuple[Hashable, Any]]:
        """Return a new list of (key, value) pairs in order."""

    # Validation

    def _require_value(self, value: Any) -> None:
        if value is None:
            raise NullValueError("Collection operations will not accept null values.")

    def _require_existing(self, key: Hashable) -> None:
        self._validate_key(key)
        if not self._contains(key):
            raise KeyNotFoundError(
                f"The key '{key}' does not exist in the collection.",
                context={"key": key},
            )

    # Operations

    def find(self, key: Hashable) -> Any:
        """
        Retrieve the value stored at key.

        Raises:
            KeyNotFoundError: If key does not exist
            InvalidKeyTypeError: If key is of the wrong kind
        """
        self._require_existing(key)
        return self._fetch(key)

    def replace(self, key: Hashable, value: Any):
        """
        Overwrite the value at an existing key. Never inserts.

        Raises:
            NullValueError: If value is None
            KeyNotFoundError: If key does not exist
            InvalidKeyTypeError: If key is of the wrong kind
        """
        self._require_value(value)
        self._require_existing(key)
        self._assign(key, value)
        return self

    def remove(self, value: Any):
        """
        Remove every entry equal to value.

        Raises:
            NullValueError: If value is None
        """
        self._require_value(value)

        matches = [key for key, stored in self.items() if stored == value]
        # Reverse order keeps positional indices of pending matches intact
        for key in reversed(matches):
            self._discard(key)

        if matches:
            logger.debug(f"Removed {len(matches)} entries equal to {value!r}")
        return self

    def remove_at(self, key: Hashable):
        """
        Remove the entry at key. No-op if key does not exist.

        Raises:
            InvalidKeyTypeError: If key is of the wrong kind
        """
        self._validate_key(key)
        if self._contains(key):
            self._discard(key)
        return self

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._items)} entries from {type(self).__name__}")
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self.size()

    # Named offset access

    def get(self, key: Hashable) -> Any:
        return self.find(key)

    def set(self, key: Hashable, value: Any) -> None:
        self._require_value(value)
        self._validate_key(key)
        self._assign(key, value)

    def has(self, key: Hashable) -> bool:
        return self._contains(key)

    def delete(self, key: Hashable) -> None:
        self.remove_at(key)

    # Iteration

    def keys(self) -> list[Hashable]:
        return [key for key, _ in self.items()]

    def values(self) -> list[Any]:
        return [value for _, value in self.items()]

    def cursor(self) -> Cursor:
        """Return a new cursor positioned at the first entry."""
        return Cursor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items()!r})"
