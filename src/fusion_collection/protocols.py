"""Protocols describing the container capabilities.

Both Collection and Dictionary satisfy these; callers that only need one
capability should type against the protocol instead of a concrete class.
"""

from collections.abc import Hashable
from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class IndexableProtocol(Protocol):
    """Named offset access: get, set, has and delete by key or index."""

    def get(self, key: Hashable) -> Any:
        """Return the value stored at key.

        Raises:
            KeyNotFoundError: If key does not exist
            InvalidKeyTypeError: If key is of the wrong kind
        """
        ...

    def set(self, key: Hashable, value: Any) -> None:
        """Store value at key.

        Raises:
            NullValueError: If value is None
            InvalidKeyTypeError: If key is of the wrong kind
        """
        ...

    def has(self, key: Hashable) -> bool:
        """Check if key exists. Never raises."""
        ...

    def delete(self, key: Hashable) -> None:
        """Remove the entry at key if present."""
        ...


@runtime_checkable
class ContainerProtocol(Protocol):
    """Operations shared by every container regardless of key kind."""

    def find(self, key: Hashable) -> Any: ...

    def remove(self, value: Any) -> Any: ...

    def remove_at(self, key: Hashable) -> Any: ...

    def clear(self) -> None: ...

    def size(self) -> int: ...

    def items(self) -> list[tuple[Hashable, Any]]: ...
