"""Collection-specific exceptions.

Every error raised by the containers derives from CollectionError and from the
builtin exception a caller would naturally expect (ValueError, KeyError,
TypeError), so both `except CollectionError` and `except KeyError` work.
"""


class CollectionError(Exception):
    """Base exception for collection operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (key, expected type, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return self.message


class NullValueError(CollectionError, ValueError):
    """A None value was given where a stored value is required."""


class KeyNotFoundError(CollectionError, KeyError):
    """The key or index does not exist in the container."""


class InvalidKeyTypeError(CollectionError, TypeError, ValueError):
    """The key or index is of the wrong kind for the container."""


class TypeConstraintViolationError(CollectionError, TypeError):
    """A typed container rejected a value, or its type descriptor is empty."""


# Names used by older releases
CollectionException = CollectionError
TypeConstraintError = TypeConstraintViolationError
