"""Type-specific containers.

On construction the caller names the type every value must have (see
TypeConstraint for accepted descriptors). add, replace and set check the
constraint before delegating; everything else is inherited unchanged.
"""

import logging
from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from .collection import Collection
from .constraints import TypeConstraint
from .dictionary import Dictionary

logger = logging.getLogger(__name__)


class _TypeConstrained:
    """Holds the immutable constraint shared by both typed containers."""

    _constraint: TypeConstraint

    def _init_constraint(self, accepted_type: Any, values: Iterable[Any]) -> None:
        self._constraint = TypeConstraint.from_descriptor(accepted_type)
        # All starter values are checked before anything is stored
        for value in values:
            self._constraint.check(value)
        logger.debug(f"Created {type(self).__name__} accepting '{self._constraint.name}'")

    @property
    def accepted_type(self) -> str:
        """Name of the type this container accepts."""
        return self._constraint.name

    @property
    def constraint(self) -> TypeConstraint:
        """The immutable constraint checked on every stored value."""
        return self._constraint


class TypedCollection(_TypeConstrained, Collection):
    """
    Ordered collection that only holds instances of one type.

    Example:
        >>> shapes = TypedCollection(Shape, [Circle(), Square()])
        >>> shapes.add("circle")  # raises TypeConstraintViolationError
    """

    def __init__(self, accepted_type: Any, items: Iterable[Any] | None = None):
        """Initialize with accepted type and optional starter items.

        Args:
            accepted_type: Class, runtime-checkable Protocol or type name
            items: Values to append in order

        Raises:
            TypeConstraintViolationError: If accepted_type is empty or any item
                does not conform
        """
        items = list(items or ())
        self._init_constraint(accepted_type, items)
        super().__init__(items)

    def add(self, value: Any) -> "TypedCollection":
        self._constraint.check(value)
        return super().add(value)

    def replace(self, key: int, value: Any) -> "TypedCollection":
        self._constraint.check(value)
        return super().replace(key, value)

    def set(self, index: int | None, value: Any) -> None:
        self._constraint.check(value)
        super().set(index, value)


class TypedDictionary(_TypeConstrained, Dictionary):
    """String-keyed dictionary that only holds instances of one type."""

    def __init__(self, accepted_type: Any, items: Mapping[str, Any] | None = None):
        """Initialize with accepted type and optional starter items.

        Args:
            accepted_type: Class, runtime-checkable Protocol or type name
            items: Key/value pairs to add in order

        Raises:
            TypeConstraintViolationError: If accepted_type is empty or any value
                does not conform
        """
        items = dict((items or {}).items())
        self._init_constraint(accepted_type, items.values())
        super().__init__(items)

    def add(self, key: str, value: Any) -> "TypedDictionary":
        self._constraint.check(value)
        return super().add(key, value)

    def replace(self, key: str, value: Any) -> "TypedDictionary":
        self._constraint.check(value)
        return super().replace(key, value)

    def set(self, key: str, value: Any) -> None:
        self._constraint.check(value)
        super().set(key, value)
