"""fusion-collection - In-memory collections of non-null values.

Public API: ordered and string-keyed containers, their type-constrained
variants, and the error taxonomy they share.
"""

from .base import AbstractCollection
from .collection import Collection
from .constraints import TypeConstraint
from .cursor import Cursor
from .dictionary import Dictionary
from .exceptions import CollectionError
from .exceptions import CollectionException
from .exceptions import InvalidKeyTypeError
from .exceptions import KeyNotFoundError
from .exceptions import NullValueError
from .exceptions import TypeConstraintError
from .exceptions import TypeConstraintViolationError
from .protocols import ContainerProtocol
from .protocols import IndexableProtocol
from .typed import TypedCollection
from .typed import TypedDictionary

__all__ = [
    # Containers
    "AbstractCollection",
    "Collection",
    "Dictionary",
    "TypedCollection",
    "TypedDictionary",
    # Iteration
    "Cursor",
    # Type constraints
    "TypeConstraint",
    # Protocols
    "ContainerProtocol",
    "IndexableProtocol",
    # Exceptions
    "CollectionError",
    "CollectionException",
    "InvalidKeyTypeError",
    "KeyNotFoundError",
    "NullValueError",
    "TypeConstraintError",
    "TypeConstraintViolationError",
]

__version__ = "1.0.0"
