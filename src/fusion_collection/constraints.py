"""Type constraint descriptors for typed containers.

A descriptor names the type every stored value must conform to. It can be a
class, a runtime-checkable Protocol (structural check), a dotted import path,
or a bare class name matched against the value's MRO.
"""

import importlib
import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict

from .exceptions import TypeConstraintViolationError

logger = logging.getLogger(__name__)


def type_name(value: Any) -> str:
    """Return the runtime type name reported in constraint errors."""
    return type(value).__qualname__


def _import_type(path: str) -> type | None:
    """Resolve "package.module.ClassName" to a class, or None."""
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        return None

    try:
        module = importlib.import_module(module_name)
    except (ImportError, ValueError):
        return None

    resolved = getattr(module, attr, None)
    return resolved if isinstance(resolved, type) else None


class TypeConstraint(BaseModel):
    """
    Immutable type constraint attached to a typed container.

    `name` is what appears in error messages. `accepted_type` is set when the
    descriptor resolved to a class or Protocol; otherwise values are matched by
    class name along their MRO.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    accepted_type: type | None = None

    @classmethod
    def from_descriptor(cls, descriptor: Any) -> "TypeConstraint":
        """
        Build a constraint from a class, Protocol or type name.

        Args:
            descriptor: Class, runtime-checkable Protocol, dotted path or class name

        Returns:
            TypeConstraint instance

        Raises:
            TypeConstraintViolationError: If descriptor is empty, relative or not a type
        """
        if isinstance(descriptor, TypeConstraint):
            return descriptor

        if descriptor is None or (isinstance(descriptor, str) and descriptor.strip() == ""):
            raise TypeConstraintViolationError("Accepted type string cannot be empty.")

        if isinstance(descriptor, type):
            if getattr(descriptor, "_is_protocol", False) and not getattr(descriptor, "_is_runtime_protocol", False):
                raise TypeConstraintViolationError(
                    f"Protocol '{descriptor.__qualname__}' must be decorated with @runtime_checkable.",
                    context={"descriptor": descriptor.__qualname__},
                )
            return cls(name=descriptor.__qualname__, accepted_type=descriptor)

        if isinstance(descriptor, str):
            descriptor = descriptor.strip()
            if descriptor.startswith("."):
                raise TypeConstraintViolationError(
                    f"Accepted type '{descriptor}' must be an absolute name, not a relative import path.",
                    context={"descriptor": descriptor},
                )
            resolved = _import_type(descriptor) if "." in descriptor else None
            if resolved is not None:
                logger.debug(f"Resolved type descriptor '{descriptor}' to {resolved!r}")
            return cls(name=descriptor, accepted_type=resolved)

        raise TypeConstraintViolationError(
            f"Accepted type must be a class or type name, got {type_name(descriptor)}.",
            context={"descriptor": repr(descriptor)},
        )

    def accepts(self, value: Any) -> bool:
        """Check if value conforms to the constraint. None never conforms."""
        if value is None:
            return False

        if self.accepted_type is not None:
            return isinstance(value, self.accepted_type)

        for klass in type(value).__mro__:
            qualified = f"{klass.__module__}.{klass.__qualname__}"
            if self.name in (klass.__name__, klass.__qualname__, qualified):
                return True
        return False

    def check(self, value: Any) -> None:
        """
        Raise if value does not conform.

        Raises:
            TypeConstraintViolationError: With expected and given type names
        """
        if self.accepts(value):
            return

        given = type_name(value)
        raise TypeConstraintViolationError(
            f'Unable to modify collection. Only instances of type "{self.name}" are allowed. '
            f'Type "{given}" given.',
            context={"expected": self.name, "given": given},
        )
