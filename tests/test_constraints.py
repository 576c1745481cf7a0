"""Tests for TypeConstraint descriptors."""

from decimal import Decimal
from typing import Protocol
from typing import runtime_checkable

import pytest
from fusion_collection import TypeConstraint
from fusion_collection import TypeConstraintViolationError
from pydantic import ValidationError


@runtime_checkable
class HasArea(Protocol):
    def area(self) -> float: ...


class NotRuntimeChecked(Protocol):
    def area(self) -> float: ...


class Square:
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side * self.side


def test_class_descriptor():
    """Test a class constrains by isinstance."""
    constraint = TypeConstraint.from_descriptor(int)

    assert constraint.name == "int"
    assert constraint.accepts(1)
    assert not constraint.accepts("1")


def test_protocol_descriptor_is_structural():
    """Test a runtime-checkable Protocol matches by shape."""
    constraint = TypeConstraint.from_descriptor(HasArea)

    assert constraint.accepts(Square(2))
    assert not constraint.accepts(object())


def test_protocol_must_be_runtime_checkable():
    """Test a plain Protocol cannot be used as a constraint."""
    with pytest.raises(TypeConstraintViolationError, match="runtime_checkable"):
        TypeConstraint.from_descriptor(NotRuntimeChecked)


def test_dotted_path_descriptor():
    """Test a dotted import path resolves to the class."""
    constraint = TypeConstraint.from_descriptor("decimal.Decimal")

    assert constraint.accepted_type is Decimal
    assert constraint.accepts(Decimal("1.5"))
    assert not constraint.accepts(1.5)


def test_bare_name_descriptor():
    """Test a bare class name matches along the MRO."""
    constraint = TypeConstraint.from_descriptor("object")

    assert constraint.accepted_type is None
    assert constraint.accepts(Square(1))


def test_module_qualified_descriptor():
    """Test a module-qualified class name matches the class."""
    constraint = TypeConstraint.from_descriptor(f"{__name__}.Square")

    assert constraint.accepts(Square(1))
    assert not constraint.accepts(1)


def test_none_never_accepted():
    """Test None fails every constraint."""
    assert not TypeConstraint.from_descriptor(object).accepts(None)
    assert not TypeConstraint.from_descriptor("NoneType").accepts(None)


@pytest.mark.parametrize("descriptor", ["", "   ", None])
def test_empty_descriptor(descriptor):
    """Test empty descriptors are rejected."""
    with pytest.raises(TypeConstraintViolationError, match="cannot be empty"):
        TypeConstraint.from_descriptor(descriptor)


@pytest.mark.parametrize("descriptor", ["..Shape", ".Shape", "  .module.Shape"])
def test_relative_descriptor(descriptor):
    """Test relative import paths are rejected with a constraint error."""
    with pytest.raises(TypeConstraintViolationError, match="absolute name"):
        TypeConstraint.from_descriptor(descriptor)


def test_malformed_dotted_descriptor_matches_by_name():
    """Test a dotted name that cannot be imported falls back to name matching."""
    constraint = TypeConstraint.from_descriptor("missing..Square")

    assert constraint.accepted_type is None
    assert not constraint.accepts(Square(1))


def test_invalid_descriptor_kind():
    """Test descriptors that are neither types nor names are rejected."""
    with pytest.raises(TypeConstraintViolationError):
        TypeConstraint.from_descriptor(42)


def test_check_raises_with_context():
    """Test check reports expected and given types."""
    constraint = TypeConstraint.from_descriptor(int)

    with pytest.raises(TypeConstraintViolationError) as exc_info:
        constraint.check("one")

    assert exc_info.value.context == {"expected": "int", "given": "str"}
    constraint.check(1)


def test_constraint_immutable():
    """Test that a constraint is frozen."""
    constraint = TypeConstraint.from_descriptor(int)

    with pytest.raises(ValidationError):
        constraint.name = "str"
