"""Non-raising validation API.

Each ``validate_*`` function runs the matching ``check_*`` validator and
returns a ``ValidationResult`` instead of raising, so call sites that
branch on validity can do so without ``try``/``except``.

Usage
-----
::

    from bemkit.validator import validate_bem_string

    result = validate_bem_string(class_name)
    if not result.ok:
        print(result.error.kind.name)
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bemkit.validator.checks import (
    check_bem_modifier,
    check_bem_modifier_requirement,
    check_bem_object,
    check_bem_string,
    check_bem_structure,
    check_bem_vector,
)
from bemkit.validator.errors import BemError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of a single validation.

    Parameters
    ----------
    value:
        The validated value on success, or the rejected input on failure.
    error:
        The error that a ``check_*`` validator would have raised, or
        ``None`` on success.
    """

    value: T
    error: BemError | None = None

    @property
    def ok(self) -> bool:
        """Return True if validation passed."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the validated value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def _validate(check: Callable[[Any], T], value: Any) -> ValidationResult[Any]:
    try:
        return ValidationResult(value=check(value))
    except BemError as exc:
        return ValidationResult(value=value, error=exc)


def validate_bem_object(value: Any) -> ValidationResult[Any]:
    return _validate(check_bem_object, value)


def validate_bem_string(value: Any) -> ValidationResult[Any]:
    return _validate(check_bem_string, value)


def validate_bem_vector(value: Any) -> ValidationResult[Any]:
    return _validate(check_bem_vector, value)


def validate_bem_structure(value: Any) -> ValidationResult[Any]:
    return _validate(check_bem_structure, value)


def validate_bem_modifier(value: Any) -> ValidationResult[Any]:
    return _validate(check_bem_modifier, value)


def validate_bem_modifier_requirement(value: Any) -> ValidationResult[Any]:
    """Validate a modifier requirement; on success ``value`` is its canonical 3-tuple."""
    return _validate(check_bem_modifier_requirement, value)
