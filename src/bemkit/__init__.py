"""bemkit: BEM class-name grammar, validation, conversion and builders.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import bemkit

    # Normalize any BEM structure into the canonical object form
    bemkit.to_bem_object("button__icon--size_large")
    # {'blk': 'button', 'elt': 'icon', 'mod': ('size', 'large')}

    # Validate without raising
    result = bemkit.validate(["button", None, ["1bad"]])
    result.ok, result.error.kind

    # Build selectors from a final base
    base = bemkit.BemBase("text-input", is_final=True)
    str(base.set_mod(("disabled",), fresh=True))
    # 'text-input--disabled'

    bemkit.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bemkit.core.base import BemBase

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from bemkit.validator.results import ValidationResult


def to_bem_object(value: Any) -> dict[str, Any]:
    """Convert any BEM structure into the canonical object form.

    Raises
    ------
    bemkit.validator.BemValidationError
        If ``value`` is not a valid BEM structure.
    """
    from bemkit.convert.converters import to_bem_object as _to_bem_object

    return _to_bem_object(value)


def to_bem_string(value: Any) -> str:
    """Convert any BEM structure into its class-name string.

    Raises
    ------
    bemkit.validator.BemValidationError
        If ``value`` is not a valid BEM structure.
    """
    from bemkit.convert.converters import to_bem_string as _to_bem_string

    return _to_bem_string(value)


def to_bem_vector(value: Any) -> list[Any]:
    """Convert any BEM structure into the ``[blk, elt, mod]`` vector form.

    Raises
    ------
    bemkit.validator.BemValidationError
        If ``value`` is not a valid BEM structure.
    """
    from bemkit.convert.converters import to_bem_vector as _to_bem_vector

    return _to_bem_vector(value)


def check(value: Any) -> Any:
    """Validate any BEM structure, returning it unchanged.

    Raises
    ------
    bemkit.validator.BemValidationError
        If ``value`` is not a valid BEM structure.
    """
    from bemkit.validator.checks import check_bem_structure

    return check_bem_structure(value)


def validate(value: Any) -> "ValidationResult[Any]":
    """Validate any BEM structure and return a ``ValidationResult``.

    Unlike ``check``, this never raises for invalid input; the error is
    carried on the result instead.
    """
    from bemkit.validator.results import validate_bem_structure

    return validate_bem_structure(value)


__all__ = [
    "__version__",
    "BemBase",
    "to_bem_object",
    "to_bem_string",
    "to_bem_vector",
    "check",
    "validate",
]
