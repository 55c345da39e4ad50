"""Runtime shape detection for BEM structures.

A BEM structure arrives in one of four shapes.  ``shape_of`` resolves
which one exactly once, at the API boundary, so that validators and
converters can dispatch on a ``BemShape`` member instead of repeating
``isinstance`` checks.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, auto
from typing import Any

from bemkit.validator.errors import BemErrorKind, BemValidationError


class BemShape(Enum):
    """The surface forms a BEM structure can take.

    BASE
        A ``BemBase`` instance.
    OBJECT
        A mapping with ``blk``/``elt``/``mod`` keys.
    STRING
        A serialized ``blk__elt--mod_value`` string.
    VECTOR
        A positional ``[blk, elt, mod]`` list or tuple.
    """

    BASE = auto()
    OBJECT = auto()
    STRING = auto()
    VECTOR = auto()


def is_sequence(value: Any) -> bool:
    """Return True for lists, tuples and other non-string sequences."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def detect_shape(value: Any) -> BemShape | None:
    """Return the shape of ``value``, or ``None`` when it has none."""
    from bemkit.core.base import BemBase

    if isinstance(value, BemBase):
        return BemShape.BASE
    if isinstance(value, str):
        return BemShape.STRING
    if isinstance(value, Mapping):
        return BemShape.OBJECT
    if is_sequence(value):
        return BemShape.VECTOR
    return None


def shape_of(value: Any) -> BemShape:
    """Return the shape of ``value``.

    Raises
    ------
    BemValidationError
        With kind ``UNSUPPORTED_SHAPE`` for numbers, booleans, ``None``,
        callables, bytes and anything else that is not a BEM structure.
    """
    shape = detect_shape(value)
    if shape is None:
        raise BemValidationError(
            kind=BemErrorKind.UNSUPPORTED_SHAPE,
            message="must be a BEM base, object, string or vector",
            component="BEM structure",
            value=value,
        )
    return shape
