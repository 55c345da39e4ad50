"""Lossless conversions between the three BEM surface forms.

Every converter accepts any BEM structure (object, string, vector or
``BemBase``), validates it, and returns the requested form.  Invalid
input is never coerced: the validator's ``BemValidationError``
propagates unchanged.

Canonical forms
---------------
object
    A new ``dict`` holding only the parts that are present; ``mod`` is
    a ``tuple`` of one or two strings.
string
    ``blk[__elt][--name[_value]]``.
vector
    A three-item ``list`` ``[blk, elt, mod]`` with ``None`` holes.

Round-trip law::

    to_bem_string(to_bem_object(s)) == s      # for canonical strings s
    to_bem_object(to_bem_vector(o)) == o      # for canonical objects o
"""
from __future__ import annotations

from typing import Any

from bemkit.grammar import (
    ELEMENT_SEPARATOR,
    MODIFIER_SEPARATOR,
    MODIFIER_VALUE_SEPARATOR,
    split_bem_string,
)
from bemkit.validator.checks import check_bem_shape
from bemkit.validator.shapes import BemShape

BemModifier = tuple[str, ...]
BemObject = dict[str, Any]
BemVector = list[Any]


def canonical_modifier(mod: Any) -> BemModifier | None:
    """Return ``mod`` as a one- or two-item tuple, dropping a ``None`` value."""
    if mod is None:
        return None
    name = mod[0]
    value = mod[1] if len(mod) == 2 else None
    return (name,) if value is None else (name, value)


def make_bem_object(blk: str, elt: str | None = None, mod: Any = None) -> BemObject:
    """Build a canonical BEM object from already-validated parts."""
    obj: BemObject = {"blk": blk}
    if elt is not None:
        obj["elt"] = elt
    if mod is not None:
        obj["mod"] = canonical_modifier(mod)
    return obj


def to_bem_object(value: Any) -> BemObject:
    """Convert any BEM structure to its canonical object form.

    Parameters
    ----------
    value:
        A BEM object, string, vector or ``BemBase``.

    Returns
    -------
    dict[str, Any]
        ``{"blk": ..., "elt"?: ..., "mod"?: (...)}``.

    Raises
    ------
    BemValidationError
        If ``value`` is not a valid BEM structure.
    """
    shape = check_bem_shape(value)

    if shape is BemShape.BASE:
        return make_bem_object(value.blk, value.elt, value.mod)

    if shape is BemShape.OBJECT:
        return make_bem_object(value["blk"], value.get("elt"), value.get("mod"))

    if shape is BemShape.STRING:
        parts = split_bem_string(value)
        return make_bem_object(
            parts.block,
            parts.elements[0] if parts.elements else None,
            parts.modifier_parts if parts.modifiers else None,
        )

    return make_bem_object(
        value[0],
        value[1] if len(value) > 1 else None,
        value[2] if len(value) > 2 else None,
    )


def to_bem_string(value: Any) -> str:
    """Convert any BEM structure to its serialized string form.

    A modifier without a value serializes without a trailing ``_``.

    Example
    -------
    ::

        >>> to_bem_string({"blk": "button", "mod": ("size", "large")})
        'button--size_large'
    """
    obj = to_bem_object(value)

    result = obj["blk"]
    if "elt" in obj:
        result += ELEMENT_SEPARATOR + obj["elt"]
    if "mod" in obj:
        mod = obj["mod"]
        result += MODIFIER_SEPARATOR + mod[0]
        if len(mod) == 2 and mod[1]:
            result += MODIFIER_VALUE_SEPARATOR + mod[1]
    return result


def to_bem_vector(value: Any) -> BemVector:
    """Convert any BEM structure to a ``[blk, elt, mod]`` vector with ``None`` holes."""
    obj = to_bem_object(value)
    return [obj["blk"], obj.get("elt"), obj.get("mod")]
