"""Shape validators for BEM objects, strings and vectors.

Each ``check_*`` function verifies one surface form and returns its
input unchanged on success; validators never transform what they are
given.  On failure they raise ``BemValidationError`` whose ``kind``
names the rule that was violated and whose ``value`` is the offending
part.

Usage
-----
::

    from bemkit.validator import check_bem_string

    check_bem_string("button__icon--size_large")  # returns the string
    check_bem_string("1button")                   # raises INVALID_BLOCK
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from bemkit.grammar import (
    PART_LABELS,
    PART_ORDER,
    is_bem_name,
    is_bem_value,
    split_bem_string,
)
from bemkit.validator.errors import BemError, BemErrorKind, BemValidationError
from bemkit.validator.shapes import BemShape, is_sequence, shape_of

_OBJECT_LABELS: dict[str, str] = {
    part: f"'{part}' attribute of BEM object" for part in PART_ORDER
}
_VECTOR_LABELS: dict[str, str] = {
    part: f"element {index} ({PART_LABELS[part]}) of BEM vector"
    for index, part in enumerate(PART_ORDER)
}
_STRING_LABELS: dict[str, str] = {
    part: f"{PART_LABELS[part]} of BEM string" for part in PART_ORDER
}


def _fail(kind: BemErrorKind, component: str, message: str, value: Any) -> NoReturn:
    raise BemValidationError(kind=kind, message=message, component=component, value=value)


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


def check_bem_modifier(value: Any, component: str = "BEM modifier") -> Any:
    """Check that ``value`` is a ``(name,)`` or ``(name, value)`` sequence.

    Parameters
    ----------
    value:
        The candidate modifier.
    component:
        Label used in error messages; callers checking a modifier nested
        in a larger structure pass the location of that modifier.

    Returns
    -------
    Any
        ``value`` itself.

    Raises
    ------
    BemValidationError
        ``INVALID_MODIFIER`` when ``value`` is not a sequence of one or
        two items, ``INVALID_MODIFIER_NAME`` / ``INVALID_MODIFIER_VALUE``
        when one of its items fails the grammar.
    """
    if not is_sequence(value) or not 1 <= len(value) <= 2:
        _fail(
            BemErrorKind.INVALID_MODIFIER,
            component,
            "must be a sequence of a required BEM name and an optional BEM value",
            value,
        )

    name = value[0]
    if not is_bem_name(name):
        _fail(
            BemErrorKind.INVALID_MODIFIER_NAME,
            f"name of {component}",
            "must be a BEM name",
            name,
        )

    modifier_value = value[1] if len(value) == 2 else None
    if modifier_value is not None and not is_bem_value(modifier_value):
        _fail(
            BemErrorKind.INVALID_MODIFIER_VALUE,
            f"value of {component}",
            "is optional but must be a BEM value when provided",
            modifier_value,
        )

    return value


def check_bem_modifier_requirement(value: Any) -> tuple[str, str | None, bool]:
    """Check a ``(name, value?, is_not?)`` modifier requirement.

    Requirements are what selector filters consume: a modifier plus a
    flag telling whether the modifier must be present or absent.

    Returns
    -------
    tuple[str, str | None, bool]
        The canonical three-item form, with ``None`` for a missing
        value and ``False`` for a missing negation flag.
    """
    component = "BEM modifier requirement"
    if not is_sequence(value) or not 1 <= len(value) <= 3:
        _fail(
            BemErrorKind.INVALID_MODIFIER,
            component,
            "must be a sequence of one, two or three items",
            value,
        )

    is_not = value[2] if len(value) == 3 else False
    if not isinstance(is_not, bool):
        _fail(
            BemErrorKind.INVALID_MODIFIER,
            f"negation flag of {component}",
            "must be a bool",
            is_not,
        )

    modifier = tuple(value[:2])
    check_bem_modifier(modifier, component)
    modifier_value = modifier[1] if len(modifier) == 2 else None
    return (modifier[0], modifier_value, is_not)


def _check_parts(blk: Any, elt: Any, mod: Any, labels: dict[str, str]) -> None:
    if not is_bem_name(blk):
        _fail(BemErrorKind.INVALID_BLOCK, labels["blk"], "must be a BEM name", blk)

    if elt is not None and not is_bem_name(elt):
        _fail(BemErrorKind.INVALID_ELEMENT, labels["elt"], "must be a BEM name", elt)

    if mod is not None:
        check_bem_modifier(mod, labels["mod"])


# ---------------------------------------------------------------------------
# Surface forms
# ---------------------------------------------------------------------------


def check_bem_object(value: Any) -> Any:
    """Check that ``value`` is a valid BEM object.

    A BEM object is a non-empty mapping with a required ``blk`` key and
    optional ``elt`` and ``mod`` keys; no other keys are allowed.  A
    ``None`` element or modifier counts as absent.

    Raises
    ------
    BemValidationError
        ``INVALID_SHAPE``, ``EMPTY_INPUT``, ``INVALID_BLOCK``,
        ``INVALID_ELEMENT`` or one of the modifier kinds.
    """
    if not isinstance(value, Mapping):
        _fail(BemErrorKind.INVALID_SHAPE, "BEM object", "must be a mapping", value)

    if not value:
        _fail(BemErrorKind.EMPTY_INPUT, "BEM object", "can not be empty", value)

    unknown = [key for key in value if key not in PART_ORDER]
    if unknown:
        _fail(
            BemErrorKind.INVALID_SHAPE,
            "BEM object",
            f"can only have 'blk', 'elt' and 'mod' keys, found {unknown!r}",
            value,
        )

    _check_parts(value.get("blk"), value.get("elt"), value.get("mod"), _OBJECT_LABELS)
    return value


def check_bem_string(value: Any) -> Any:
    """Check that ``value`` is a valid serialized BEM string.

    The string is examined from the right: modifier part first, then
    element part, then block.

    Raises
    ------
    BemValidationError
        ``NOT_A_STRING``, ``EMPTY_INPUT``, ``TOO_MANY_MODIFIERS``,
        ``TOO_MANY_MODIFIER_VALUES``, ``INVALID_MODIFIER_NAME``,
        ``INVALID_MODIFIER_VALUE``, ``TOO_MANY_ELEMENTS``,
        ``INVALID_ELEMENT`` or ``INVALID_BLOCK``.
    """
    if not isinstance(value, str):
        _fail(BemErrorKind.NOT_A_STRING, "BEM string", "must be a string", value)

    if not value:
        _fail(BemErrorKind.EMPTY_INPUT, "BEM string", "can not be empty", value)

    parts = split_bem_string(value)

    # 1. Modifier part
    if len(parts.modifiers) > 1:
        _fail(
            BemErrorKind.TOO_MANY_MODIFIERS,
            "BEM string",
            f"can have only one modifier but has {len(parts.modifiers)} of them "
            f"({', '.join(parts.modifiers)})",
            value,
        )

    if parts.modifiers:
        if len(parts.modifier_parts) > 2:
            values = parts.modifier_parts[1:]
            _fail(
                BemErrorKind.TOO_MANY_MODIFIER_VALUES,
                _STRING_LABELS["mod"],
                f"can have only one value but has {len(values)} of them ({', '.join(values)})",
                value,
            )

        name = parts.modifier_parts[0] if parts.modifier_parts else parts.modifiers[0]
        if not is_bem_name(name):
            _fail(
                BemErrorKind.INVALID_MODIFIER_NAME,
                f"name of {_STRING_LABELS['mod']}",
                "must be a BEM name",
                name,
            )

        if len(parts.modifier_parts) == 2 and not is_bem_value(parts.modifier_parts[1]):
            _fail(
                BemErrorKind.INVALID_MODIFIER_VALUE,
                f"value of {_STRING_LABELS['mod']}",
                "is optional but must be a BEM value when provided",
                parts.modifier_parts[1],
            )

    # 2. Element part
    if len(parts.elements) > 1:
        _fail(
            BemErrorKind.TOO_MANY_ELEMENTS,
            "BEM string",
            f"can have only one element but has {len(parts.elements)} of them "
            f"({', '.join(parts.elements)})",
            value,
        )

    if parts.elements and not is_bem_name(parts.elements[0]):
        _fail(
            BemErrorKind.INVALID_ELEMENT,
            _STRING_LABELS["elt"],
            "must be a BEM name",
            parts.elements[0],
        )

    # 3. Block part
    if not is_bem_name(parts.block):
        _fail(BemErrorKind.INVALID_BLOCK, _STRING_LABELS["blk"], "must be a BEM name", parts.block)

    return value


def check_bem_vector(value: Any) -> Any:
    """Check that ``value`` is a valid ``[blk, elt?, mod?]`` BEM vector.

    Raises
    ------
    BemValidationError
        ``INVALID_SHAPE`` for non-sequences and sequences longer than
        three items, ``EMPTY_INPUT`` for an empty sequence, otherwise
        the same component kinds as ``check_bem_object``.
    """
    if not is_sequence(value):
        _fail(BemErrorKind.INVALID_SHAPE, "BEM vector", "must be a list or a tuple", value)

    if not value:
        _fail(BemErrorKind.EMPTY_INPUT, "BEM vector", "can not be empty", value)

    if len(value) > 3:
        _fail(
            BemErrorKind.INVALID_SHAPE,
            "BEM vector",
            "must have one, two or three items",
            value,
        )

    blk = value[0]
    elt = value[1] if len(value) > 1 else None
    mod = value[2] if len(value) > 2 else None
    _check_parts(blk, elt, mod, _VECTOR_LABELS)
    return value


def check_bem_shape(value: Any) -> BemShape:
    """Validate ``value`` according to its runtime shape and return that shape.

    Converters use the returned shape to pick a conversion without
    inspecting ``value`` a second time.
    """
    shape = shape_of(value)
    if shape is BemShape.OBJECT:
        check_bem_object(value)
    elif shape is BemShape.STRING:
        check_bem_string(value)
    elif shape is BemShape.VECTOR:
        check_bem_vector(value)
    return shape


def check_bem_structure(value: Any) -> Any:
    """Check ``value`` according to its runtime shape.

    A ``BemBase`` instance is accepted as-is because its own setters
    keep it valid.

    Raises
    ------
    BemValidationError
        ``UNSUPPORTED_SHAPE`` when ``value`` is not a BEM base, object,
        string or vector; otherwise whatever the shape's checker raises.
    """
    check_bem_shape(value)
    return value


# ---------------------------------------------------------------------------
# Boolean predicates
# ---------------------------------------------------------------------------


def is_bem_object(value: Any) -> bool:
    """Return True if ``value`` passes ``check_bem_object``."""
    try:
        check_bem_object(value)
    except BemError:
        return False
    return True


def is_bem_string(value: Any) -> bool:
    """Return True if ``value`` passes ``check_bem_string``."""
    try:
        check_bem_string(value)
    except BemError:
        return False
    return True


def is_bem_vector(value: Any) -> bool:
    """Return True if ``value`` passes ``check_bem_vector``."""
    try:
        check_bem_vector(value)
    except BemError:
        return False
    return True
