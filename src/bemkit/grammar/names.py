"""Predicates classifying strings as BEM names and values.

A BEM *name* starts with an ASCII letter, ends with a letter or a digit,
has only letters, digits and dashes in between, and never contains two
adjacent dashes.  A BEM *value* follows the same rule except that it may
also start with a digit.

Every predicate accepts arbitrary input and returns ``False`` for
anything that is not a ``str``; none of them raise.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Final

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_NAME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_VALUE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?")
_SIBLING_DASHES: Final[str] = "--"


def is_bem_name(value: Any) -> bool:
    """Return True if ``value`` is a valid BEM name."""
    if not isinstance(value, str):
        return False
    return _NAME.fullmatch(value) is not None and _SIBLING_DASHES not in value


def is_bem_value(value: Any) -> bool:
    """Return True if ``value`` is a valid BEM value.

    Unlike names, values may start with a digit, so ``"1"`` and
    ``"2-columns"`` are accepted.
    """
    if not isinstance(value, str):
        return False
    return _VALUE.fullmatch(value) is not None and _SIBLING_DASHES not in value


def is_bem_block(value: Any) -> bool:
    return is_bem_name(value)


def is_bem_element(value: Any) -> bool:
    return is_bem_name(value)


def is_bem_modifier_name(value: Any) -> bool:
    return is_bem_name(value)


def is_bem_modifier_value(value: Any) -> bool:
    return is_bem_value(value)


def is_bem_modifier(value: Any) -> bool:
    """Return True if ``value`` is a ``(name,)`` or ``(name, value)`` sequence.

    A ``None`` value counts as absent, so ``("disabled", None)`` is a
    valid modifier.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    if not 1 <= len(value) <= 2:
        return False
    if not is_bem_modifier_name(value[0]):
        return False
    return len(value) == 1 or value[1] is None or is_bem_modifier_value(value[1])
