"""Reading BEM modifiers back out of DOM class lists.

A rendered component carries its state as modifier classes, e.g.
``"text-input text-input--disabled text-input--size_large"``.  The
helpers here parse such lists into ``(name, value)`` modifier tuples so
that test fixtures can compare state without string slicing.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from bemkit.convert.converters import BemModifier, canonical_modifier, to_bem_object
from bemkit.core.base import BemBase
from bemkit.grammar import MODIFIER_SEPARATOR, is_bem_modifier_name
from bemkit.validator.checks import check_bem_modifier, is_bem_string
from bemkit.validator.errors import BemErrorKind, BemValidationError

logger = logging.getLogger(__name__)


def split_class_names(class_names: str | Iterable[str]) -> list[str]:
    """Return the non-blank class names of a class attribute or list.

    Parameters
    ----------
    class_names:
        A whitespace-separated class attribute, or an iterable of class
        names.

    Raises
    ------
    TypeError
        If ``class_names`` is neither a string nor an iterable of strings.
    """
    if isinstance(class_names, str):
        return class_names.split()

    if not isinstance(class_names, Iterable):
        raise TypeError(
            "class_names must be a string or an iterable of strings "
            f"but it is {type(class_names).__name__} ({class_names!r})"
        )

    names: list[str] = []
    for name in class_names:
        if not isinstance(name, str):
            raise TypeError(
                f"class names must be strings but found {type(name).__name__} ({name!r})"
            )
        if name.strip():
            names.append(name.strip())
    return names


def get_bem_modifiers(
    base: Any,
    class_names: str | Iterable[str],
    modifier_name: str | None = None,
) -> list[BemModifier]:
    """Return the modifiers of ``base`` found in ``class_names``.

    Parameters
    ----------
    base:
        Any BEM structure identifying the block (and element) whose
        modifiers are wanted.  Its own modifier, if any, is ignored.
    class_names:
        The class attribute or class list to search.
    modifier_name:
        When given, only modifiers with this name are returned.

    Returns
    -------
    list[tuple[str, ...]]
        Modifiers in class-list order, e.g. ``[("cid", "1"), ("disabled",)]``.

    Raises
    ------
    BemValidationError
        If ``modifier_name`` is not a BEM name, or a class name that
        starts with the base's modifier prefix is not a valid BEM string.
    """
    if modifier_name is not None and not is_bem_modifier_name(modifier_name):
        raise BemValidationError(
            kind=BemErrorKind.INVALID_MODIFIER_NAME,
            message="must be a BEM name",
            component="modifier name filter",
            value=modifier_name,
        )

    prefix = BemBase(base).set_mod(None).to_bem_string() + MODIFIER_SEPARATOR
    modifiers: list[BemModifier] = []
    for name in split_class_names(class_names):
        if not name.startswith(prefix + (modifier_name or "")):
            continue
        mod = BemBase(name).mod
        if mod is None or (modifier_name is not None and mod[0] != modifier_name):
            continue
        modifiers.append(mod)

    logger.debug("Found %d modifier(s) with prefix %r", len(modifiers), prefix)
    return modifiers


def extract_modifier(class_names: str | Iterable[str], modifier: Any) -> str | None:
    """Return the first class name carrying ``modifier``.

    A modifier given without a value matches any class name with the
    same modifier name; with a value, the value must match as well.
    Class names that are not BEM strings are skipped.

    Raises
    ------
    BemValidationError
        If ``modifier`` is not a valid BEM modifier.
    """
    check_bem_modifier(modifier)
    wanted = canonical_modifier(modifier)

    for name in split_class_names(class_names):
        if not is_bem_string(name):
            continue
        mod = to_bem_object(name).get("mod")
        if mod is None or mod[0] != wanted[0]:
            continue
        if len(wanted) == 1 or mod == wanted:
            return name
    return None
