"""Right-to-left decomposition of serialized BEM strings.

The split is purely lexical: it does not validate any part.  Both the
string validator and the string-to-object converter work on its
result, so the two can never disagree about where a part begins.
"""
from __future__ import annotations

from dataclasses import dataclass

from bemkit.grammar.grammar import (
    ELEMENT_SEPARATOR,
    MODIFIER_SEPARATOR,
    MODIFIER_VALUE_SEPARATOR,
)


@dataclass(frozen=True, slots=True)
class BemStringParts:
    """Raw fragments of a BEM string.

    Parameters
    ----------
    block:
        Text before the first element separator.
    elements:
        Every fragment that followed an element separator.  A valid
        string has at most one.
    modifiers:
        Every fragment that followed a modifier separator.  A valid
        string has at most one.
    modifier_parts:
        The non-empty ``_``-delimited fragments of the first modifier:
        its name and, optionally, its value.
    """

    block: str
    elements: tuple[str, ...]
    modifiers: tuple[str, ...]
    modifier_parts: tuple[str, ...]


def split_bem_string(value: str) -> BemStringParts:
    """Split ``value`` into block, element and modifier fragments.

    The modifier part is taken off first, then the element part, and
    whatever remains is the block.

    Example
    -------
    ::

        >>> split_bem_string("block__elt--mod-name_mod-value").modifier_parts
        ('mod-name', 'mod-value')
    """
    head, *modifiers = value.split(MODIFIER_SEPARATOR)
    modifier_parts: tuple[str, ...] = ()
    if modifiers:
        modifier_parts = tuple(
            part for part in modifiers[0].split(MODIFIER_VALUE_SEPARATOR) if part
        )
    block, *elements = head.split(ELEMENT_SEPARATOR)
    return BemStringParts(
        block=block,
        elements=tuple(elements),
        modifiers=tuple(modifiers),
        modifier_parts=modifier_parts,
    )
