"""BEM grammar module.

Exports the name/value predicates, the lexical splitter and separators
of the serialized form, and the formal grammar constants.
"""
from __future__ import annotations

from bemkit.grammar.grammar import (
    ELEMENT_SEPARATOR,
    FULL_GRAMMAR,
    GRAMMAR_NAME,
    GRAMMAR_STRING,
    GRAMMAR_STRUCTURE,
    MODIFIER_SEPARATOR,
    MODIFIER_VALUE_SEPARATOR,
    PART_LABELS,
    PART_ORDER,
)
from bemkit.grammar.names import (
    is_bem_block,
    is_bem_element,
    is_bem_modifier,
    is_bem_modifier_name,
    is_bem_modifier_value,
    is_bem_name,
    is_bem_value,
)
from bemkit.grammar.split import BemStringParts, split_bem_string

__all__ = [
    # Predicates
    "is_bem_name",
    "is_bem_value",
    "is_bem_block",
    "is_bem_element",
    "is_bem_modifier",
    "is_bem_modifier_name",
    "is_bem_modifier_value",
    # String decomposition
    "BemStringParts",
    "split_bem_string",
    # Separators
    "ELEMENT_SEPARATOR",
    "MODIFIER_SEPARATOR",
    "MODIFIER_VALUE_SEPARATOR",
    # Grammar constants
    "FULL_GRAMMAR",
    "GRAMMAR_NAME",
    "GRAMMAR_STRING",
    "GRAMMAR_STRUCTURE",
    "PART_ORDER",
    "PART_LABELS",
]
