"""BEM conversion module.

Exports the canonical converters between object, string and vector
forms, and the JSON/YAML serializer.
"""
from __future__ import annotations

from bemkit.convert.converters import (
    BemModifier,
    BemObject,
    BemVector,
    canonical_modifier,
    make_bem_object,
    to_bem_object,
    to_bem_string,
    to_bem_vector,
)
from bemkit.convert.serializer import BemSerializer
from bemkit.grammar.split import BemStringParts, split_bem_string

__all__ = [
    "to_bem_object",
    "to_bem_string",
    "to_bem_vector",
    "make_bem_object",
    "canonical_modifier",
    "split_bem_string",
    "BemStringParts",
    "BemModifier",
    "BemObject",
    "BemVector",
    "BemSerializer",
]
