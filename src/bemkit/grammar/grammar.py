"""Formal grammar of BEM class names.

This module documents the BEM notation as EBNF-style string constants
and defines the separators used by the serialized form.  The grammar is
implemented by the predicates in ``bemkit.grammar.names`` and by the
right-to-left splitter in ``bemkit.grammar.split``; these constants are the
authoritative reference for both.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
    ``LETTER``  terminal: ASCII letter ``[A-Za-z]``
    ``DIGIT``   terminal: ASCII digit ``[0-9]``
"""
from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

ELEMENT_SEPARATOR: Final[str] = "__"
MODIFIER_SEPARATOR: Final[str] = "--"
MODIFIER_VALUE_SEPARATOR: Final[str] = "_"

# ---------------------------------------------------------------------------
# Names and values
# ---------------------------------------------------------------------------

GRAMMAR_NAME = """
bem_name  ::= LETTER [ { LETTER | DIGIT | '-' } ( LETTER | DIGIT ) ]
bem_value ::= ( LETTER | DIGIT ) [ { LETTER | DIGIT | '-' } ( LETTER | DIGIT ) ]

(* neither production may contain two adjacent dashes *)
"""

# ---------------------------------------------------------------------------
# Serialized form
# ---------------------------------------------------------------------------

GRAMMAR_STRING = """
bem_string ::= block [ '__' element ] [ '--' modifier ]

block    ::= bem_name
element  ::= bem_name
modifier ::= modifier_name [ '_' modifier_value ]

modifier_name  ::= bem_name
modifier_value ::= bem_value
"""

# ---------------------------------------------------------------------------
# Structured forms
# ---------------------------------------------------------------------------

GRAMMAR_STRUCTURE = """
bem_object ::= '{' 'blk' ':' block [ ',' 'elt' ':' element ] [ ',' 'mod' ':' bem_modifier ] '}'
bem_vector ::= '[' block [ ',' element [ ',' bem_modifier ] ] ']'

bem_modifier ::= '(' modifier_name [ ',' modifier_value ] ')'
bem_modifier_requirement ::= '(' modifier_name [ ',' modifier_value [ ',' BOOL ] ] ')'
"""

FULL_GRAMMAR: str = "\n".join([
    "# BEM Formal Grammar (EBNF-like notation)",
    "# =======================================",
    "",
    "# Names",
    GRAMMAR_NAME,
    "# Serialized form",
    GRAMMAR_STRING,
    "# Structured forms",
    GRAMMAR_STRUCTURE,
])

# Canonical order of the parts of a BEM structure, shared by the object
# keys and the vector positions.
PART_ORDER: list[str] = ["blk", "elt", "mod"]

PART_LABELS: dict[str, str] = {
    "blk": "block",
    "elt": "element",
    "mod": "modifier",
}
