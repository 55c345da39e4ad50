"""Core domain logic.

``BemBase`` and its option records, plus helpers that read modifiers
back out of class lists.  Submodules in core/ should not import from
cli/.
"""
from __future__ import annotations

from bemkit.core.base import BemBase
from bemkit.core.modifiers import extract_modifier, get_bem_modifiers, split_class_names
from bemkit.core.options import BaseOptions, SetterOptions, initialize_options

__all__ = [
    "BemBase",
    "BaseOptions",
    "SetterOptions",
    "initialize_options",
    "get_bem_modifiers",
    "extract_modifier",
    "split_class_names",
]
