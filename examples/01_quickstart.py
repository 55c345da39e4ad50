#!/usr/bin/env python3
"""Example: Quickstart for bemkit

Minimal working example: convert a class name between forms, build
selectors from a final base, and read modifiers back out of a class
attribute.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install bemkit
"""
from __future__ import annotations

import bemkit
from bemkit.core import get_bem_modifiers

CLASS_ATTRIBUTE = "text-input text-input--disabled text-input--size_large"


def main() -> None:
    print(f"bemkit version: {bemkit.__version__}")

    # Step 1: Convert between the three forms
    obj = bemkit.to_bem_object("text-input__field--size_large")
    print(f"Object: {obj}")
    print(f"Vector: {bemkit.to_bem_vector(obj)}")
    print(f"String: {bemkit.to_bem_string(obj)}")

    # Step 2: Derive selectors from a final base
    base = bemkit.BemBase("text-input", is_final=True)
    field = base.set_elt("field", fresh=True)
    disabled = base.set_mod(("disabled",), fresh=True)
    print(f"\nBase:     {base.to_query_selector()}")
    print(f"Field:    {field.to_query_selector()}")
    print(f"Disabled: {disabled.to_query_selector()}")

    # Step 3: Read the component state back out of its classes
    for mod in get_bem_modifiers(base, CLASS_ATTRIBUTE):
        print(f"  modifier {mod}")


if __name__ == "__main__":
    main()
