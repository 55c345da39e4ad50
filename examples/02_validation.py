#!/usr/bin/env python3
"""Example: BEM validation

Demonstrates the raising ``check`` API, the non-raising ``validate``
API, and what the structured error tells you about a bad class name.

Usage:
    python examples/02_validation.py

Requirements:
    pip install bemkit
"""
from __future__ import annotations

import bemkit
from bemkit.validator import BemValidationError, FrozenMutationError

CANDIDATES = [
    "button",
    "button__icon--size_large",
    "1button",
    "block--mod1--mod2_2",
    "nav__item__link",
    ["nav", "item", ["active", "yes"]],
    {"blk": "nav", "color": "red"},
    42,
]


def main() -> None:
    # Non-raising validation
    for candidate in CANDIDATES:
        result = bemkit.validate(candidate)
        if result.ok:
            print(f"  OK       {candidate!r}")
        else:
            print(f"  {result.error.kind.name:<24} {result.error}")

    # Raising validation
    try:
        bemkit.check("button--")
    except BemValidationError as exc:
        print(f"\ncheck() raised {exc.kind.name} for component {exc.component!r}")

    # Frozen instances reject in-place mutation
    base = bemkit.BemBase("button", is_frozen=True)
    try:
        base.set_mod(("disabled",))
    except FrozenMutationError as exc:
        print(f"set_mod() raised: {exc}")
    print(f"fresh copy: {base.set_mod(('disabled',), fresh=True)}")


if __name__ == "__main__":
    main()
