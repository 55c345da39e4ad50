"""BEM validator module.

Exports the raising ``check_*`` validators, their non-raising
``validate_*`` counterparts, shape detection, and the error taxonomy.
"""
from __future__ import annotations

from bemkit.validator.checks import (
    check_bem_modifier,
    check_bem_modifier_requirement,
    check_bem_object,
    check_bem_shape,
    check_bem_string,
    check_bem_structure,
    check_bem_vector,
    is_bem_object,
    is_bem_string,
    is_bem_vector,
)
from bemkit.validator.errors import (
    BemError,
    BemErrorKind,
    BemStateError,
    BemValidationError,
    FinalUnfreezeError,
    FrozenMutationError,
)
from bemkit.validator.results import (
    ValidationResult,
    validate_bem_modifier,
    validate_bem_modifier_requirement,
    validate_bem_object,
    validate_bem_string,
    validate_bem_structure,
    validate_bem_vector,
)
from bemkit.validator.shapes import BemShape, detect_shape, shape_of

__all__ = [
    # Raising validators
    "check_bem_object",
    "check_bem_string",
    "check_bem_vector",
    "check_bem_shape",
    "check_bem_structure",
    "check_bem_modifier",
    "check_bem_modifier_requirement",
    # Predicates
    "is_bem_object",
    "is_bem_string",
    "is_bem_vector",
    # Result-returning validators
    "ValidationResult",
    "validate_bem_object",
    "validate_bem_string",
    "validate_bem_vector",
    "validate_bem_structure",
    "validate_bem_modifier",
    "validate_bem_modifier_requirement",
    # Shapes
    "BemShape",
    "detect_shape",
    "shape_of",
    # Errors
    "BemError",
    "BemErrorKind",
    "BemValidationError",
    "BemStateError",
    "FrozenMutationError",
    "FinalUnfreezeError",
]
