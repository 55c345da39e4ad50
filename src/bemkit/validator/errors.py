"""Error types for BEM validation and ``BemBase`` state changes.

Every error carries the failing component, the offending value and its
runtime type so that callers can reproduce the failure from the message
alone.  Validation errors are also ``TypeError`` subclasses, matching
how Python reports an argument of the wrong shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class BemErrorKind(Enum):
    """Exhaustive taxonomy of BEM failures.

    UNSUPPORTED_SHAPE
        The input is not a mapping, string, sequence or ``BemBase``.
    INVALID_SHAPE
        The input has the right container type but the wrong layout,
        e.g. unknown object keys or a vector of more than three items.
    NOT_A_STRING
        The string validator received something other than ``str``.
    EMPTY_INPUT
        An empty string, mapping or vector where content is required.
    INVALID_BLOCK / INVALID_ELEMENT
        The block or element is not a BEM name.
    INVALID_MODIFIER
        The modifier is not a sequence of one or two items.
    INVALID_MODIFIER_NAME / INVALID_MODIFIER_VALUE
        A modifier part failed the grammar.
    TOO_MANY_MODIFIERS / TOO_MANY_ELEMENTS / TOO_MANY_MODIFIER_VALUES
        A BEM string has more separator-delimited parts than allowed.
    FROZEN_MUTATION
        In-place mutation of a frozen (or final) ``BemBase``.
    FINAL_UNFREEZE
        ``unfreeze()`` called on a final ``BemBase``.
    """

    UNSUPPORTED_SHAPE = auto()
    INVALID_SHAPE = auto()
    NOT_A_STRING = auto()
    EMPTY_INPUT = auto()
    INVALID_BLOCK = auto()
    INVALID_ELEMENT = auto()
    INVALID_MODIFIER = auto()
    INVALID_MODIFIER_NAME = auto()
    INVALID_MODIFIER_VALUE = auto()
    TOO_MANY_MODIFIERS = auto()
    TOO_MANY_ELEMENTS = auto()
    TOO_MANY_MODIFIER_VALUES = auto()
    FROZEN_MUTATION = auto()
    FINAL_UNFREEZE = auto()


@dataclass(frozen=True, eq=False)
class BemError(Exception):
    """Base class of all bemkit errors.

    Parameters
    ----------
    kind:
        Which rule was violated.
    message:
        Human-readable description of the requirement that failed.
    component:
        The part of the structure being checked, e.g. ``"BEM string"``
        or ``"'elt' attribute of BEM object"``.
    value:
        The offending runtime value.
    """

    kind: BemErrorKind
    message: str
    component: str
    value: Any = None

    @property
    def type_name(self) -> str:
        """Return the name of the offending value's runtime type."""
        return type(self.value).__name__

    def __str__(self) -> str:
        return f"{self.component}: {self.message} but it is {self.type_name} ({self.value!r})"

    # dataclass(frozen=True) doesn't call Exception.__init__ automatically
    def __post_init__(self) -> None:
        object.__setattr__(self, "args", (str(self),))


class BemValidationError(BemError, TypeError):
    """A value failed the BEM grammar or has an unsupported shape."""


class BemStateError(BemError):
    """A ``BemBase`` operation is not allowed in the instance's current state."""


class FrozenMutationError(BemStateError):
    """In-place mutation was attempted on a frozen instance."""


class FinalUnfreezeError(BemStateError):
    """``unfreeze()`` was called on a final instance."""
