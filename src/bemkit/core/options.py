"""Option records for ``BemBase`` construction and setters.

Options can be passed as a record instance, as a mapping with a subset
of the record's field names, or omitted.  ``initialize_options`` turns
any of these into a fully-populated record, filling the defaults and
rejecting unknown names and non-boolean flags.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar


@dataclass(frozen=True, slots=True)
class BaseOptions:
    """Construction options of a ``BemBase``.

    Parameters
    ----------
    is_final:
        Freeze the instance forever.  Implies ``is_frozen``.
    is_frozen:
        Reject in-place mutation until ``unfreeze()`` is called.
    """

    is_final: bool = False
    is_frozen: bool = False

    def __post_init__(self) -> None:
        if self.is_final and not self.is_frozen:
            object.__setattr__(self, "is_frozen", True)


@dataclass(frozen=True, slots=True)
class SetterOptions:
    """Options of ``BemBase.set_blk``/``set_elt``/``set_mod``.

    Parameters
    ----------
    fresh:
        Apply the change to a new, unfrozen copy instead of the instance.
    """

    fresh: bool = False


R = TypeVar("R", BaseOptions, SetterOptions)


def initialize_options(value: Any, record_type: type[R], **overrides: bool | None) -> R:
    """Build a ``record_type`` instance from ``value`` and keyword overrides.

    Parameters
    ----------
    value:
        ``None``, an instance of ``record_type``, or a mapping whose keys
        are field names of ``record_type``.
    record_type:
        ``BaseOptions`` or ``SetterOptions``.
    overrides:
        Field values that take precedence over ``value``; ``None``
        entries are ignored.

    Returns
    -------
    BaseOptions | SetterOptions
        A fully-populated record.

    Raises
    ------
    TypeError
        If ``value`` is of an unsupported type, names an unknown option,
        or gives an option a non-boolean value.
    """
    names = {f.name for f in fields(record_type)}

    if value is None:
        given: dict[str, Any] = {}
    elif isinstance(value, record_type):
        given = {name: getattr(value, name) for name in names}
    elif isinstance(value, Mapping):
        given = dict(value)
    else:
        raise TypeError(
            f"options must be None, a mapping or {record_type.__name__} "
            f"but it is {type(value).__name__} ({value!r})"
        )

    given.update({name: flag for name, flag in overrides.items() if flag is not None})

    unknown = sorted(str(name) for name in given if name not in names)
    if unknown:
        raise TypeError(
            f"Unknown {record_type.__name__} option(s): {', '.join(unknown)}; "
            f"expected one of {', '.join(sorted(names))}"
        )

    for name, flag in given.items():
        if not isinstance(flag, bool):
            raise TypeError(
                f"{record_type.__name__} option {name!r} must be a bool "
                f"but it is {type(flag).__name__} ({flag!r})"
            )

    return replace(record_type(), **given)
