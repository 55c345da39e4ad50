"""``BemBase``: a mutable, freezable BEM class-name builder.

A ``BemBase`` holds one validated BEM object (block, optional element,
optional modifier) and two flags:

``is_frozen``
    In-place mutation raises ``FrozenMutationError``.  ``unfreeze()``
    lifts the restriction.
``is_final``
    The instance is frozen forever; ``unfreeze()`` raises
    ``FinalUnfreezeError``.

Setters take a ``fresh`` option.  With ``fresh=True`` the change is
applied to a new, unfrozen, non-final copy and the receiver is left
untouched, which is how immutable bases are specialized into selector
fragments::

    base = BemBase("text-input", is_final=True)
    disabled = base.set_mod(("disabled",), fresh=True)
    str(disabled)  # 'text-input--disabled'

Two instances are equal for all practical purposes when their
``to_bem_string()`` results are equal.  The class defines no ``__eq__``
of its own, so ``==`` keeps meaning identity.
"""
from __future__ import annotations

import logging
from typing import Any

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
from bemkit.core.options import BaseOptions, SetterOptions, initialize_options
from bemkit.validator.checks import check_bem_object
from bemkit.validator.errors import BemErrorKind, FinalUnfreezeError, FrozenMutationError

logger = logging.getLogger(__name__)


class BemBase:
    """A BEM block/element/modifier triple with freeze control.

    Parameters
    ----------
    initializer:
        Any BEM structure: a string, an object mapping, a vector, or
        another ``BemBase``.
    options:
        A ``BaseOptions`` record or a mapping with ``is_final`` /
        ``is_frozen`` keys.
    is_final:
        Keyword shortcut overriding ``options.is_final``.
    is_frozen:
        Keyword shortcut overriding ``options.is_frozen``.  Ignored
        (forced to ``True``) when the instance is final.

    Raises
    ------
    BemValidationError
        If ``initializer`` is not a valid BEM structure.
    TypeError
        If the options are malformed.
    """

    __slots__ = ("_blk", "_elt", "_mod", "_is_final", "_is_frozen")

    def __init__(
        self,
        initializer: Any,
        options: BaseOptions | dict[str, bool] | None = None,
        *,
        is_final: bool | None = None,
        is_frozen: bool | None = None,
    ) -> None:
        opts = initialize_options(options, BaseOptions, is_final=is_final, is_frozen=is_frozen)
        obj = to_bem_object(initializer)

        self._blk: str = obj["blk"]
        self._elt: str | None = obj.get("elt")
        self._mod: BemModifier | None = obj.get("mod")
        self._is_final: bool = opts.is_final
        self._is_frozen: bool = opts.is_frozen

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    @property
    def is_final(self) -> bool:
        """Whether the instance is frozen forever."""
        return self._is_final

    @property
    def is_frozen(self) -> bool:
        """Whether in-place mutation is currently rejected."""
        return self._is_frozen

    def freeze(self) -> BemBase:
        """Reject in-place mutation from now on.  Returns ``self``."""
        if not self._is_frozen:
            logger.debug("Freezing %r", self)
        self._is_frozen = True
        return self

    def unfreeze(self) -> BemBase:
        """Allow in-place mutation again.  Returns ``self``.

        Raises
        ------
        FinalUnfreezeError
            If the instance is final.
        """
        if self._is_final:
            raise FinalUnfreezeError(
                kind=BemErrorKind.FINAL_UNFREEZE,
                message="is frozen and that can not be undone because it is also final",
                component="BemBase",
                value=self.to_bem_string(),
            )
        if self._is_frozen:
            logger.debug("Unfreezing %r", self)
        self._is_frozen = False
        return self

    def _ensure_mutable(self, part: str) -> None:
        if self._is_frozen:
            raise FrozenMutationError(
                kind=BemErrorKind.FROZEN_MUTATION,
                message=f"is frozen and its {part} can not be changed",
                component="BemBase",
                value=self.to_bem_string(),
            )

    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------

    @property
    def blk(self) -> str:
        """The block name."""
        return self._blk

    @blk.setter
    def blk(self, value: str) -> None:
        self._ensure_mutable("block")
        check_bem_object({"blk": value, "elt": self._elt, "mod": self._mod})
        self._blk = value

    @property
    def elt(self) -> str | None:
        """The element name, or ``None``."""
        return self._elt

    @elt.setter
    def elt(self, value: str | None) -> None:
        self._ensure_mutable("element")
        if value is not None:
            check_bem_object({"blk": self._blk, "elt": value, "mod": self._mod})
        self._elt = value

    @property
    def mod(self) -> BemModifier | None:
        """The modifier as a ``(name,)`` or ``(name, value)`` tuple, or ``None``."""
        return self._mod

    @mod.setter
    def mod(self, value: Any) -> None:
        self._ensure_mutable("modifier")
        if value is not None:
            if isinstance(value, str):
                value = (value,)
            check_bem_object({"blk": self._blk, "elt": self._elt, "mod": value})
        self._mod = canonical_modifier(value)

    # ------------------------------------------------------------------
    # Chainable setters
    # ------------------------------------------------------------------

    def _target(self, options: SetterOptions | dict[str, bool] | None, fresh: bool | None) -> BemBase:
        opts = initialize_options(options, SetterOptions, fresh=fresh)
        if not opts.fresh:
            return self
        inst = BemBase(self.to_bem_object())
        logger.debug("Derived fresh %r from %r", inst, self)
        return inst

    def set_blk(
        self,
        value: str,
        options: SetterOptions | dict[str, bool] | None = None,
        *,
        fresh: bool | None = None,
    ) -> BemBase:
        """Set the block, in place or on a fresh copy.

        Parameters
        ----------
        value:
            The new block name.
        options:
            A ``SetterOptions`` record or a mapping with a ``fresh`` key.
        fresh:
            Keyword shortcut overriding ``options.fresh``.

        Returns
        -------
        BemBase
            ``self`` when changed in place, otherwise the new copy.

        Raises
        ------
        FrozenMutationError
            If changing in place and the instance is frozen.
        BemValidationError
            If ``value`` is not a BEM name.
        """
        target = self._target(options, fresh)
        target.blk = value
        return target

    def set_elt(
        self,
        value: str | None,
        options: SetterOptions | dict[str, bool] | None = None,
        *,
        fresh: bool | None = None,
    ) -> BemBase:
        """Set or, with ``None``, clear the element.  See ``set_blk``."""
        target = self._target(options, fresh)
        target.elt = value
        return target

    def set_mod(
        self,
        value: Any,
        options: SetterOptions | dict[str, bool] | None = None,
        *,
        fresh: bool | None = None,
    ) -> BemBase:
        """Set or, with ``None``, clear the modifier.  See ``set_blk``.

        ``value`` is a ``(name,)`` or ``(name, value)`` sequence; a bare
        string is taken as a modifier name without a value.
        """
        target = self._target(options, fresh)
        target.mod = value
        return target

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_bem_object(self) -> BemObject:
        return make_bem_object(self._blk, self._elt, self._mod)

    def to_bem_string(self) -> str:
        return to_bem_string(self.to_bem_object())

    def to_bem_vector(self) -> BemVector:
        return to_bem_vector(self.to_bem_object())

    def to_query_selector(self) -> str:
        """Return a CSS class selector, e.g. ``".button__icon"``."""
        return f".{self.to_bem_string()}"

    def clone(self) -> BemBase:
        """Return an unfrozen, non-final copy."""
        return BemBase(self.to_bem_object())

    def __str__(self) -> str:
        return self.to_bem_string()

    def __repr__(self) -> str:
        flags = ""
        if self._is_final:
            flags = ", is_final=True"
        elif self._is_frozen:
            flags = ", is_frozen=True"
        return f"BemBase({self.to_bem_string()!r}{flags})"


