"""Unit tests for bemkit.validator.checks and bemkit.validator.shapes."""
from __future__ import annotations

import pytest

from bemkit.core.base import BemBase
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
from bemkit.validator.errors import BemErrorKind, BemValidationError
from bemkit.validator.shapes import BemShape, detect_shape, is_sequence, shape_of


def _kind(exc_info: pytest.ExceptionInfo[BemValidationError]) -> BemErrorKind:
    return exc_info.value.kind


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestCheckBemString:
    @pytest.mark.parametrize(
        "value",
        [
            "a",
            "block",
            "block__elt",
            "block--mod",
            "block--mod_1",
            "text-input__field--size_large",
            "block--mod_",
        ],
    )
    def test_valid_strings_are_returned_unchanged(self, value: str) -> None:
        assert check_bem_string(value) is value

    @pytest.mark.parametrize(
        ("value", "kind", "offending"),
        [
            (1, BemErrorKind.NOT_A_STRING, 1),
            (None, BemErrorKind.NOT_A_STRING, None),
            ("", BemErrorKind.EMPTY_INPUT, ""),
            ("1block", BemErrorKind.INVALID_BLOCK, "1block"),
            ("   ", BemErrorKind.INVALID_BLOCK, "   "),
            ("block--mod1--mod2_2", BemErrorKind.TOO_MANY_MODIFIERS, "block--mod1--mod2_2"),
            ("a--b_c_d", BemErrorKind.TOO_MANY_MODIFIER_VALUES, "a--b_c_d"),
            ("a--1b", BemErrorKind.INVALID_MODIFIER_NAME, "1b"),
            ("a--", BemErrorKind.INVALID_MODIFIER_NAME, ""),
            ("a--b_c-", BemErrorKind.INVALID_MODIFIER_VALUE, "c-"),
            ("a__b__c", BemErrorKind.TOO_MANY_ELEMENTS, "a__b__c"),
            ("a__1b", BemErrorKind.INVALID_ELEMENT, "1b"),
            ("a__", BemErrorKind.INVALID_ELEMENT, ""),
            ("a--b--c", BemErrorKind.TOO_MANY_MODIFIERS, "a--b--c"),
        ],
    )
    def test_invalid_strings(self, value: object, kind: BemErrorKind, offending: object) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_string(value)
        assert _kind(exc_info) is kind
        assert exc_info.value.value == offending

    def test_modifier_is_checked_before_element_and_block(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_string("1a__2b--3c")
        assert _kind(exc_info) is BemErrorKind.INVALID_MODIFIER_NAME

    def test_element_is_checked_before_block(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_string("1a__2b")
        assert _kind(exc_info) is BemErrorKind.INVALID_ELEMENT

    def test_component_names_the_part(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_string("1block")
        assert exc_info.value.component == "block of BEM string"

    def test_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            check_bem_string("1block")


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


class TestCheckBemObject:
    @pytest.mark.parametrize(
        "value",
        [
            {"blk": "a"},
            {"blk": "a", "elt": "b"},
            {"blk": "a", "mod": ("m",)},
            {"blk": "a", "elt": "b", "mod": ["m", "1"]},
            {"blk": "a", "elt": None, "mod": None},
            {"blk": "a", "mod": ("m", None)},
        ],
    )
    def test_valid_objects_are_returned_unchanged(self, value: dict[str, object]) -> None:
        assert check_bem_object(value) is value

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("a", BemErrorKind.INVALID_SHAPE),
            (["a"], BemErrorKind.INVALID_SHAPE),
            ({}, BemErrorKind.EMPTY_INPUT),
            ({"blk": "a", "foo": 1}, BemErrorKind.INVALID_SHAPE),
            ({"elt": "b"}, BemErrorKind.INVALID_BLOCK),
            ({"blk": "1a"}, BemErrorKind.INVALID_BLOCK),
            ({"blk": "a", "elt": ""}, BemErrorKind.INVALID_ELEMENT),
            ({"blk": "a", "elt": 1}, BemErrorKind.INVALID_ELEMENT),
            ({"blk": "a", "mod": "m"}, BemErrorKind.INVALID_MODIFIER),
            ({"blk": "a", "mod": ()}, BemErrorKind.INVALID_MODIFIER),
            ({"blk": "a", "mod": ("m", "v", "x")}, BemErrorKind.INVALID_MODIFIER),
            ({"blk": "a", "mod": ("1m",)}, BemErrorKind.INVALID_MODIFIER_NAME),
            ({"blk": "a", "mod": ("m", "v-")}, BemErrorKind.INVALID_MODIFIER_VALUE),
        ],
    )
    def test_invalid_objects(self, value: object, kind: BemErrorKind) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_object(value)
        assert _kind(exc_info) is kind

    def test_component_names_the_attribute(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_object({"blk": "a", "elt": "1b"})
        assert exc_info.value.component == "'elt' attribute of BEM object"
        assert exc_info.value.value == "1b"

    def test_modifier_component_is_nested(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_object({"blk": "a", "mod": ("1m",)})
        assert exc_info.value.component == "name of 'mod' attribute of BEM object"


# ---------------------------------------------------------------------------
# Vectors
# ---------------------------------------------------------------------------


class TestCheckBemVector:
    @pytest.mark.parametrize(
        "value",
        [["a"], ("a", "b"), ["a", None, ("m",)], ["a", "b", ["m", "v"]], ["a", None, None]],
    )
    def test_valid_vectors_are_returned_unchanged(self, value: object) -> None:
        assert check_bem_vector(value) is value

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("a", BemErrorKind.INVALID_SHAPE),
            ({"blk": "a"}, BemErrorKind.INVALID_SHAPE),
            ([], BemErrorKind.EMPTY_INPUT),
            (["a", None, None, None], BemErrorKind.INVALID_SHAPE),
            ([1], BemErrorKind.INVALID_BLOCK),
            ([None, "b"], BemErrorKind.INVALID_BLOCK),
            (["a", "1b"], BemErrorKind.INVALID_ELEMENT),
            (["a", None, "m"], BemErrorKind.INVALID_MODIFIER),
        ],
    )
    def test_invalid_vectors(self, value: object, kind: BemErrorKind) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_vector(value)
        assert _kind(exc_info) is kind

    def test_component_names_the_position(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_vector([1])
        assert exc_info.value.component == "element 0 (block) of BEM vector"


# ---------------------------------------------------------------------------
# Modifiers and requirements
# ---------------------------------------------------------------------------


class TestCheckBemModifier:
    def test_valid_modifier_is_returned_unchanged(self) -> None:
        mod = ("size", "large")
        assert check_bem_modifier(mod) is mod

    def test_string_is_not_a_modifier(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_modifier("disabled")
        assert _kind(exc_info) is BemErrorKind.INVALID_MODIFIER

    def test_invalid_name(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_modifier(("1",))
        assert _kind(exc_info) is BemErrorKind.INVALID_MODIFIER_NAME
        assert exc_info.value.component == "name of BEM modifier"

    def test_invalid_value(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_modifier(("a", "-"))
        assert _kind(exc_info) is BemErrorKind.INVALID_MODIFIER_VALUE

    def test_custom_component(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_modifier(("1",), "state modifier")
        assert exc_info.value.component == "name of state modifier"


class TestCheckBemModifierRequirement:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (("a",), ("a", None, False)),
            (("a", "b"), ("a", "b", False)),
            (["a", None, True], ("a", None, True)),
            (("a", "1", False), ("a", "1", False)),
        ],
    )
    def test_canonical_form(self, value: object, expected: tuple[object, ...]) -> None:
        assert check_bem_modifier_requirement(value) == expected

    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ((), BemErrorKind.INVALID_MODIFIER),
            ("a", BemErrorKind.INVALID_MODIFIER),
            (("a", "b", True, False), BemErrorKind.INVALID_MODIFIER),
            (("a", "b", "yes"), BemErrorKind.INVALID_MODIFIER),
            (("1a",), BemErrorKind.INVALID_MODIFIER_NAME),
            (("a", "b-", True), BemErrorKind.INVALID_MODIFIER_VALUE),
        ],
    )
    def test_invalid(self, value: object, kind: BemErrorKind) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_modifier_requirement(value)
        assert _kind(exc_info) is kind


# ---------------------------------------------------------------------------
# Shapes and structures
# ---------------------------------------------------------------------------


class TestShapes:
    @pytest.mark.parametrize(
        ("value", "shape"),
        [
            ("a", BemShape.STRING),
            ({"blk": "a"}, BemShape.OBJECT),
            (["a"], BemShape.VECTOR),
            (("a",), BemShape.VECTOR),
        ],
    )
    def test_detect_shape(self, value: object, shape: BemShape) -> None:
        assert detect_shape(value) is shape

    def test_detect_base_shape(self) -> None:
        assert detect_shape(BemBase("a")) is BemShape.BASE

    @pytest.mark.parametrize("value", [None, 1, 1.5, True, b"a", object()])
    def test_detect_shape_returns_none(self, value: object) -> None:
        assert detect_shape(value) is None

    def test_shape_of_raises_unsupported_shape(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            shape_of(42)
        assert _kind(exc_info) is BemErrorKind.UNSUPPORTED_SHAPE
        assert exc_info.value.component == "BEM structure"

    @pytest.mark.parametrize("value", [[], (), ["a"]])
    def test_is_sequence(self, value: object) -> None:
        assert is_sequence(value) is True

    @pytest.mark.parametrize("value", ["a", b"a", bytearray(b"a"), {"a": 1}, 1])
    def test_is_not_sequence(self, value: object) -> None:
        assert is_sequence(value) is False


class TestCheckBemStructure:
    @pytest.mark.parametrize(
        "value",
        ["a__b", {"blk": "a", "mod": ("m",)}, ["a", "b", ("m", "v")]],
    )
    def test_valid_structures_are_returned_unchanged(self, value: object) -> None:
        assert check_bem_structure(value) is value

    def test_base_is_accepted(self) -> None:
        base = BemBase("a", is_final=True)
        assert check_bem_structure(base) is base

    @pytest.mark.parametrize("value", [None, 42, True, 1.0])
    def test_unsupported_shapes(self, value: object) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_structure(value)
        assert _kind(exc_info) is BemErrorKind.UNSUPPORTED_SHAPE

    def test_dispatches_to_the_string_checker(self) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            check_bem_structure("1a")
        assert _kind(exc_info) is BemErrorKind.INVALID_BLOCK

    def test_check_bem_shape_returns_the_shape(self) -> None:
        assert check_bem_shape("a") is BemShape.STRING
        assert check_bem_shape(["a"]) is BemShape.VECTOR


class TestPredicates:
    def test_is_bem_object(self) -> None:
        assert is_bem_object({"blk": "a"}) is True
        assert is_bem_object({"blk": "1a"}) is False
        assert is_bem_object("a") is False

    def test_is_bem_string(self) -> None:
        assert is_bem_string("a--b_c") is True
        assert is_bem_string("a--b--c") is False
        assert is_bem_string(None) is False

    def test_is_bem_vector(self) -> None:
        assert is_bem_vector(["a", "b"]) is True
        assert is_bem_vector([]) is False
        assert is_bem_vector("a") is False
