"""Unit tests for bemkit.convert.serializer: JSON and YAML forms."""
from __future__ import annotations

import json

import pytest
import yaml

from bemkit.convert.serializer import FORMS, BemSerializer
from bemkit.validator.errors import BemErrorKind, BemValidationError


@pytest.fixture()
def serializer() -> BemSerializer:
    return BemSerializer()


class TestToData:
    def test_forms(self) -> None:
        assert FORMS == ("object", "vector", "string")

    def test_to_dict_uses_lists_for_modifiers(self, serializer: BemSerializer) -> None:
        assert serializer.to_dict("a__b--c_d") == {"blk": "a", "elt": "b", "mod": ["c", "d"]}

    def test_to_dict_omits_absent_parts(self, serializer: BemSerializer) -> None:
        assert serializer.to_dict(["a"]) == {"blk": "a"}

    def test_vector_form(self, serializer: BemSerializer) -> None:
        assert serializer.to_data("a--c", "vector") == ["a", None, ["c"]]

    def test_string_form(self, serializer: BemSerializer) -> None:
        assert serializer.to_data({"blk": "a", "mod": ("c",)}, "string") == "a--c"

    def test_unknown_form(self, serializer: BemSerializer) -> None:
        with pytest.raises(ValueError, match="Unknown BEM form"):
            serializer.to_data("a", "xml")

    def test_invalid_structure(self, serializer: BemSerializer) -> None:
        with pytest.raises(BemValidationError):
            serializer.to_dict("a--b--c")


class TestJson:
    def test_to_json_is_valid_json(self, serializer: BemSerializer) -> None:
        text = serializer.to_json("button__icon--size_large")
        assert json.loads(text) == {"blk": "button", "elt": "icon", "mod": ["size", "large"]}

    def test_to_json_indent(self, serializer: BemSerializer) -> None:
        assert "\n  " in serializer.to_json("a")

    def test_to_json_vector(self, serializer: BemSerializer) -> None:
        assert json.loads(serializer.to_json("a__b", form="vector")) == ["a", "b", None]

    def test_from_json_returns_canonical_object(self, serializer: BemSerializer) -> None:
        text = serializer.to_json("button__icon--size_large")
        assert serializer.from_json(text) == {
            "blk": "button",
            "elt": "icon",
            "mod": ("size", "large"),
        }

    def test_from_json_accepts_every_form(self, serializer: BemSerializer) -> None:
        assert serializer.from_json('"a--m"') == {"blk": "a", "mod": ("m",)}
        assert serializer.from_json('["a", null, ["m"]]') == {"blk": "a", "mod": ("m",)}

    def test_from_json_validates(self, serializer: BemSerializer) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            serializer.from_json('{"blk": "a", "color": "red"}')
        assert exc_info.value.kind is BemErrorKind.INVALID_SHAPE


class TestYaml:
    def test_to_yaml_is_valid_yaml(self, serializer: BemSerializer) -> None:
        text = serializer.to_yaml("a__b--c_d")
        assert yaml.safe_load(text) == {"blk": "a", "elt": "b", "mod": ["c", "d"]}

    def test_to_yaml_block_style(self, serializer: BemSerializer) -> None:
        assert "blk: a" in serializer.to_yaml("a")

    def test_from_yaml(self, serializer: BemSerializer) -> None:
        assert serializer.from_yaml("blk: a\nmod:\n- c\n") == {"blk": "a", "mod": ("c",)}

    def test_yaml_numbers_are_not_bem_values(self, serializer: BemSerializer) -> None:
        with pytest.raises(BemValidationError) as exc_info:
            serializer.from_yaml("blk: a\nmod: [cid, 1]\n")
        assert exc_info.value.kind is BemErrorKind.INVALID_MODIFIER_VALUE
