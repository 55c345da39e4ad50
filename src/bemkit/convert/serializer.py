"""JSON and YAML serialization of BEM structures.

The serialized form is plain data: a dict for the object form, a list
for the vector form, or a string.  Tuples become lists because neither
JSON nor YAML has them; deserialization validates and returns the
canonical object form, so tuples come back.

Usage
-----
::

    from bemkit.convert.serializer import BemSerializer

    serializer = BemSerializer()
    text = serializer.to_json("button__icon--size_large")
    obj = serializer.from_json(text)
    assert obj == {"blk": "button", "elt": "icon", "mod": ("size", "large")}
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from bemkit.convert.converters import BemObject, to_bem_object, to_bem_string, to_bem_vector

FORMS: tuple[str, ...] = ("object", "vector", "string")


class BemSerializer:
    """Converts between BEM structures and JSON/YAML text."""

    # ------------------------------------------------------------------
    # Serialization (structure → plain data)
    # ------------------------------------------------------------------

    def to_dict(self, value: Any) -> dict[str, object]:
        """Serialize any BEM structure to a JSON-compatible object dict."""
        obj = to_bem_object(value)
        data: dict[str, object] = {"blk": obj["blk"]}
        if "elt" in obj:
            data["elt"] = obj["elt"]
        if "mod" in obj:
            data["mod"] = list(obj["mod"])
        return data

    def to_data(self, value: Any, form: str = "object") -> object:
        """Serialize ``value`` to plain data in the requested form.

        Parameters
        ----------
        value:
            Any BEM structure.
        form:
            One of ``"object"``, ``"vector"`` or ``"string"``.

        Raises
        ------
        ValueError
            If ``form`` is not a known form.
        """
        if form == "object":
            return self.to_dict(value)
        if form == "vector":
            blk, elt, mod = to_bem_vector(value)
            return [blk, elt, list(mod) if mod is not None else None]
        if form == "string":
            return to_bem_string(value)
        raise ValueError(f"Unknown BEM form {form!r}; expected one of {', '.join(FORMS)}")

    # ------------------------------------------------------------------
    # Deserialization (plain data → structure)
    # ------------------------------------------------------------------

    def from_dict(self, data: object) -> BemObject:
        """Validate plain data of any form and return the canonical object."""
        return to_bem_object(data)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, value: Any, form: str = "object", indent: int = 2) -> str:
        """Serialize a BEM structure to a JSON string."""
        return json.dumps(self.to_data(value, form), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> BemObject:
        """Deserialize a BEM structure from a JSON string."""
        return self.from_dict(json.loads(text))

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, value: Any, form: str = "object") -> str:
        """Serialize a BEM structure to a YAML string."""
        return yaml.dump(self.to_data(value, form), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> BemObject:
        """Deserialize a BEM structure from a YAML string."""
        return self.from_dict(yaml.safe_load(text))
