"""
Rust code generation backend.

Generates serde-deserializable structs, enums and type aliases from IR.
"""

from __future__ import annotations

from typing import Any

from ...utils import fix_leading_digit, rust_field_name, snake_to_pascal_case
from ..analyzer.ir_nodes import IR, TypeDecl, TypeKind, TypeRef
from .base import TEXT_FORMATS, CodeBackend


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"

    DEFAULT_STRUCT_DERIVES = ["Debug", "Clone", "Deserialize"]
    DEFAULT_ENUM_DERIVES = ["Debug", "Clone", "Copy", "PartialEq", "Eq", "PartialOrd", "Ord", "Deserialize"]

    TYPE_MAP = {
        ("integer", None): "i32",
        ("integer", "int32"): "i32",
        ("integer", "int64"): "i64",
        ("number", None): "f64",
        ("number", "float"): "f32",
        ("number", "double"): "f64",
        ("boolean", None): "bool",
        ("string", None): "String",
        # the expected value is in RFC 3339, "2017-07-21"
        ("string", "date"): "time::Date",
        # the expected value is in RFC 3339, "2017-07-21T17:32:28Z"
        ("string", "date-time"): "time::OffsetDateTime",
        **{("string", fmt): "String" for fmt in TEXT_FORMATS},
    }

    ANY_TYPE = "serde_json::Value"

    # Integer enums deserialize from their discriminant
    REPR_DERIVES = {"Deserialize": "Deserialize_repr", "serde::Deserialize": "serde_repr::Deserialize_repr"}
    REPR_TYPE = "i64"

    def _reset(self) -> None:
        self.uses_serde_repr = False

    def type_name(self, schema_name: str) -> str:
        name = fix_leading_digit(snake_to_pascal_case(schema_name), "T")
        if name == "Self":
            name += "_"
        return name

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Rust type string."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            result = self.primitive_type(type_ref.name, type_ref.format)
        elif type_ref.kind == TypeKind.NAMED:
            result = self.type_name(type_ref.name)
        elif type_ref.kind == TypeKind.ARRAY:
            result = f"Vec<{self.translate_type(type_ref.item)}>"
        else:
            result = self.ANY_TYPE

        if type_ref.is_optional:
            result = f"Option<{result}>"
        return result

    def _doc_lines(self, decl: TypeDecl) -> list[str]:
        # keep the original name when there is no description
        return self._comment_lines(decl.description) if decl.description else [decl.name]

    def _prepare_prefix_context(self, ir: IR) -> dict[str, Any]:
        return {
            "generation_comment": self._comment_lines(ir.generation_comment) if ir.generation_comment else [],
            "serde_repr": self.uses_serde_repr,
        }

    def _prepare_struct_context(self, decl: TypeDecl) -> dict[str, Any]:
        fields = []
        for field in decl.fields:
            name = rust_field_name(field.name)
            fields.append(
                {
                    "name": name,
                    # if the name differs according to the naming rules of Rust
                    "rename": _rust_string(field.name) if name != field.name else None,
                    "type": self.translate_type(field.type_ref),
                    "doc_lines": self._comment_lines(field.description),
                }
            )
        self._check_unique([f["name"] for f in fields], "field")

        return {
            "type_name": self.type_name(decl.name),
            "doc_lines": self._doc_lines(decl),
            "derives": self.struct_derives,
            "fields": fields,
        }

    def _prepare_enum_context(self, decl: TypeDecl) -> dict[str, Any]:
        numeric = decl.enum_value_type == "integer"
        variants = []
        for value in decl.enum_values:
            name = fix_leading_digit(snake_to_pascal_case(value), "Value")
            variants.append(
                {
                    "name": name,
                    "rename": _rust_string(value) if name != value and not numeric else None,
                    "discriminant": value if numeric else None,
                    "literal": _rust_string(value),
                }
            )
        self._check_unique([v["name"] for v in variants], "variant")

        derives = self.enum_derives
        if numeric:
            derives = [self.REPR_DERIVES.get(derive, derive) for derive in derives]
            if "Deserialize_repr" in derives:
                self.uses_serde_repr = True

        return {
            "type_name": self.type_name(decl.name),
            "doc_lines": self._doc_lines(decl),
            "derives": derives,
            "repr": self.REPR_TYPE if numeric else None,
            "variants": variants,
        }

    def _prepare_alias_context(self, decl: TypeDecl) -> dict[str, Any]:
        return {
            "type_name": self.type_name(decl.name),
            "doc_lines": self._doc_lines(decl),
            "type": self.translate_type(decl.target),
        }


def _rust_string(value: str) -> str:
    """Escape a value for a Rust string literal (without the quotes)."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
