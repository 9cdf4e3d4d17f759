"""
Python code generation backend.

Generates Python dataclass code from IR.
"""

from __future__ import annotations

import collections
import json
import keyword
from typing import Any

from ...utils import fix_leading_digit, python_field_name, snake_to_pascal_case, to_upper_snake_case
from ..analyzer.ir_nodes import IR, TypeDecl, TypeKind, TypeRef
from .base import TEXT_FORMATS, CodeBackend


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    DEFAULT_STRUCT_DERIVES = ["dataclass_json", "dataclass(kw_only=True)"]
    DEFAULT_ENUM_DERIVES = ["unique"]

    # Two blank lines between top-level definitions
    DECLARATION_SEPARATOR = "\n\n\n"

    TYPE_MAP = {
        ("integer", None): "int",
        ("integer", "int32"): "int",
        ("integer", "int64"): "int",
        ("number", None): "float",
        ("number", "float"): "float",
        ("number", "double"): "float",
        ("boolean", None): "bool",
        ("string", None): "str",
        ("string", "date"): "datetime.date",
        ("string", "date-time"): "datetime.datetime",
        **{("string", fmt): "str" for fmt in TEXT_FORMATS},
    }

    # Decorators the generated module knows how to import
    DECORATOR_IMPORTS = {
        "dataclass": ("dataclasses", "dataclass"),
        "dataclass_json": ("dataclasses_json", "dataclass_json"),
        "unique": ("enum", "unique"),
    }

    STDLIB_MODULES = {"dataclasses", "datetime", "enum", "typing"}

    def __init__(self, config):
        super().__init__(config)
        self.python_imports: set[tuple[str, str]] = set()
        self.module_imports: set[str] = set()

    def _reset(self) -> None:
        self.python_imports = {("__future__", "annotations")}
        self.module_imports = set()

    def type_name(self, schema_name: str) -> str:
        name = fix_leading_digit(snake_to_pascal_case(schema_name), "T")
        if keyword.iskeyword(name):
            name += "_"
        return name

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Python type string."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            result = self.primitive_type(type_ref.name, type_ref.format)
            if result.startswith("datetime."):
                self.module_imports.add("datetime")
        elif type_ref.kind == TypeKind.NAMED:
            result = self.type_name(type_ref.name)
        elif type_ref.kind == TypeKind.ARRAY:
            result = f"list[{self.translate_type(type_ref.item)}]"
        else:
            self.python_imports.add(("typing", "Any"))
            result = "Any"

        if type_ref.is_optional:
            result = f"{result} | None"
        return result

    def _decorators(self, derives: list[str]) -> list[str]:
        for derive in derives:
            known = self.DECORATOR_IMPORTS.get(derive.split("(", 1)[0])
            if known:
                self.python_imports.add(known)
        return derives

    def _docstring(self, text: str) -> list[str]:
        """Docstring lines (without indentation) for a description."""
        if not text:
            return []
        lines = [line.replace("\\", "\\\\").replace('"""', '\\"\\"\\"') for line in self._comment_lines(text)]
        if len(lines) == 1:
            return [f'"""{lines[0]}"""']
        return ['"""', *lines, '"""']

    def _prepare_prefix_context(self, ir: IR) -> dict[str, Any]:
        return {
            "generation_comment": self._comment_lines(ir.generation_comment) if ir.generation_comment else [],
            "imports": self._assemble_imports(),
        }

    def _prepare_struct_context(self, decl: TypeDecl) -> dict[str, Any]:
        fields = []
        for field in decl.fields:
            name = python_field_name(field.name)
            type_str = self.translate_type(field.type_ref)
            optional = field.type_ref.is_optional

            init = "None" if optional else None
            if name != field.name:
                # keep the JSON name when it differs from the attribute name
                self.python_imports.add(("dataclasses", "field"))
                self.python_imports.add(("dataclasses_json", "config"))
                metadata = f"metadata=config(field_name={json.dumps(field.name)})"
                init = f"field(default=None, {metadata})" if optional else f"field({metadata})"

            fields.append(
                {
                    "name": name,
                    "type": type_str,
                    "init": init,
                    "comment_lines": self._comment_lines(field.description),
                }
            )
        self._check_unique([f["name"] for f in fields], "field")

        return {
            "type_name": self.type_name(decl.name),
            "docstring": self._docstring(decl.description),
            "decorators": self._decorators(self.struct_derives),
            "fields": fields,
        }

    def _prepare_enum_context(self, decl: TypeDecl) -> dict[str, Any]:
        self.python_imports.add(("enum", "Enum"))
        numeric = decl.enum_value_type == "integer"
        members = []
        for value in decl.enum_values:
            members.append(
                {
                    "name": fix_leading_digit(to_upper_snake_case(value), "VALUE_"),
                    "value": value if numeric else json.dumps(value),
                }
            )
        self._check_unique([m["name"] for m in members], "member")

        return {
            "type_name": self.type_name(decl.name),
            "base": "int" if numeric else "str",
            "docstring": self._docstring(decl.description),
            "decorators": self._decorators(self.enum_derives),
            "members": members,
        }

    def _prepare_alias_context(self, decl: TypeDecl) -> dict[str, Any]:
        return {
            "type_name": self.type_name(decl.name),
            "comment_lines": self._comment_lines(decl.description) if decl.description else [],
            "type": self.translate_type(decl.target),
        }

    def _assemble_imports(self) -> list[str]:
        """Assemble Python import statements."""
        # Group imports by module
        import_groups: dict[str, set[str]] = collections.defaultdict(set)
        for module, name in self.python_imports:
            import_groups[module].add(name)

        # Separate stdlib and third-party
        stdlib_groups = {m: import_groups[m] for m in import_groups if m in self.STDLIB_MODULES}
        third_party_groups = {m: import_groups[m] for m in import_groups if m not in self.STDLIB_MODULES and m != "__future__"}

        assembled = []

        # __future__ imports first
        if "__future__" in import_groups:
            assembled.append(f"from __future__ import {', '.join(sorted(import_groups['__future__']))}")
            if stdlib_groups or third_party_groups or self.module_imports:
                assembled.append("")

        # Standard library
        for module in sorted(self.module_imports):
            assembled.append(f"import {module}")
        for module in sorted(stdlib_groups.keys()):
            assembled.append(f"from {module} import {', '.join(sorted(stdlib_groups[module]))}")

        if (stdlib_groups or self.module_imports) and third_party_groups:
            assembled.append("")

        # Third party
        for module in sorted(third_party_groups.keys()):
            assembled.append(f"from {module} import {', '.join(sorted(third_party_groups[module]))}")

        return assembled
