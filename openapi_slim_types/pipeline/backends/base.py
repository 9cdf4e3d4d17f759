"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ...errors import MalformedDocumentError, UnknownTypeError
from ..analyzer.ir_nodes import IR, DeclKind, TypeDecl, TypeRef
from ..config import FilterConfig

# Formats that only describe the content of a string
TEXT_FORMATS = ("byte", "binary", "password", "email", "uuid", "uri", "hostname", "ipv4", "ipv6")


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from (schema type, format) to language types
    TYPE_MAP: dict[tuple[str, str | None], str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Decorations applied when the filter does not configure any
    DEFAULT_STRUCT_DERIVES: list[str] = []
    DEFAULT_ENUM_DERIVES: list[str] = []

    # Blank lines between two declarations
    DECLARATION_SEPARATOR = "\n\n"

    def __init__(self, config: FilterConfig):
        """
        Initialize the backend.

        Args:
            config: Filter and emission configuration
        """
        self.config = config
        self._current: TypeDecl | None = None
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.struct_template = self.jinja_env.get_template(f"struct.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.alias_template = self.jinja_env.get_template(f"alias.{self.FILE_EXTENSION}.jinja2")

    @property
    def struct_derives(self) -> list[str]:
        if self.config.struct_derives is not None:
            return list(self.config.struct_derives)
        return list(self.DEFAULT_STRUCT_DERIVES)

    @property
    def enum_derives(self) -> list[str]:
        if self.config.enum_derives is not None:
            return list(self.config.enum_derives)
        return list(self.DEFAULT_ENUM_DERIVES)

    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """
        self._reset()
        self._check_unique_type_names(ir)

        declarations = []
        for decl in ir.declarations:
            self._current = decl
            if decl.kind == DeclKind.STRUCT:
                declarations.append(self._render(self.struct_template, self._prepare_struct_context(decl)))
            elif decl.kind == DeclKind.ENUM:
                declarations.append(self._render(self.enum_template, self._prepare_enum_context(decl)))
            else:
                declarations.append(self._render(self.alias_template, self._prepare_alias_context(decl)))
        self._current = None

        # Rendered after the declarations so that collected imports are known
        output = self._render(self.prefix_template, self._prepare_prefix_context(ir))
        if declarations:
            output += self.DECLARATION_SEPARATOR + self.DECLARATION_SEPARATOR.join(declarations)
        return output + "\n"

    def _render(self, template: jinja2.Template, context: dict[str, Any]) -> str:
        return template.render(context).rstrip("\n")

    def _reset(self) -> None:
        """Reset per-run state."""

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def type_name(self, schema_name: str) -> str:
        """Declaration name for a schema name."""

    @abstractmethod
    def _prepare_prefix_context(self, ir: IR) -> dict[str, Any]:
        """Template variables for the module prefix."""

    @abstractmethod
    def _prepare_struct_context(self, decl: TypeDecl) -> dict[str, Any]:
        """Template variables for a record."""

    @abstractmethod
    def _prepare_enum_context(self, decl: TypeDecl) -> dict[str, Any]:
        """Template variables for an enumeration."""

    @abstractmethod
    def _prepare_alias_context(self, decl: TypeDecl) -> dict[str, Any]:
        """Template variables for an alias."""

    def primitive_type(self, kind: str, format: str | None) -> str:
        """Look up a primitive in TYPE_MAP."""
        try:
            return self.TYPE_MAP[(kind, format)]
        except KeyError:
            raise UnknownTypeError(kind, format, self._current.name if self._current else "") from None

    def _comment_lines(self, text: str) -> list[str]:
        """Split a description into trimmed comment lines."""
        return [line.strip() for line in text.strip().splitlines()]

    def _check_unique_type_names(self, ir: IR) -> None:
        seen: dict[str, str] = {}
        for decl in ir.declarations:
            type_name = self.type_name(decl.name)
            if not type_name:
                raise MalformedDocumentError(f"Schema name {decl.name!r} cannot be turned into a type name")
            if type_name in seen:
                raise MalformedDocumentError(f"Schemas {seen[type_name]!r} and {decl.name!r} both map to type {type_name!r}")
            seen[type_name] = decl.name

    def _check_unique(self, names: list[str], what: str) -> None:
        if any(not name for name in names):
            raise MalformedDocumentError(f"{self._current.name}: a {what} name cannot be turned into an identifier")
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise MalformedDocumentError(f"{self._current.name}: several {what}s map to {', '.join(duplicates)}")
