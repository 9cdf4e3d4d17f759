"""
IR (Intermediate Representation) node definitions.

These nodes represent the filtered and ordered schemas, ready for code
generation. Field sets are final and references are plain type names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # Mapped through the backend's (type, format) table
    NAMED = "named"  # Another generated declaration
    ARRAY = "array"  # Sequence of T
    ANY = "any"  # Unconstrained value


@dataclass
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""  # Schema type ("integer", ...) or declaration name
    format: str | None = None

    # For arrays
    item: TypeRef | None = None

    # Wrapped in the optional-value representation
    is_optional: bool = False


class DeclKind(Enum):
    """Kind of emitted declaration."""

    STRUCT = "struct"
    ENUM = "enum"
    ALIAS = "alias"


@dataclass
class FieldDef:
    """A field of a record declaration."""

    name: str = ""  # Original JSON property name
    type_ref: TypeRef | None = None
    is_required: bool = False
    description: str = ""


@dataclass
class TypeDecl:
    """A record, enumeration or alias declaration."""

    kind: DeclKind = DeclKind.STRUCT
    name: str = ""  # Original schema name
    description: str = ""

    # For records
    fields: list[FieldDef] = field(default_factory=list)

    # For enumerations
    enum_values: list[str] = field(default_factory=list)
    enum_value_type: str = "string"

    # For aliases
    target: TypeRef | None = None


@dataclass
class IR:
    """Complete intermediate representation for one generated module."""

    declarations: list[TypeDecl] = field(default_factory=list)
    generation_comment: str = ""

    def names(self) -> list[str]:
        return [decl.name for decl in self.declarations]

    def get(self, name: str) -> TypeDecl | None:
        for decl in self.declarations:
            if decl.name == name:
                return decl
        return None
