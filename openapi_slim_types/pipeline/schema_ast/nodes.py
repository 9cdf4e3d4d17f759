"""
Schema graph node definitions.

These nodes represent the component schemas of an OpenAPI document
before any filtering. References stay symbolic (by name) and are only
looked up on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SchemaNode:
    """Base class for all schema nodes."""

    # Original source location in the document (for error messages)
    source_path: str = ""

    description: str = ""
    nullable: bool = False


@dataclass
class PrimitiveNode(SchemaNode):
    """A scalar: string, integer, number or boolean, with an optional format hint."""

    kind: str = ""
    format: str | None = None


@dataclass
class PropertyDef:
    """A property of an object schema."""

    name: str = ""
    node: SchemaNode | None = None
    is_required: bool = False


@dataclass
class ObjectNode(SchemaNode):
    """An object with ordered properties."""

    properties: list[PropertyDef] = field(default_factory=list)

    def field_names(self) -> list[str]:
        return [prop.name for prop in self.properties]


@dataclass
class ArrayNode(SchemaNode):
    """An array of a single item type."""

    items: SchemaNode | None = None


@dataclass
class EnumNode(SchemaNode):
    """An enumeration of literal values, in document order."""

    values: list[str] = field(default_factory=list)
    value_type: str = "string"


@dataclass
class RefNode(SchemaNode):
    """A named pointer to another component schema."""

    ref_path: str = ""
    target_name: str = ""


@dataclass
class AnyNode(SchemaNode):
    """A schema that places no constraint on its value."""


@dataclass
class UnsupportedNode(SchemaNode):
    """A construct the generator cannot emit (composition, nested inline objects)."""

    reason: str = ""


@dataclass
class DefinitionNode:
    """A named entry of components.schemas."""

    name: str = ""
    index: int = 0  # Declaration order in the document
    body: SchemaNode | None = None


@dataclass
class SchemaGraph:
    """Every named schema of the document, in declaration order."""

    definitions: dict[str, DefinitionNode] = field(default_factory=dict)

    def names(self) -> list[str]:
        return list(self.definitions)

    def get(self, name: str) -> SchemaNode | None:
        definition = self.definitions.get(name)
        return definition.body if definition else None

    def index_of(self, name: str) -> int:
        return self.definitions[name].index

    def __contains__(self, name: str) -> bool:
        return name in self.definitions

    def __len__(self) -> int:
        return len(self.definitions)
