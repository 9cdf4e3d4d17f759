"""
OpenAPI component parser that builds the schema graph.

Phase 1 of the pipeline: turn the generic document tree into schema
nodes without resolving references or doing any filtering.
"""

from __future__ import annotations

from typing import Any

from ...errors import MalformedDocumentError
from ..loader import component_schemas
from .nodes import (
    AnyNode,
    ArrayNode,
    DefinitionNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaGraph,
    SchemaNode,
    UnsupportedNode,
)

REF_PREFIX = "#/components/schemas/"


class SchemaParser:
    """Parses the components.schemas section of an OpenAPI document."""

    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean"}
    COMPOSITION_KEYWORDS = ("allOf", "oneOf", "anyOf")

    def parse(self, document: dict[str, Any]) -> SchemaGraph:
        """
        Parse an OpenAPI document into a schema graph.

        Args:
            document: The parsed document tree

        Returns:
            SchemaGraph with one definition per component schema
        """
        graph = SchemaGraph()
        for index, (name, schema) in enumerate(component_schemas(document).items()):
            path = REF_PREFIX + str(name)
            graph.definitions[name] = DefinitionNode(
                name=name,
                index=index,
                body=self._parse_schema_node(schema, path, top_level=True),
            )
        return graph

    def _parse_schema_node(self, schema: Any, path: str, top_level: bool = False) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in the document (for error messages)
            top_level: Whether this is the body of a component schema

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict):
            raise MalformedDocumentError(f"{path}: schema must be a mapping, got {type(schema).__name__}")

        description = str(schema.get("description") or "")
        schema_type, nullable = self._schema_type(schema, path)
        nullable = nullable or bool(schema.get("nullable", False))
        common = {"source_path": path, "description": description, "nullable": nullable}

        if "$ref" in schema:
            return self._parse_ref_node(schema["$ref"], path, common)

        if isinstance(schema_type, list):
            return UnsupportedNode(reason=f"type union {schema_type!r} is not supported", **common)

        for keyword in self.COMPOSITION_KEYWORDS:
            if keyword in schema:
                return UnsupportedNode(reason=f"'{keyword}' composition is not supported", **common)

        if "enum" in schema:
            return self._parse_enum_node(schema, schema_type, path, common, top_level)

        if "properties" in schema or schema_type == "object":
            return self._parse_object_node(schema, path, common, top_level)

        if schema_type == "array" or "items" in schema:
            items = schema.get("items")
            item_node = self._parse_schema_node(items, f"{path}/items") if items is not None else AnyNode(source_path=f"{path}/items")
            return ArrayNode(items=item_node, **common)

        if schema_type is None:
            return AnyNode(**common)

        fmt = schema.get("format")
        return PrimitiveNode(kind=schema_type, format=str(fmt) if fmt is not None else None, **common)

    def _schema_type(self, schema: dict[str, Any], path: str) -> tuple[str | list[str] | None, bool]:
        """Return the declared type and whether it admits null (OpenAPI 3.1 type lists).

        A list of several non-null types is returned as is.
        """
        schema_type = schema.get("type")
        if schema_type is None or isinstance(schema_type, str):
            return schema_type, False
        if isinstance(schema_type, list):
            types = [t for t in schema_type if t != "null"]
            if len(types) == 1:
                return types[0], len(types) != len(schema_type)
            if not types:
                return None, True
            if all(isinstance(t, str) for t in types):
                return types, len(types) != len(schema_type)
        raise MalformedDocumentError(f"{path}: unsupported type declaration {schema_type!r}")

    def _parse_ref_node(self, ref: Any, path: str, common: dict[str, Any]) -> RefNode:
        if not isinstance(ref, str) or not ref.startswith(REF_PREFIX) or ref == REF_PREFIX:
            raise MalformedDocumentError(f"{path}: unsupported $ref {ref!r}, expected '{REF_PREFIX}<Name>'")
        return RefNode(ref_path=ref, target_name=ref[len(REF_PREFIX) :], **common)

    def _parse_enum_node(
        self,
        schema: dict[str, Any],
        schema_type: str | None,
        path: str,
        common: dict[str, Any],
        top_level: bool,
    ) -> SchemaNode:
        values = schema["enum"]
        if not isinstance(values, list) or not values:
            raise MalformedDocumentError(f"{path}: 'enum' must be a non-empty list")
        # null is a marker for nullable enums, not a variant
        variants = [value for value in values if value is not None]
        kind = schema_type or _enum_value_type(variants)
        if not top_level:
            # Inline enumerations have no name to be emitted under
            return PrimitiveNode(kind=kind, format=schema.get("format"), **common)
        if len(variants) != len(values):
            common["nullable"] = True
        if not all(isinstance(value, (str, int)) and not isinstance(value, bool) for value in variants):
            return UnsupportedNode(reason="enum values must be strings or integers", **common)
        return EnumNode(values=[str(value) for value in variants], value_type=kind, **common)

    def _parse_object_node(self, schema: dict[str, Any], path: str, common: dict[str, Any], top_level: bool) -> SchemaNode:
        properties = schema.get("properties")
        if properties is None:
            # Free-form object (possibly with additionalProperties)
            return AnyNode(**common)
        if not isinstance(properties, dict):
            raise MalformedDocumentError(f"{path}: 'properties' must be a mapping")
        if not top_level:
            return UnsupportedNode(reason="nested inline objects are not supported, use $ref instead", **common)

        required = schema.get("required") or []
        if not isinstance(required, list):
            raise MalformedDocumentError(f"{path}: 'required' must be a list")

        node = ObjectNode(**common)
        for prop_name, prop_schema in properties.items():
            node.properties.append(
                PropertyDef(
                    name=str(prop_name),
                    node=self._parse_schema_node(prop_schema, f"{path}/properties/{prop_name}"),
                    is_required=prop_name in required,
                )
            )
        return node


def _enum_value_type(values: list[Any]) -> str:
    """Schema type implied by enum values when no type is declared."""
    if values and all(isinstance(value, int) and not isinstance(value, bool) for value in values):
        return "integer"
    return "string"
