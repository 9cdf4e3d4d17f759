"""
IR builder.

Turns the ordered generate-set into declarations, keeping only the
retained fields of each record.
"""

from __future__ import annotations

from ...errors import MalformedDocumentError
from ..schema_ast.nodes import (
    AnyNode,
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaGraph,
    SchemaNode,
    UnsupportedNode,
)
from .ir_nodes import IR, DeclKind, FieldDef, TypeDecl, TypeKind, TypeRef
from .resolution import ResolutionState


class IRBuilder:
    """Builds declarations for the ordered generate-set."""

    def __init__(self, graph: SchemaGraph):
        self.graph = graph

    def build(self, order: list[str], state: ResolutionState, generation_comment: str = "") -> IR:
        ir = IR(generation_comment=generation_comment)
        for name in order:
            ir.declarations.append(self._build_declaration(name, state[name].fields))
        return ir

    def _build_declaration(self, name: str, retained: tuple[str, ...] | None) -> TypeDecl:
        node = self.graph.get(name)

        if isinstance(node, ObjectNode):
            keep = set(node.field_names() if retained is None else retained)
            fields = [
                FieldDef(
                    name=prop.name,
                    type_ref=self._type_ref(prop.node, optional=not prop.is_required),
                    is_required=prop.is_required,
                    description=prop.node.description if prop.node else "",
                )
                for prop in node.properties
                if prop.name in keep
            ]
            return TypeDecl(kind=DeclKind.STRUCT, name=name, description=node.description, fields=fields)

        if isinstance(node, EnumNode):
            return TypeDecl(
                kind=DeclKind.ENUM,
                name=name,
                description=node.description,
                enum_values=list(node.values),
                enum_value_type=node.value_type,
            )

        return TypeDecl(
            kind=DeclKind.ALIAS,
            name=name,
            description=node.description if node else "",
            target=self._type_ref(node, optional=False),
        )

    def _type_ref(self, node: SchemaNode | None, optional: bool) -> TypeRef:
        """Map a schema node used as a field, item or alias target to a type."""
        optional = optional or bool(node and node.nullable)

        if isinstance(node, RefNode):
            return TypeRef(kind=TypeKind.NAMED, name=node.target_name, is_optional=optional)

        if isinstance(node, PrimitiveNode):
            return TypeRef(kind=TypeKind.PRIMITIVE, name=node.kind, format=node.format, is_optional=optional)

        if isinstance(node, ArrayNode):
            return TypeRef(kind=TypeKind.ARRAY, item=self._type_ref(node.items, optional=False), is_optional=optional)

        if isinstance(node, AnyNode) or node is None:
            return TypeRef(kind=TypeKind.ANY, is_optional=optional)

        if isinstance(node, UnsupportedNode):
            raise MalformedDocumentError(f"{node.source_path}: {node.reason}")

        # Enums and objects only appear as named component schemas
        raise MalformedDocumentError(f"{node.source_path}: cannot be used as an inline type")
