"""
Reference resolver for $ref resolution.

References are never expanded in place: they stay symbolic in the graph
and are looked up by name when a later phase actually needs the target.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...errors import DanglingReferenceError
from ..schema_ast.nodes import ArrayNode, ObjectNode, RefNode, SchemaGraph, SchemaNode


class ReferenceResolver:
    """Resolves schema names to their definitions."""

    def __init__(self, graph: SchemaGraph):
        """
        Initialize the resolver.

        Args:
            graph: The parsed schema graph
        """
        self.graph = graph

    def resolve(self, name: str) -> SchemaNode | None:
        """Get a definition body by name, None if the name is dangling."""
        return self.graph.get(name)

    def require(self, name: str, from_schema: str) -> SchemaNode:
        """Get a definition body by name, raising if the reference is dangling."""
        node = self.resolve(name)
        if node is None:
            raise DanglingReferenceError(from_schema, name)
        return node

    def references_of(self, name: str, retained_fields: Iterable[str] | None = None) -> list[str]:
        """
        List the schema names directly referenced by a schema.

        Only the retained fields of an object are scanned. Names are
        returned once each, in the order they appear in the document.

        Args:
            name: Name of the referencing schema
            retained_fields: Field names kept by the filter (None = all)

        Returns:
            Referenced schema names
        """
        node = self.resolve(name)
        if node is None:
            return []

        found: list[str] = []
        if isinstance(node, ObjectNode):
            keep = None if retained_fields is None else set(retained_fields)
            for prop in node.properties:
                if keep is None or prop.name in keep:
                    self._collect(prop.node, found)
        else:
            self._collect(node, found)
        return found

    def _collect(self, node: SchemaNode | None, found: list[str]) -> None:
        if isinstance(node, RefNode):
            if node.target_name not in found:
                found.append(node.target_name)
        elif isinstance(node, ArrayNode):
            self._collect(node.items, found)
