"""
Schema graph module.

Contains the node definitions and the parser for OpenAPI component schemas.
"""

from __future__ import annotations

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
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "PrimitiveNode",
    "ObjectNode",
    "PropertyDef",
    "ArrayNode",
    "EnumNode",
    "RefNode",
    "AnyNode",
    "UnsupportedNode",
    "DefinitionNode",
    "SchemaGraph",
    "SchemaParser",
]
