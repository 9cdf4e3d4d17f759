"""
Analyzer module.

Filters the schema graph, closes it over references, orders the result
and builds the IR consumed by the backends.
"""

from __future__ import annotations

from .dependency_resolver import DependencyResolver
from .filter_engine import FilterEngine
from .ir_builder import IRBuilder
from .ir_nodes import IR, DeclKind, FieldDef, TypeDecl, TypeKind, TypeRef
from .orderer import EmissionOrderer
from .reference_resolver import ReferenceResolver
from .resolution import Decision, DecisionKind, ResolutionState

__all__ = [
    "ReferenceResolver",
    "FilterEngine",
    "DependencyResolver",
    "EmissionOrderer",
    "IRBuilder",
    "Decision",
    "DecisionKind",
    "ResolutionState",
    "IR",
    "DeclKind",
    "FieldDef",
    "TypeDecl",
    "TypeKind",
    "TypeRef",
]
