"""
Emission orderer.

Sorts the generate-set so that every declaration comes after the
declarations it refers to. Among independent schemas the document order
wins, which keeps the output stable from one run to the next.
"""

from __future__ import annotations

import logging

import networkx as nx

from ...errors import CyclicDependencyError
from ..schema_ast.nodes import SchemaGraph
from .reference_resolver import ReferenceResolver
from .resolution import ResolutionState

logger = logging.getLogger(__name__)


class EmissionOrderer:
    """Orders generated schemas by (dependency depth, declaration index)."""

    def __init__(self, graph: SchemaGraph, resolver: ReferenceResolver):
        self.graph = graph
        self.resolver = resolver

    def dependency_graph(self, state: ResolutionState) -> nx.DiGraph:
        """Build the graph of generated schemas, edges go from a dependency to its user."""
        dependencies = nx.DiGraph()
        names = state.generated()
        dependencies.add_nodes_from(names)
        for name in names:
            for target in self.resolver.references_of(name, state[name].fields):
                if target in state and state[target].is_generated:
                    dependencies.add_edge(target, name)
        return dependencies

    def order(self, state: ResolutionState) -> list[str]:
        """
        Linearize the generate-set.

        Args:
            state: Dependency-closed decisions

        Returns:
            Schema names, dependencies first

        Raises:
            CyclicDependencyError: Generated schemas reference each other
        """
        dependencies = self.dependency_graph(state)
        if not nx.is_directed_acyclic_graph(dependencies):
            raise CyclicDependencyError(self._find_cycle(dependencies, state.generated()))

        depth = {}
        for level, generation in enumerate(nx.topological_generations(dependencies)):
            for name in generation:
                depth[name] = level

        ordered = sorted(dependencies.nodes, key=lambda n: (depth[n], self.graph.index_of(n)))
        logger.debug("Emission order: %s", ", ".join(ordered))
        return ordered

    def _find_cycle(self, dependencies: nx.DiGraph, names: list[str]) -> list[str]:
        # Start from the first declared schema so the reported cycle is stable
        cycle = nx.find_cycle(dependencies, source=names)
        return [edge[0] for edge in cycle]
