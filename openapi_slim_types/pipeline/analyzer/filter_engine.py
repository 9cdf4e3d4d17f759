"""
Filter engine.

Evaluates the include/exclude specification against the schema graph.
Three modes come out of one evaluator:

- allow-list: include is non-empty; only included schemas are generated,
  everything else is left unspecified (and may still be pulled in as a
  dependency)
- deny-list: only exclude is given; everything is generated except the
  excluded schemas, or with the excluded fields removed
- default: no filter at all; every schema is generated with all fields
"""

from __future__ import annotations

import logging

from ...errors import InvalidFilterFieldError
from ..config import FieldSelector, FilterConfig
from ..schema_ast.nodes import ObjectNode, SchemaGraph
from .resolution import Decision, ResolutionState

logger = logging.getLogger(__name__)


class FilterEngine:
    """Classifies every schema of a graph against a filter specification."""

    def __init__(self, graph: SchemaGraph, config: FilterConfig):
        self.graph = graph
        self.config = config

    def classify_all(self) -> ResolutionState:
        """Classify every schema, in declaration order."""
        self._warn_unknown_names()
        state = ResolutionState()
        for name in self.graph.names():
            state[name] = self.classify(name)
            logger.debug("Classified %s as %s", name, state[name].kind.value)
        return state

    def classify(self, name: str) -> Decision:
        """
        Decide what to do with a single schema.

        Args:
            name: Schema name

        Returns:
            GENERATE with the retained fields, SKIP, or UNSPECIFIED
        """
        include = self.config.include
        exclude = self.config.exclude

        if self.config.is_allow_list:
            if name in include:
                return self._generate(name, include[name], keep_selected=True)
            if name in exclude:
                return Decision.skip()
            return Decision.unspecified()

        if name in exclude:
            selector = exclude[name]
            if selector.accepts_all:
                return Decision.skip()
            return self._generate(name, selector, keep_selected=False)

        return self.all_fields(name)

    def all_fields(self, name: str) -> Decision:
        """GENERATE decision keeping every field of the schema."""
        node = self.graph.get(name)
        if isinstance(node, ObjectNode):
            return Decision.generate(node.field_names())
        return Decision.generate()

    def _generate(self, name: str, selector: FieldSelector, keep_selected: bool) -> Decision:
        node = self.graph.get(name)
        if selector.accepts_all:
            return self.all_fields(name)

        if not isinstance(node, ObjectNode):
            raise InvalidFilterFieldError(name, sorted(selector.fields)[0] if selector.fields else "")

        field_names = node.field_names()
        unknown = sorted(selector.fields - set(field_names))
        if unknown:
            logger.debug("Ignoring filter fields absent from %s: %s", name, ", ".join(unknown))

        if keep_selected:
            retained = [f for f in field_names if selector.accepts(f)]
        else:
            retained = [f for f in field_names if f not in selector.fields]
        return Decision.generate(retained)

    def _warn_unknown_names(self) -> None:
        for section, selectors in (("include", self.config.include), ("exclude", self.config.exclude)):
            for name in selectors:
                if name not in self.graph:
                    logger.warning("Filter %s names unknown schema %r", section, name)
