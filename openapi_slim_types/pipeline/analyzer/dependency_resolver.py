"""
Dependency resolver.

Closes the filter's generate-set over schema references. A generated
schema may only reference schemas that are generated too; schemas the
filter left unspecified are pulled in when auto-include is enabled,
explicitly excluded schemas never are.
"""

from __future__ import annotations

import logging
from collections import deque

from ...errors import UnsatisfiedDependencyError
from ..config import FilterConfig
from .filter_engine import FilterEngine
from .reference_resolver import ReferenceResolver
from .resolution import Decision, DecisionKind, ResolutionState

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Reconciles references against filter decisions."""

    def __init__(self, resolver: ReferenceResolver, filter_engine: FilterEngine, config: FilterConfig):
        self.resolver = resolver
        self.filter_engine = filter_engine
        self.config = config

    def resolve(self, state: ResolutionState) -> ResolutionState:
        """
        Compute the dependency-closed generate-set.

        Every generated schema is scanned once; schemas promoted by
        auto-include are queued and scanned the same way, so the loop ends
        when no decision changes any more, cyclic references included.

        Args:
            state: Decisions from the filter engine

        Returns:
            A new state in which every reference of a generated schema
            points to a generated schema

        Raises:
            DanglingReferenceError: A reference targets an unknown schema
            UnsatisfiedDependencyError: A reference targets a skipped schema,
                or an unspecified one while auto-include is off
        """
        state = state.copy()
        queue = deque(state.generated())
        scanned: set[str] = set()

        while queue:
            name = queue.popleft()
            if name in scanned:
                continue
            scanned.add(name)

            if state[name].kind is DecisionKind.PENDING:
                state[name] = self.filter_engine.all_fields(name)
                logger.info("Auto-including schema %s", name)

            for target in self.resolver.references_of(name, state[name].fields):
                self.resolver.require(target, name)
                decision = state.get(target, Decision.unspecified())

                if decision.kind in (DecisionKind.GENERATE, DecisionKind.PENDING):
                    continue

                if decision.kind is DecisionKind.SKIP:
                    raise UnsatisfiedDependencyError(name, target, "explicitly excluded")

                if not self.config.auto_include_dependencies:
                    raise UnsatisfiedDependencyError(name, target, "not included and auto_include_dependencies is off")

                logger.debug("%s pulls in %s", name, target)
                state[target] = Decision.pending()
                queue.append(target)

        return state
