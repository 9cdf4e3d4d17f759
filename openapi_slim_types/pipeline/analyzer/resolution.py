"""
Per-schema generation decisions.

The filter engine fills a ResolutionState, the dependency resolver
closes it over references, and later phases only read it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class DecisionKind(Enum):
    """What the pipeline will do with a schema."""

    GENERATE = "generate"
    SKIP = "skip"  # Explicitly excluded by the filter
    UNSPECIFIED = "unspecified"  # The filter says nothing about it
    PENDING = "pending"  # Discovered as a dependency, not scanned yet


@dataclass(frozen=True)
class Decision:
    """A decision with the retained fields of object schemas."""

    kind: DecisionKind
    # Retained field names in document order; None for schemas without fields
    fields: tuple[str, ...] | None = None

    @staticmethod
    def generate(fields=None) -> Decision:
        return Decision(DecisionKind.GENERATE, tuple(fields) if fields is not None else None)

    @staticmethod
    def skip() -> Decision:
        return Decision(DecisionKind.SKIP)

    @staticmethod
    def unspecified() -> Decision:
        return Decision(DecisionKind.UNSPECIFIED)

    @staticmethod
    def pending() -> Decision:
        return Decision(DecisionKind.PENDING)

    @property
    def is_generated(self) -> bool:
        return self.kind is DecisionKind.GENERATE


class ResolutionState:
    """Decisions keyed by schema name, iterated in declaration order."""

    def __init__(self, decisions: dict[str, Decision] | None = None):
        self._decisions: dict[str, Decision] = dict(decisions or {})

    def __getitem__(self, name: str) -> Decision:
        return self._decisions[name]

    def __setitem__(self, name: str, decision: Decision) -> None:
        self._decisions[name] = decision

    def __contains__(self, name: str) -> bool:
        return name in self._decisions

    def __iter__(self) -> Iterator[str]:
        return iter(self._decisions)

    def __len__(self) -> int:
        return len(self._decisions)

    def items(self):
        return self._decisions.items()

    def get(self, name: str, default: Decision | None = None) -> Decision | None:
        return self._decisions.get(name, default)

    def names_with(self, kind: DecisionKind) -> list[str]:
        return [name for name, decision in self._decisions.items() if decision.kind is kind]

    def generated(self) -> list[str]:
        """Names of schemas that will be emitted, in declaration order."""
        return self.names_with(DecisionKind.GENERATE)

    def copy(self) -> ResolutionState:
        return ResolutionState(self._decisions)
