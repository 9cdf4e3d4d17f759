"""
Filter specification for the generator.

The filter document decides which component schemas (and which of their
fields) end up in the generated module, and which decorations the emitted
declarations carry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..errors import FilterConfigError
from .loader import load_document, load_document_file

logger = logging.getLogger(__name__)

ALL_FIELDS = "*"


@dataclass(frozen=True)
class FieldSelector:
    """Either every field of a schema ("*") or an explicit set of field names."""

    fields: frozenset[str] = frozenset()
    accepts_all: bool = True

    @staticmethod
    def all() -> FieldSelector:
        return FieldSelector()

    @staticmethod
    def specific(names) -> FieldSelector:
        return FieldSelector(fields=frozenset(names), accepts_all=False)

    @staticmethod
    def parse(value: Any, where: str) -> FieldSelector:
        """Parse a selector value: the string "*" or a list of field names."""
        if value == ALL_FIELDS:
            return FieldSelector.all()
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return FieldSelector.specific(value)
        raise FilterConfigError(f'{where}: expected "*" or a list of field names, got {value!r}')

    def accepts(self, name: str) -> bool:
        return self.accepts_all or name in self.fields

    def to_value(self) -> str | list[str]:
        if self.accepts_all:
            return ALL_FIELDS
        return sorted(self.fields)


@dataclass
class FilterConfig:
    """Configuration options for filtering and emission."""

    # Schemas to generate (allow-list mode when non-empty)
    include: dict[str, FieldSelector] = field(default_factory=dict)

    # Schemas or fields to drop (deny-list mode when include is empty)
    exclude: dict[str, FieldSelector] = field(default_factory=dict)

    # Pull in referenced schemas the filter says nothing about
    auto_include_dependencies: bool = False

    # Decorations for records / enumerations (None = backend baseline)
    struct_derives: list[str] | None = None
    enum_derives: list[str] | None = None

    # Add generation comment at top of file
    add_generation_comment: bool = True

    def __post_init__(self):
        both = sorted(set(self.include) & set(self.exclude))
        if both:
            raise FilterConfigError(f"Schemas listed in both include and exclude: {', '.join(both)}")
        if self.include:
            partial = sorted(name for name, selector in self.exclude.items() if not selector.accepts_all)
            if partial:
                raise FilterConfigError(f"Field exclusions are only allowed without include, found field lists for: {', '.join(partial)}")

    @property
    def is_allow_list(self) -> bool:
        return bool(self.include)

    @staticmethod
    def from_dict(d: dict | None) -> FilterConfig:
        """Create a config from a parsed filter document."""
        if d is None:
            d = {}
        if not isinstance(d, dict):
            raise FilterConfigError(f"Filter specification must be a mapping, got {type(d).__name__}")

        kwargs: dict[str, Any] = {}
        for k, v in d.items():
            if k in ("include", "exclude"):
                kwargs[k] = _parse_selectors(v, k)
            elif k == "auto_include_dependencies":
                if not isinstance(v, bool):
                    raise FilterConfigError(f"auto_include_dependencies must be a boolean, got {v!r}")
                kwargs[k] = v
            elif k in ("struct_derives", "enum_derives"):
                kwargs[k] = _parse_string_list(v, k)
            elif k == "add_generation_comment":
                if not isinstance(v, bool):
                    raise FilterConfigError(f"add_generation_comment must be a boolean, got {v!r}")
                kwargs[k] = v
            else:
                logger.warning("Ignoring unknown filter option %r", k)
        return FilterConfig(**kwargs)

    @staticmethod
    def from_str(data: str) -> FilterConfig:
        """Create a config from JSON or YAML text."""
        if not data.strip():
            return FilterConfig()
        return FilterConfig.from_dict(load_document(data, what="filter specification", error=FilterConfigError))

    @staticmethod
    def from_file(path: str | Path) -> FilterConfig:
        """Create a config from a JSON or YAML file."""
        return FilterConfig.from_dict(load_document_file(path, what="filter specification", error=FilterConfigError))

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        d: dict[str, Any] = {
            "include": {name: selector.to_value() for name, selector in self.include.items()},
            "exclude": {name: selector.to_value() for name, selector in self.exclude.items()},
            "auto_include_dependencies": self.auto_include_dependencies,
            "add_generation_comment": self.add_generation_comment,
        }
        if self.struct_derives is not None:
            d["struct_derives"] = list(self.struct_derives)
        if self.enum_derives is not None:
            d["enum_derives"] = list(self.enum_derives)
        return d


def _parse_selectors(value: Any, key: str) -> dict[str, FieldSelector]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise FilterConfigError(f"{key} must be a mapping of schema name to selector")
    return {name: FieldSelector.parse(selector, f"{key}.{name}") for name, selector in value.items()}


def _parse_string_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise FilterConfigError(f"{key} must be a list of strings, got {value!r}")
    return list(value)
