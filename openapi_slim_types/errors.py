"""
Errors raised by the generator.

Every error is terminal for the current run: the pipeline never writes
partial output, so callers only need to catch GenerationError.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generation failures."""


class MalformedDocumentError(GenerationError):
    """Raised when a document cannot be read as an OpenAPI component set."""


class FilterConfigError(GenerationError):
    """Raised when the filter specification is invalid."""


class DanglingReferenceError(GenerationError):
    """Raised when a $ref points to a schema absent from the component set."""

    def __init__(self, from_schema: str, target: str):
        self.from_schema = from_schema
        self.target = target
        super().__init__(f"Schema {from_schema!r} references unknown schema {target!r}")


class UnsatisfiedDependencyError(GenerationError):
    """Raised when a generated schema references a schema that will not be generated."""

    def __init__(self, from_schema: str, missing: str, reason: str = ""):
        self.from_schema = from_schema
        self.missing = missing
        message = f"Schema {from_schema!r} depends on {missing!r} which is not generated"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CyclicDependencyError(GenerationError):
    """Raised when the generated schemas reference each other in a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        path = " -> ".join(self.cycle + self.cycle[:1])
        super().__init__(f"Cyclic dependency between generated schemas: {path}")


class UnknownTypeError(GenerationError):
    """Raised when a primitive (type, format) pair has no mapping in the target language."""

    def __init__(self, kind: str, format: str | None = None, schema: str = ""):
        self.kind = kind
        self.format = format
        self.schema = schema
        where = f" in schema {schema!r}" if schema else ""
        super().__init__(f"No type mapping for type={kind!r} format={format!r}{where}")


class InvalidFilterFieldError(GenerationError):
    """Raised when a field selector targets a schema that has no fields."""

    def __init__(self, schema: str, field: str):
        self.schema = schema
        self.field = field
        super().__init__(f"Filter selects field {field!r} of schema {schema!r}, which is not an object")
