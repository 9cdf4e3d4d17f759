"""OpenAPI Slim Types

Generates only the type declarations a consumer needs from a large
OpenAPI document. Schemas and fields are selected with an include/exclude
filter, references are checked, and the result is emitted in dependency
order for Rust or Python.
"""

__version__ = "1.0.0"

from .errors import (
    CyclicDependencyError,
    DanglingReferenceError,
    FilterConfigError,
    GenerationError,
    InvalidFilterFieldError,
    MalformedDocumentError,
    UnknownTypeError,
    UnsatisfiedDependencyError,
)
from .pipeline import (
    AtomicWriter,
    FieldSelector,
    FilterConfig,
    PipelineGenerator,
    generate_openapi_types,
    load_document,
    load_document_file,
    write_openapi_types,
)

__all__ = [
    "PipelineGenerator",
    "FilterConfig",
    "FieldSelector",
    "AtomicWriter",
    "generate_openapi_types",
    "write_openapi_types",
    "load_document",
    "load_document_file",
    "GenerationError",
    "MalformedDocumentError",
    "FilterConfigError",
    "DanglingReferenceError",
    "UnsatisfiedDependencyError",
    "CyclicDependencyError",
    "UnknownTypeError",
    "InvalidFilterFieldError",
]
