"""
Pipeline - filtered OpenAPI component to type declaration generator.

This module provides a multi-phase architecture for generating a minimal
set of type declarations from a large OpenAPI document:

1. Phase 1 (Parser): Build the schema graph from components.schemas
2. Phase 2 (Filter): Classify every schema against include/exclude
3. Phase 3 (Dependencies): Close the generate-set over references
4. Phase 4 (Orderer): Sort declarations so references point backwards
5. Phase 5 (Backend): Render the declarations for the target language
6. Phase 6 (Writer): Atomically write the module
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import FieldSelector, FilterConfig
from .generator import PipelineGenerator, generate_openapi_types, write_openapi_types
from .loader import load_document, load_document_file

__all__ = [
    "PipelineGenerator",
    "FilterConfig",
    "FieldSelector",
    "AtomicWriter",
    "generate_openapi_types",
    "write_openapi_types",
    "load_document",
    "load_document_file",
]
