"""
Pipeline generator.

Runs every phase in memory and only hands back (or writes) the module
once all of them succeeded.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .analyzer import (
    IR,
    DependencyResolver,
    EmissionOrderer,
    FilterEngine,
    IRBuilder,
    ReferenceResolver,
    ResolutionState,
)
from .atomic_writer import AtomicWriter
from .backends import BACKENDS, CodeBackend
from .config import FilterConfig
from .schema_ast import SchemaGraph, SchemaParser

logger = logging.getLogger(__name__)

GENERATION_HEADER = (
    "OpenApi Types\n"
    "GENERATED AUTOMATICALLY, ALL THE CHANGES\n"
    "YOU MAKE WILL BE REWRITTEN DURING\n"
    "THE NEXT BUILD"
)


class PipelineGenerator:
    """Generates type declarations for the filtered schemas of an OpenAPI document."""

    def __init__(
        self,
        document: dict[str, Any],
        config: FilterConfig | None = None,
        language: str = "rust",
        command_line: str = "",
    ):
        """
        Initialize the generator.

        Args:
            document: Parsed OpenAPI document
            config: Filter specification (None = generate everything)
            language: Target language ("rust" or "python")
            command_line: Command line shown in the generation comment
        """
        if language not in BACKENDS:
            raise ValueError(f"Language not supported: {language}")
        self.document = document
        self.config = config if config is not None else FilterConfig()
        self.language = language
        self.command_line = command_line

    def build_graph(self) -> SchemaGraph:
        return SchemaParser().parse(self.document)

    def resolve(self, graph: SchemaGraph) -> ResolutionState:
        """Filter the graph and close the generate-set over references."""
        resolver = ReferenceResolver(graph)
        filter_engine = FilterEngine(graph, self.config)
        state = filter_engine.classify_all()
        return DependencyResolver(resolver, filter_engine, self.config).resolve(state)

    def build_ir(self) -> IR:
        graph = self.build_graph()
        state = self.resolve(graph)
        order = EmissionOrderer(graph, ReferenceResolver(graph)).order(state)
        logger.info("Generating %d of %d schemas", len(order), len(graph))
        return IRBuilder(graph).build(order, state, self._generation_comment())

    def create_backend(self) -> CodeBackend:
        return BACKENDS[self.language](self.config)

    def generate(self) -> str:
        """
        Generate the module source.

        Returns:
            Generated code as a string

        Raises:
            GenerationError: On any failure; nothing is produced in that case
        """
        return self.create_backend().generate(self.build_ir())

    def write(self, output: str | Path) -> None:
        """Generate and write the module; the file is untouched on failure."""
        code = self.generate()
        AtomicWriter().write(Path(output), code)

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        if self.command_line:
            return f"{GENERATION_HEADER}\nGenerated by: {self.command_line}"
        return GENERATION_HEADER


def generate_openapi_types(document: dict[str, Any], config: FilterConfig | None = None, language: str = "rust") -> str:
    """Generate type declarations for an OpenAPI document as a string."""
    return PipelineGenerator(document, config, language).generate()


def write_openapi_types(
    document: dict[str, Any],
    config: FilterConfig | None,
    output: str | Path,
    language: str = "rust",
) -> None:
    """Generate type declarations for an OpenAPI document into a file.

    The file is only replaced once generation fully succeeded.
    """
    PipelineGenerator(document, config, language).write(output)
