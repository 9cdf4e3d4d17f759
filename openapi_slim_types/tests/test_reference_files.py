"""
Reference file tests.

Compares generated modules with checked-in expected output and checks
that generation is reproducible.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

from openapi_slim_types.pipeline import FilterConfig, PipelineGenerator, load_document_file

TEST_DATA_DIR = Path(__file__).parent / "test_data"


@pytest.mark.parametrize(
    "language, reference",
    [
        ("rust", "petstore_types.rs"),
        ("python", "petstore_types.py"),
    ],
)
def test_petstore_matches_reference(language, reference):
    document = load_document_file(TEST_DATA_DIR / "petstore.yaml")
    generated = PipelineGenerator(document, FilterConfig(), language).generate()

    expected = (TEST_DATA_DIR / reference).read_text(encoding="utf-8")
    assert generated == expected


@pytest.mark.parametrize("language", ["rust", "python"])
def test_generation_is_idempotent(language):
    config = FilterConfig.from_dict({"include": {"Order": ["id", "status", "customer"]}, "auto_include_dependencies": True})
    document = load_document_file(TEST_DATA_DIR / "store.json")

    first = PipelineGenerator(document, config, language).generate()
    second = PipelineGenerator(load_document_file(TEST_DATA_DIR / "store.json"), config, language).generate()

    assert first == second


def test_python_output_is_valid_python():
    document = load_document_file(TEST_DATA_DIR / "store.json")
    config = FilterConfig.from_dict({"exclude": {"Category": "*"}})

    code = PipelineGenerator(document, config, "python").generate()

    tree = ast.parse(code)
    classes = [node.name for node in tree.body if isinstance(node, ast.ClassDef)]
    assert classes == ["OrderStatus", "Address", "Customer", "Order"]


if __name__ == "__main__":
    pytest.main([__file__])
