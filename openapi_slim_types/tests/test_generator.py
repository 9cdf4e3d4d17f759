import pytest

from openapi_slim_types.errors import GenerationError, UnsatisfiedDependencyError
from openapi_slim_types.pipeline import FilterConfig, PipelineGenerator, generate_openapi_types, write_openapi_types
from openapi_slim_types.pipeline.generator import GENERATION_HEADER


def test_unsupported_language(petstore_document):
    with pytest.raises(ValueError, match="Language not supported: go"):
        PipelineGenerator(petstore_document, language="go")


def test_default_config_generates_everything(petstore_document):
    code = generate_openapi_types(petstore_document)
    assert code.startswith("//! OpenApi Types\n")
    assert code.index("pub struct Pet") < code.index("pub struct Error") < code.index("pub type Pets")


def test_generation_comment_with_command_line(petstore_document):
    code = PipelineGenerator(petstore_document, command_line="openapi_slim_types api.yaml types.rs").generate()
    assert code.startswith("//! OpenApi Types\n")
    assert "//! THE NEXT BUILD\n//! Generated by: openapi_slim_types api.yaml types.rs\n\nuse serde::Deserialize;\n" in code


def test_generation_comment_can_be_disabled(petstore_document):
    code = generate_openapi_types(petstore_document, FilterConfig(add_generation_comment=False))
    assert code.startswith("use serde::Deserialize;\n")
    assert "GENERATED AUTOMATICALLY" not in code


def test_python_generation_comment(petstore_document):
    code = generate_openapi_types(petstore_document, language="python")
    expected = "".join(f"# {line}\n" for line in GENERATION_HEADER.splitlines())
    assert code.startswith(expected + "\nfrom __future__ import annotations\n")


def test_build_ir_keeps_retained_fields(petstore_document):
    config = FilterConfig.from_dict({"include": {"Pet": ["name"]}})
    ir = PipelineGenerator(petstore_document, config).build_ir()
    assert ir.names() == ["Pet"]
    assert [field.name for field in ir.get("Pet").fields] == ["name"]


def test_build_ir_logs_summary(petstore_document, caplog):
    with caplog.at_level("INFO"):
        PipelineGenerator(petstore_document, FilterConfig.from_dict({"exclude": {"Error": "*"}})).build_ir()
    assert "Generating 2 of 3 schemas" in caplog.text


def test_write_openapi_types(petstore_document, tmp_path):
    output = tmp_path / "generated" / "types.rs"
    write_openapi_types(petstore_document, None, output)
    assert output.read_text(encoding="utf-8") == generate_openapi_types(petstore_document)


def test_failed_run_leaves_existing_output_untouched(petstore_document, tmp_path):
    output = tmp_path / "types.rs"
    output.write_text("previous build\n", encoding="utf-8")

    with pytest.raises(UnsatisfiedDependencyError):
        write_openapi_types(petstore_document, FilterConfig.from_dict({"include": {"Pets": "*"}}), output)

    assert output.read_text(encoding="utf-8") == "previous build\n"
    assert [p.name for p in tmp_path.iterdir()] == ["types.rs"]


def test_failed_run_creates_no_file(tmp_path):
    output = tmp_path / "types.py"
    document = {"components": {"schemas": {"Bad": {"oneOf": [{"type": "string"}]}}}}
    with pytest.raises(GenerationError):
        write_openapi_types(document, None, output, language="python")
    assert not output.exists()


def test_unsupported_construct_outside_the_generate_set(petstore_document):
    petstore_document["components"]["schemas"]["Mixed"] = {"anyOf": [{"type": "string"}, {"type": "integer"}]}
    code = generate_openapi_types(petstore_document, FilterConfig.from_dict({"exclude": {"Mixed": "*"}}))
    assert "Mixed" not in code
