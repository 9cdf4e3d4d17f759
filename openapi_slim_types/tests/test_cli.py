import json
from pathlib import Path

from click.testing import CliRunner

from openapi_slim_types.openapi_slim_types import openapi_slim_types

TEST_DATA_DIR = Path(__file__).parent / "test_data"
PETSTORE = str(TEST_DATA_DIR / "petstore.yaml")


def test_generates_rust_by_default(tmp_path):
    output = tmp_path / "types.rs"
    result = CliRunner().invoke(openapi_slim_types, [PETSTORE, str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text(encoding="utf-8")
    assert "//! Generated by: openapi_slim_types petstore.yaml types.rs\n" in code
    assert "pub type Pets = Vec<Pet>;" in code


def test_python_language(tmp_path):
    output = tmp_path / "types.py"
    result = CliRunner().invoke(openapi_slim_types, ["--language", "python", PETSTORE, str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text(encoding="utf-8")
    assert "# Generated by: openapi_slim_types petstore.yaml types.py --language python\n" in code
    assert "Pets = list[Pet]" in code


def test_filter_config(tmp_path):
    config = tmp_path / "filter.json"
    config.write_text(json.dumps({"include": {"Pets": "*"}, "auto_include_dependencies": True}), encoding="utf-8")
    output = tmp_path / "types.rs"

    result = CliRunner().invoke(openapi_slim_types, ["-c", str(config), PETSTORE, str(output)])

    assert result.exit_code == 0, result.output
    code = output.read_text(encoding="utf-8")
    assert "--config filter.json" in code
    assert "pub struct Pet {" in code
    assert "Error" not in code


def test_failure_reports_the_error_and_writes_nothing(tmp_path):
    config = tmp_path / "filter.yaml"
    config.write_text("include:\n  Pets: '*'\n", encoding="utf-8")
    output = tmp_path / "types.rs"

    result = CliRunner().invoke(openapi_slim_types, ["--config", str(config), PETSTORE, str(output)])

    assert result.exit_code == 1
    assert "Error: Schema 'Pets' depends on 'Pet' which is not generated" in result.output
    assert not output.exists()


def test_invalid_filter_file(tmp_path):
    config = tmp_path / "filter.json"
    config.write_text('{"include": ', encoding="utf-8")

    result = CliRunner().invoke(openapi_slim_types, ["--config", str(config), PETSTORE, str(tmp_path / "types.rs")])

    assert result.exit_code == 1
    assert "Failed to parse" in result.output


def test_missing_input(tmp_path):
    result = CliRunner().invoke(openapi_slim_types, [str(tmp_path / "missing.yaml"), str(tmp_path / "types.rs")])
    assert result.exit_code == 2
