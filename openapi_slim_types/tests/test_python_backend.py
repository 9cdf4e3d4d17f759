import ast

import pytest

from openapi_slim_types.errors import UnknownTypeError
from openapi_slim_types.pipeline import FilterConfig, generate_openapi_types

from .builders import components, obj, ref

NO_COMMENT = FilterConfig(add_generation_comment=False)


def python(document, config=NO_COMMENT):
    code = generate_openapi_types(document, config, "python")
    ast.parse(code)
    return code


def test_module_prefix_without_comment():
    code = python(components(Id={"type": "string"}))
    assert code == "from __future__ import annotations\n\n\nId = str\n"


def test_imports_are_grouped():
    code = python(components(Event=obj(["at"], at={"type": "string", "format": "date-time"}, payload={}), Kind={"type": "string", "enum": ["a"]}))
    assert code.startswith(
        "from __future__ import annotations\n"
        "\n"
        "import datetime\n"
        "from dataclasses import dataclass\n"
        "from enum import Enum, unique\n"
        "from typing import Any\n"
        "\n"
        "from dataclasses_json import dataclass_json\n"
    )
    assert "    at: datetime.datetime\n    payload: Any | None = None\n" in code


def test_renamed_fields_keep_their_json_name():
    code = python(components(Item=obj(["petId"], petId={"type": "integer"}, **{"class": {"type": "string"}})))
    assert '    pet_id: int = field(metadata=config(field_name="petId"))\n' in code
    assert '    class_: str | None = field(default=None, metadata=config(field_name="class"))\n' in code
    assert "from dataclasses import dataclass, field\n" in code
    assert "from dataclasses_json import config, dataclass_json\n" in code


def test_record_docstring_and_field_comments():
    code = python(
        components(
            Pet={
                "type": "object",
                "description": "A pet",
                "required": ["name"],
                "properties": {"name": {"type": "string", "description": "Pet name"}},
            }
        )
    )
    assert '@dataclass_json\n@dataclass(kw_only=True)\nclass Pet:\n    """A pet"""\n\n    # Pet name\n    name: str\n' in code


def test_multiline_docstring():
    code = python(components(Pet={"type": "object", "description": "A pet\nfrom the store", "properties": {}}))
    assert 'class Pet:\n    """\n    A pet\n    from the store\n    """\n' in code


def test_empty_record_has_a_body():
    code = python(components(Empty=obj(id={"type": "integer"})), FilterConfig.from_dict({"exclude": {"Empty": ["id"]}, "add_generation_comment": False}))
    assert "class Empty:\n    pass\n" in code


def test_string_enum():
    code = python(components(Status={"type": "string", "enum": ["placed", "in-transit", "2nd"]}))
    assert (
        "@unique\n"
        "class Status(str, Enum):\n"
        '    PLACED = "placed"\n'
        '    IN_TRANSIT = "in-transit"\n'
        '    VALUE_2_ND = "2nd"\n'
    ) in code


def test_integer_enum():
    code = python(components(Level={"type": "integer", "description": "Level", "enum": [1, 2]}))
    assert 'class Level(int, Enum):\n    """Level"""\n\n    VALUE_1 = 1\n    VALUE_2 = 2\n' in code


def test_alias_with_description():
    code = python(components(Pets={"type": "array", "description": "All pets", "items": ref("Pet")}, Pet=obj(id={"type": "integer"})))
    assert "# All pets\nPets = list[Pet]\n" in code
    assert code.index("class Pet:") < code.index("Pets = list[Pet]")


def test_unknown_format():
    with pytest.raises(UnknownTypeError):
        python(components(Id={"type": "integer", "format": "uint128"}))


@pytest.mark.parametrize("fmt", ["uuid", "email", "byte"])
def test_text_formats_are_strings(fmt):
    code = python(components(Value={"type": "string", "format": fmt}))
    assert "Value = str\n" in code


def test_text_formats_are_shared_by_the_backends():
    from openapi_slim_types.pipeline.backends import base, python_backend, rust_backend

    assert python_backend.TEXT_FORMATS is base.TEXT_FORMATS
    assert rust_backend.TEXT_FORMATS is base.TEXT_FORMATS
