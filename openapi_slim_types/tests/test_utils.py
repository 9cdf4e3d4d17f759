import pytest

from openapi_slim_types.utils import (
    fix_leading_digit,
    python_field_name,
    rust_field_name,
    snake_to_pascal_case,
    to_snake_case,
    to_upper_snake_case,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "FirstName"),
        ("FIRST_NAME", "FirstName"),
        ("actionTemplate", "ActionTemplate"),
        ("first 3 rows", "First3Rows"),
        ("ABC", "Abc"),
        ("api.v1-Pet", "ApiV1Pet"),
        ("", ""),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("petId", "pet_id"),
        ("HTTPStatus", "http_status"),
        ("created-at", "created_at"),
        ("already_snake", "already_snake"),
        ("Pet", "pet"),
    ],
)
def test_to_snake_case(text, expected):
    assert to_snake_case(text) == expected


def test_to_upper_snake_case():
    assert to_upper_snake_case("inTransit") == "IN_TRANSIT"


def test_fix_leading_digit():
    assert fix_leading_digit("3D", "T") == "T3D"
    assert fix_leading_digit("Pet", "T") == "Pet"
    assert fix_leading_digit("", "T") == ""


@pytest.mark.parametrize("name, expected", [("petId", "pet_id"), ("type", "type_"), ("self", "self_"), ("2fa", "_2_fa"), ("from", "from")])
def test_rust_field_name(name, expected):
    assert rust_field_name(name) == expected


@pytest.mark.parametrize("name, expected", [("petId", "pet_id"), ("class", "class_"), ("from", "from_"), ("type", "type"), ("1st", "_1_st")])
def test_python_field_name(name, expected):
    assert python_field_name(name) == expected
