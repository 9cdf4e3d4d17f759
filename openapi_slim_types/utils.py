"""
Utility functions for identifier conversion.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z]+(?![a-z])|[A-Z][a-z]*|[0-9]+")

RUST_KEYWORDS = {
    "as",
    "async",
    "await",
    "break",
    "const",
    "continue",
    "crate",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "match",
    "mod",
    "move",
    "mut",
    "pub",
    "ref",
    "return",
    "self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "type",
    "unsafe",
    "use",
    "where",
    "while",
}


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "ABC" -> "Abc"
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text) if word)


def to_snake_case(text: str) -> str:
    """Convert camelCase, PascalCase or kebab-case text to snake_case.

    Examples:
        "petId" -> "pet_id"
        "HTTPStatus" -> "http_status"
        "created-at" -> "created_at"
    """
    return "_".join(word.lower() for word in _split_into_words(text) if word)


def to_upper_snake_case(text: str) -> str:
    """Convert text to UPPER_SNAKE_CASE (Python enum member names)."""
    return to_snake_case(text).upper()


def fix_leading_digit(name: str, prefix: str) -> str:
    """Prefix names that would start with a digit."""
    if name and name[0].isdigit():
        return prefix + name
    return name


def rust_field_name(name: str) -> str:
    """Rust field name for a JSON property, avoiding Rust keywords."""
    result = fix_leading_digit(to_snake_case(name), "_")
    if result in RUST_KEYWORDS:
        result += "_"
    return result


def python_field_name(name: str) -> str:
    """Python attribute name for a JSON property, avoiding Python keywords."""
    result = fix_leading_digit(to_snake_case(name), "_")
    if keyword.iskeyword(result):
        result += "_"
    return result
