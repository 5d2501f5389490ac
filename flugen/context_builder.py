"""Build the Jinja2 template context from parsed model classes.

Every decode/encode expression and type string is rendered here, so the
template only lays out members.
"""

from __future__ import annotations

from typing import Any, Sequence

from .expressions import (
    LIST_EQUALS_HELPER,
    copy_with_type,
    decode_expression,
    encode_expression,
    equality_expression,
    hash_expression,
    type_string,
)
from .models import Field, ListOf, SourceClass

# Lints the generated code intentionally violates
LINT_IGNORES = (
    "avoid_equals_and_hash_code_on_mutable_classes",
    "document_ignores",
    "lines_longer_than_80_chars",
)


def escape_dart_string(value: str) -> str:
    """Escape text for a single-quoted Dart string literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")


def _json_source(key: str) -> str:
    return f"json['{key}']"


def build_field(field: Field) -> dict[str, Any]:
    """Template values for one field."""
    key = escape_dart_string(field.json_key)
    return {
        "name": field.name,
        "key": key,
        "type": type_string(field.type),
        "copy_type": copy_with_type(field.type),
        "decode": decode_expression(field.type, _json_source(key)),
        "encode": encode_expression(field.type, field.name),
        "equals": equality_expression(field.type, field.name),
        "hash": hash_expression(field.type, field.name),
    }


def build_class(cls: SourceClass) -> dict[str, Any]:
    """Template values for one generated class."""
    return {
        "name": cls.name,
        "base": f"_{cls.name}",
        "const": "const " if cls.has_const_constructor else "",
        "fields": [build_field(f) for f in cls.fields],
    }


def _has_list_field(classes: Sequence[SourceClass]) -> bool:
    return any(isinstance(f.type, ListOf) for c in classes for f in c.fields)


def build_context(classes: Sequence[SourceClass], part_of: str) -> dict[str, Any]:
    """Build the full template context for one generated unit."""
    return {
        "part_of": part_of,
        "lint_ignores": ", ".join(LINT_IGNORES),
        "classes": [build_class(c) for c in classes],
        "list_equals": LIST_EQUALS_HELPER if _has_list_field(classes) else None,
    }
