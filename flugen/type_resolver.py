"""Classify a field's declared Dart type into a TypeDescriptor.

Handles:
- Trailing `?` nullability
- `List<T>` wrappers (one level; element nullability tracked separately)
- Primitive keywords (int, double, bool, String, dynamic, DateTime)
- `enum` field option forcing an enum reference
- Anything else as a custom model reference
"""

from __future__ import annotations

import re

from .models import (
    CustomRef,
    ElementType,
    EnumRef,
    FieldOptions,
    ListOf,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
)

NULLABLE_SIGIL = "?"

_LIST_RE = re.compile(r"^List<([A-Za-z_].*)>")

_PRIMITIVES: dict[str, PrimitiveKind] = {kind.value: kind for kind in PrimitiveKind}


def _split_nullable(raw: str) -> tuple[str, bool]:
    """Strip a trailing nullability sigil."""
    text = raw.strip()
    if text.endswith(NULLABLE_SIGIL):
        return text[: -len(NULLABLE_SIGIL)].rstrip(), True
    return text, False


def resolve_element_type(raw: str, options: FieldOptions | None = None) -> ElementType:
    """Resolve a bare (non-list) type token."""
    token, nullable = _split_nullable(raw)

    if options is not None and options.force_enum:
        return EnumRef(token, nullable)

    kind = _PRIMITIVES.get(token)
    if kind is PrimitiveKind.DYNAMIC:
        # dynamic already admits null
        return Primitive(kind, False)
    if kind is not None:
        return Primitive(kind, nullable)

    return CustomRef(token, nullable)


def resolve_type(raw: str, options: FieldOptions | None = None) -> TypeDescriptor:
    """Resolve a declared field type to a TypeDescriptor.

    Never fails: unknown tokens resolve to a CustomRef.
    """
    text, nullable = _split_nullable(raw)

    m = _LIST_RE.match(text)
    if m:
        return ListOf(resolve_element_type(m.group(1), options), nullable)

    return resolve_element_type(raw, options)
