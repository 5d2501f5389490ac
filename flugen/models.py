"""Parsed model of annotated Dart declarations.

A unit yields a list of SourceClass; every field carries a resolved
TypeDescriptor. All records are frozen once the parser has built them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class PrimitiveKind(str, Enum):
    """Primitive vocabulary, valued by the Dart keyword."""

    INTEGER = "int"
    FLOATING = "double"
    BOOLEAN = "bool"
    TEXT = "String"
    DYNAMIC = "dynamic"
    INSTANT = "DateTime"


@dataclass(frozen=True)
class Primitive:
    kind: PrimitiveKind
    nullable: bool = False


@dataclass(frozen=True)
class EnumRef:
    name: str
    nullable: bool = False


@dataclass(frozen=True)
class CustomRef:
    """Another model class exposing fromJson/toJson."""

    name: str
    nullable: bool = False


ElementType = Union[Primitive, EnumRef, CustomRef]


@dataclass(frozen=True)
class ListOf:
    element: ElementType
    nullable: bool = False


TypeDescriptor = Union[Primitive, EnumRef, CustomRef, ListOf]


@dataclass(frozen=True)
class FieldOptions:
    """Per-field directives from a `// @flu` comment above the getter."""

    json_key: str | None = None
    force_enum: bool = False


@dataclass(frozen=True)
class Field:
    name: str
    type: TypeDescriptor
    options: FieldOptions | None = None

    @property
    def json_key(self) -> str:
        """Serialized key: the option override, else the field name."""
        if self.options is not None and self.options.json_key is not None:
            return self.options.json_key
        return self.name


@dataclass(frozen=True)
class SourceClass:
    """One `// @flu` declaration. `name` has the leading underscore removed."""

    name: str
    has_const_constructor: bool = False
    fields: tuple[Field, ...] = ()
