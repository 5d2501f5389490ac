"""Dart type strings and JSON decode/encode expressions per TypeDescriptor.

Examples (source expression `json['k']`, field `k`):

  int          (json['k'] as num).toInt()          k
  double?      (json['k'] as num?)?.toDouble()     k
  String       json['k'] as String                 k
  DateTime?    json['k'] == null ? null
                 : DateTime.parse(json['k'] as String)
                                                   k?.toIso8601String()
  Status       Status.values.singleWhere(
                 (v) => v.name == json['k'] as String)
                                                   k.name
  Item         Item.fromJson(json['k'] as Map<String, dynamic>)
                                                   k.toJson()
  List<Item>?  (json['k'] as List?)?.map((e) => ...).toList()
                                                   k?.map((e) => e.toJson()).toList()
"""

from __future__ import annotations

from .models import (
    CustomRef,
    ElementType,
    EnumRef,
    ListOf,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
)

_ELEMENT = "e"

# Top-level helper emitted once per generated unit that has list fields
LIST_EQUALS_HELPER = "_fluListEquals"


def _null_mark(nullable: bool) -> str:
    return "?" if nullable else ""


def _element_type_name(t: ElementType) -> str:
    if isinstance(t, Primitive):
        return t.kind.value
    return t.name


def type_string(t: TypeDescriptor) -> str:
    """Declared Dart type including nullability."""
    if isinstance(t, ListOf):
        return f"List<{type_string(t.element)}>{_null_mark(t.nullable)}"
    return f"{_element_type_name(t)}{_null_mark(t.nullable)}"


def non_null_type_string(t: TypeDescriptor) -> str:
    """Dart type without the outer nullability mark."""
    if isinstance(t, ListOf):
        return f"List<{type_string(t.element)}>"
    return _element_type_name(t)


def copy_with_type(t: TypeDescriptor) -> str:
    """Parameter type for copyWith; every override is optional except dynamic."""
    if isinstance(t, Primitive) and t.kind is PrimitiveKind.DYNAMIC:
        return non_null_type_string(t)
    return f"{non_null_type_string(t)}?"


def needs_element_mapping(element: ElementType) -> bool:
    """True when list elements must be converted one by one for JSON."""
    if isinstance(element, (CustomRef, EnumRef)):
        return True
    return isinstance(element, Primitive) and element.kind is PrimitiveKind.INSTANT


def _null_guard(source: str, nullable: bool) -> str:
    return f"{source} == null ? null : " if nullable else ""


def _decode_element(t: ElementType, source: str) -> str:
    mark = _null_mark(t.nullable)

    if isinstance(t, CustomRef):
        factory = f"{t.name}.fromJson({source} as Map<String, dynamic>)"
        return _null_guard(source, t.nullable) + factory

    if isinstance(t, EnumRef):
        lookup = f"{t.name}.values.singleWhere((v) => v.name == {source} as String)"
        return _null_guard(source, t.nullable) + lookup

    kind = t.kind
    if kind is PrimitiveKind.INTEGER:
        return f"({source} as num{mark}){mark}.toInt()"
    if kind is PrimitiveKind.FLOATING:
        return f"({source} as num{mark}){mark}.toDouble()"
    if kind is PrimitiveKind.INSTANT:
        return _null_guard(source, t.nullable) + f"DateTime.parse({source} as String)"
    if kind is PrimitiveKind.DYNAMIC:
        return source
    return f"{source} as {type_string(t)}"


def decode_expression(t: TypeDescriptor, source: str) -> str:
    """Expression converting the JSON value `source` into the field type."""
    if isinstance(t, ListOf):
        mark = _null_mark(t.nullable)
        mapper = f"({_ELEMENT}) => {_decode_element(t.element, _ELEMENT)}"
        return f"({source} as List{mark}){mark}.map({mapper}).toList()"
    return _decode_element(t, source)


def _encode_element(t: ElementType, name: str) -> str:
    mark = _null_mark(t.nullable)
    if isinstance(t, CustomRef):
        return f"{name}{mark}.toJson()"
    if isinstance(t, EnumRef):
        return f"{name}{mark}.name"
    if t.kind is PrimitiveKind.INSTANT:
        return f"{name}{mark}.toIso8601String()"
    return name


def encode_expression(t: TypeDescriptor, name: str) -> str:
    """Expression converting the field `name` into a JSON value."""
    if isinstance(t, ListOf):
        if not needs_element_mapping(t.element):
            return name
        mapper = f"({_ELEMENT}) => {_encode_element(t.element, _ELEMENT)}"
        return f"{name}{_null_mark(t.nullable)}.map({mapper}).toList()"
    return _encode_element(t, name)


def equality_expression(t: TypeDescriptor, name: str) -> str:
    """Comparison of `other.name` with `name`; lists compare element-wise."""
    if isinstance(t, ListOf):
        return f"{LIST_EQUALS_HELPER}(other.{name}, {name})"
    return f"other.{name} == {name}"


def hash_expression(t: TypeDescriptor, name: str) -> str:
    """Hash contribution of one field, consistent with equality_expression."""
    if isinstance(t, ListOf):
        if t.nullable:
            return f"Object.hashAll({name} ?? const [])"
        return f"Object.hashAll({name})"
    return f"{name}.hashCode"
