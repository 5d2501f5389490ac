"""Tests for the type_resolver module."""

from flugen.models import (
    CustomRef,
    EnumRef,
    FieldOptions,
    ListOf,
    Primitive,
    PrimitiveKind,
)
from flugen.type_resolver import resolve_type

_ENUM = FieldOptions(force_enum=True)


class TestPrimitives:

    def test_int(self):
        assert resolve_type("int") == Primitive(PrimitiveKind.INTEGER)

    def test_nullable_int(self):
        assert resolve_type("int?") == Primitive(PrimitiveKind.INTEGER, nullable=True)

    def test_double(self):
        assert resolve_type("double") == Primitive(PrimitiveKind.FLOATING)

    def test_bool(self):
        assert resolve_type("bool?") == Primitive(PrimitiveKind.BOOLEAN, nullable=True)

    def test_string(self):
        assert resolve_type("String") == Primitive(PrimitiveKind.TEXT)

    def test_datetime(self):
        assert resolve_type("DateTime?") == Primitive(PrimitiveKind.INSTANT, nullable=True)

    def test_dynamic_never_nullable(self):
        """dynamic already accepts null; the sigil is dropped."""
        assert resolve_type("dynamic?") == Primitive(PrimitiveKind.DYNAMIC, nullable=False)

    def test_surrounding_whitespace(self):
        assert resolve_type(" int ") == Primitive(PrimitiveKind.INTEGER)


class TestReferences:

    def test_unknown_is_custom(self):
        assert resolve_type("Address") == CustomRef("Address")

    def test_nullable_custom(self):
        assert resolve_type("Address?") == CustomRef("Address", nullable=True)

    def test_lowercase_unknown_is_custom(self):
        assert resolve_type("num") == CustomRef("num")

    def test_forced_enum(self):
        assert resolve_type("Status", _ENUM) == EnumRef("Status")

    def test_forced_enum_nullable(self):
        assert resolve_type("Status?", _ENUM) == EnumRef("Status", nullable=True)

    def test_forced_enum_overrides_vocabulary(self):
        assert resolve_type("String", _ENUM) == EnumRef("String")

    def test_options_without_enum_flag(self):
        opts = FieldOptions(json_key="addr")
        assert resolve_type("Address", opts) == CustomRef("Address")


class TestLists:

    def test_list_of_int(self):
        assert resolve_type("List<int>") == ListOf(Primitive(PrimitiveKind.INTEGER))

    def test_nullability_tracked_independently(self):
        assert resolve_type("List<Item?>") == ListOf(CustomRef("Item", nullable=True))
        assert resolve_type("List<Item>?") == ListOf(CustomRef("Item"), nullable=True)
        assert resolve_type("List<Item?>?") == ListOf(
            CustomRef("Item", nullable=True), nullable=True
        )

    def test_list_of_forced_enum(self):
        assert resolve_type("List<Status>", _ENUM) == ListOf(EnumRef("Status"))

    def test_nested_list_is_not_unwrapped(self):
        assert resolve_type("List<List<int>>") == ListOf(CustomRef("List<int>"))

    def test_pure(self):
        assert resolve_type("List<Item>?") == resolve_type("List<Item>?")
