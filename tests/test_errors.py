"""Tests for struct_core.errors."""

from struct_core.errors import (
    InvalidStructuralTypeError,
    ReadOnlyStructureError,
    StructCoreError,
    StructureLoadError,
    describe_type,
)


class Thing:
    pass


class TestDescribeType:
    def test_none(self):
        assert describe_type(None) == "NoneType"

    def test_scalars(self):
        assert describe_type(3) == "int"
        assert describe_type(2.5) == "float"
        assert describe_type(False) == "bool"

    def test_text(self):
        assert describe_type("hello") == "str of length 5"
        assert describe_type(b"") == "bytes of length 0"

    def test_object(self):
        assert describe_type(Thing()) == "object of type Thing"

    def test_sized_object(self):
        assert describe_type([1, 2]) == "object of type list (size 2)"


class TestWithTypeInfo:
    def test_carries_value_and_info(self):
        err = InvalidStructuralTypeError.with_type_info(7)
        assert err.value == 7
        assert err.type_info == "int"
        assert str(err) == "Invalid structural type: int"


class TestHierarchy:
    def test_all_derive_from_root(self):
        for cls in (InvalidStructuralTypeError, ReadOnlyStructureError, StructureLoadError):
            assert issubclass(cls, StructCoreError)

    def test_type_errors(self):
        assert issubclass(InvalidStructuralTypeError, TypeError)
        assert issubclass(ReadOnlyStructureError, TypeError)
