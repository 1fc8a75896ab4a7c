"""Unit tests for destination checks and dataclass field introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from envbind.binding.directives import tagged
from envbind.binding.fields import classify_field_type, describe_fields, ensure_record
from envbind.errors import NotARecordError, NotAReferenceError
from envbind.models.datatypes import FieldKind

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class Inner:
    value: str = ""


@dataclass
class Outer:
    name: str = tagged("display_name", default="")
    count: int = 0
    enabled: bool = False
    ratio: float = 0.0
    inner: Inner = field(default_factory=Inner)
    tags: list = field(default_factory=list)
    _hidden: str = "secret"


@dataclass
class WithCheckingOnlyTypes:
    name: str = ""
    amount: Decimal | None = None
    _cache: Decimal | None = None


@dataclass(frozen=True)
class Frozen:
    name: str = ""


class PlainObject:
    name = ""


def test_describe_fields_resolves_kinds_in_declaration_order() -> None:
    """Descriptors should follow declaration order and resolve postponed annotations."""

    descriptors = describe_fields(Outer)

    assert [descriptor.name for descriptor in descriptors] == [
        "name",
        "count",
        "enabled",
        "ratio",
        "inner",
        "tags",
        "_hidden",
    ]
    assert [descriptor.kind for descriptor in descriptors] == [
        FieldKind.TEXT,
        FieldKind.INTEGER,
        FieldKind.BOOLEAN,
        FieldKind.FLOAT,
        FieldKind.RECORD,
        FieldKind.UNSUPPORTED,
        FieldKind.UNSUPPORTED,
    ]
    assert descriptors[0].tag == "display_name"
    assert descriptors[4].field_type is Inner


def test_describe_fields_marks_underscore_fields_unsettable() -> None:
    """Only underscore-prefixed fields should be reported as not settable."""

    settable = {descriptor.name: descriptor.settable for descriptor in describe_fields(Outer)}

    assert settable["_hidden"] is False
    assert all(value for name, value in settable.items() if name != "_hidden")


def test_classify_field_type_keeps_bool_apart_from_int() -> None:
    """`bool` should classify as boolean even though it subclasses `int`."""

    assert classify_field_type(bool) is FieldKind.BOOLEAN
    assert classify_field_type(int) is FieldKind.INTEGER
    assert classify_field_type(dict) is FieldKind.UNSUPPORTED
    assert classify_field_type("str") is FieldKind.UNSUPPORTED
    assert FieldKind.FLOAT.is_scalar is True
    assert FieldKind.RECORD.is_scalar is False


@pytest.mark.parametrize("destination", [None, 5, 2.5, True, "text", b"raw", (1,), Outer])
def test_ensure_record_rejects_non_references(destination: object) -> None:
    """Immutable values, `None`, and classes should fail the reference check."""

    with pytest.raises(NotAReferenceError):
        ensure_record(destination)


def test_ensure_record_rejects_frozen_dataclass_instances() -> None:
    """Frozen dataclass instances cannot be written and should fail as non-references."""

    with pytest.raises(NotAReferenceError):
        ensure_record(Frozen())


@pytest.mark.parametrize("destination", [[5], {"name": "x"}, PlainObject()])
def test_ensure_record_rejects_mutable_non_records(destination: object) -> None:
    """Mutable objects that are not dataclass instances should fail the record check."""

    with pytest.raises(NotARecordError):
        ensure_record(destination)


def test_ensure_record_accepts_mutable_dataclass_instance() -> None:
    """A regular dataclass instance should pass both checks."""

    ensure_record(Outer())


def test_describe_fields_keeps_unresolvable_annotations_as_unsupported() -> None:
    """Names only visible to type checkers should not abort field description."""

    descriptors = {
        descriptor.name: descriptor for descriptor in describe_fields(WithCheckingOnlyTypes)
    }

    assert descriptors["name"].kind is FieldKind.TEXT
    assert descriptors["amount"].kind is FieldKind.UNSUPPORTED
    assert descriptors["amount"].field_type == "Decimal | None"
    assert descriptors["_cache"].settable is False
    assert descriptors["_cache"].field_type == "Decimal | None"


def test_describe_fields_resolves_locally_declared_nested_record_from_instance() -> None:
    """A nested record declared inside a function should resolve from the field's value."""

    @dataclass
    class LocalInner:
        host: str = ""

    @dataclass
    class LocalOuter:
        inner: LocalInner = field(default_factory=LocalInner)

    without_instance = describe_fields(LocalOuter)
    with_instance = describe_fields(LocalOuter, LocalOuter())

    assert without_instance[0].kind is FieldKind.UNSUPPORTED
    assert with_instance[0].kind is FieldKind.RECORD
    assert with_instance[0].field_type is LocalInner
