"""Destination checks and field introspection for dataclass records."""

from __future__ import annotations

import dataclasses
import inspect
import typing

from ..errors import NotARecordError, NotAReferenceError
from ..models.datatypes import FieldDescriptor, FieldKind
from .directives import field_tag

_IMMUTABLE_VALUE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    range,
)
_SCALAR_FIELD_KINDS = {
    str: FieldKind.TEXT,
    int: FieldKind.INTEGER,
    bool: FieldKind.BOOLEAN,
    float: FieldKind.FLOAT,
}


def ensure_record(destination: object) -> None:
    """Validate that `destination` is a writable dataclass instance.

    Reference-ness is checked before record-ness.

    Raises:
        NotAReferenceError: For `None`, immutable values, classes, and
            instances of frozen dataclasses.
        NotARecordError: For any other object that is not a dataclass instance.
    """

    if (
        destination is None
        or isinstance(destination, type)
        or isinstance(destination, _IMMUTABLE_VALUE_TYPES)
    ):
        raise NotAReferenceError(destination)
    if not dataclasses.is_dataclass(destination):
        raise NotARecordError(destination)
    if type(destination).__dataclass_params__.frozen:
        raise NotAReferenceError(destination)


def classify_field_type(field_type: object) -> FieldKind:
    """Map a resolved annotation to the `FieldKind` the coercion engine uses."""

    for scalar_type, kind in _SCALAR_FIELD_KINDS.items():
        if field_type is scalar_type:
            return kind
    if isinstance(field_type, type) and dataclasses.is_dataclass(field_type):
        return FieldKind.RECORD
    return FieldKind.UNSUPPORTED


def describe_fields(record_type: type, instance: object | None = None) -> list[FieldDescriptor]:
    """Enumerate a dataclass type's fields in declaration order.

    Annotations of settable fields are resolved one field at a time, so
    records declared under `from __future__ import annotations` are described
    by their real types. Fields whose names start with an underscore are not
    settable and keep their raw annotation.

    An annotation naming something outside the record module's globals (a
    `TYPE_CHECKING` import, a record declared inside a function) keeps its raw
    string and classifies as unsupported. When `instance` is given and the
    field currently holds a dataclass instance of the named class, that class
    is used instead.
    """

    descriptors: list[FieldDescriptor] = []
    for field in dataclasses.fields(record_type):
        settable = not field.name.startswith("_")
        field_type = field.type
        if settable:
            field_type = _resolve_field_type(record_type, field, instance)
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                field_type=field_type,
                kind=classify_field_type(field_type),
                settable=settable,
                tag=field_tag(field),
            )
        )
    return descriptors


def _resolve_field_type(
    record_type: type, field: dataclasses.Field, instance: object | None
) -> object:
    """Resolve one field's annotation, falling back to the raw annotation."""

    if not isinstance(field.type, str):
        return field.type

    owner = next(
        (
            klass
            for klass in record_type.__mro__
            if field.name in inspect.get_annotations(klass)
        ),
        record_type,
    )
    holder = type(
        owner.__name__,
        (),
        {"__annotations__": {field.name: field.type}, "__module__": owner.__module__},
    )
    try:
        return typing.get_type_hints(
            holder, localns={owner.__name__: owner, record_type.__name__: record_type}
        )[field.name]
    except NameError:
        current = getattr(instance, field.name, None) if instance is not None else None
        if (
            dataclasses.is_dataclass(current)
            and not isinstance(current, type)
            and type(current).__name__ == field.type.strip()
        ):
            return type(current)
        return field.type
