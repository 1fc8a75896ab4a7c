"""Structural binder: project a raw mapping onto a dataclass record.

Responsibilities:
- Resolve each field's source key from its tag or declared name.
- Recurse into nested dataclass fields backed by non-empty nested mappings.
- Apply `default=` values and enforce `required` fields.
- Coerce source values into each field's static type.

Binding is fail-fast: the first error aborts the pass and fields bound before
it keep their new values.

Nested records are only bound from nested mappings. Flattened dotted keys
such as `"database.host"` are not resolved onto nested records.
"""

from __future__ import annotations

from typing import Mapping

from ..errors import RequiredFieldMissingError
from ..models.datatypes import FieldDescriptor, FieldKind, RawMapping
from .coercion import coerce_default, coerce_value
from .directives import parse_directive
from .fields import describe_fields, ensure_record


def bind(data: RawMapping, destination: object) -> None:
    """Bind `data` onto the fields of the dataclass instance `destination`.

    Args:
        data: Source mapping of string keys to loosely-typed values. Not mutated.
        destination: Mutable dataclass instance receiving the values.

    Raises:
        NotAReferenceError: If `destination` is not a mutable object handle.
        NotARecordError: If `destination` is not a dataclass instance.
        RequiredFieldMissingError: If a `required` field has no source key.
        TypeNotConvertibleError: If a source value cannot reach a field's type.
        UnsupportedFieldTypeError: If a bound field has an unsupported type.
        ValueError: If a text literal fails to parse for its field.
    """

    ensure_record(destination)

    for descriptor in describe_fields(type(destination), destination):
        if not descriptor.settable:
            continue

        directive = parse_directive(descriptor.tag)
        key = directive.resolve_key(descriptor.name)

        if descriptor.kind is FieldKind.RECORD:
            _bind_nested(data, key, destination, descriptor)
            continue

        if key not in data:
            if directive.default is not None:
                setattr(
                    destination,
                    descriptor.name,
                    coerce_default(descriptor.kind, descriptor.field_type, directive.default),
                )
            if directive.required:
                raise RequiredFieldMissingError(field_name=descriptor.name, key=key)
            continue

        setattr(
            destination,
            descriptor.name,
            coerce_value(descriptor.kind, descriptor.field_type, data[key]),
        )


def _bind_nested(
    data: RawMapping,
    key: str,
    destination: object,
    descriptor: FieldDescriptor,
) -> None:
    """Recurse into a nested record field when a non-empty mapping backs it."""

    nested_data = data.get(key)
    if not isinstance(nested_data, Mapping) or not nested_data:
        return
    bind(nested_data, getattr(destination, descriptor.name))
