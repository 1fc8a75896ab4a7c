"""Coercion of loosely-typed source values into record field types.

Two entry points share the same target kinds:

- `coerce_default` converts the text literal of a `default=` directive.
- `coerce_value` converts a value taken from the source mapping, which may be
  text or, for richer sources, a native scalar or a nested mapping.

Literal parse failures surface as plain `ValueError`.
"""

from __future__ import annotations

from ..errors import TypeNotConvertibleError, UnsupportedFieldTypeError
from ..models.datatypes import FieldKind, RawValue
from ..parsing import format_value, parse_bool, parse_float, parse_int


def coerce_default(kind: FieldKind, field_type: object, value: str) -> object:
    """Convert a default-value literal into the field's type.

    Raises:
        UnsupportedFieldTypeError: For record and unsupported field kinds.
        ValueError: If `value` is not a valid literal for the kind.
    """

    if not kind.is_scalar:
        raise UnsupportedFieldTypeError(field_type=field_type, default_field=True)
    if kind is FieldKind.TEXT:
        return value
    if kind is FieldKind.INTEGER:
        return parse_int(value)
    if kind is FieldKind.BOOLEAN:
        return parse_bool(value)
    return parse_float(value)


def coerce_value(kind: FieldKind, field_type: object, value: RawValue) -> object:
    """Convert a source-mapping value into the field's type.

    Raises:
        TypeNotConvertibleError: If the value's type has no path to the kind.
        UnsupportedFieldTypeError: For record and unsupported field kinds.
        ValueError: If a text value is not a valid literal for the kind.
    """

    if not kind.is_scalar:
        raise UnsupportedFieldTypeError(field_type=field_type, default_field=False)
    if kind is FieldKind.TEXT:
        return _to_text(value)
    if kind is FieldKind.INTEGER:
        return _to_int(value)
    if kind is FieldKind.BOOLEAN:
        return _to_bool(value)
    return _to_float(value)


def _to_text(value: RawValue) -> str:
    if isinstance(value, str):
        return value
    return format_value(value)


def _to_int(value: RawValue) -> int:
    # bool is an int subclass; it is not an integer source.
    if isinstance(value, bool):
        raise TypeNotConvertibleError(target="int", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return parse_int(value)
    raise TypeNotConvertibleError(target="int", value=value)


def _to_bool(value: RawValue) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value)
    raise TypeNotConvertibleError(target="bool", value=value)


def _to_float(value: RawValue) -> float:
    if isinstance(value, bool):
        raise TypeNotConvertibleError(target="float", value=value)
    if isinstance(value, (float, int)):
        return float(value)
    if isinstance(value, str):
        return parse_float(value)
    raise TypeNotConvertibleError(target="float", value=value)
