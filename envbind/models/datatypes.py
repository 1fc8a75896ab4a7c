"""Core datatypes shared across envbind modules.

Responsibilities:
- Describe the loosely-typed values a loader can produce.
- Represent per-field binding metadata derived from dataclass records.

Key types:
- `RawValue`, `RawMapping`: closed value union and string-keyed source mapping.
- `FieldKind`: closed set of field kinds the binder understands.
- `BindingDirective`: parsed `name,required,default=...` field tag.
- `FieldDescriptor`: one introspected dataclass field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

RawValue = Union[str, int, bool, float, Mapping[str, "RawValue"]]
RawMapping = Mapping[str, RawValue]


class FieldKind(Enum):
    """Static kind of a record field as seen by the coercion engine."""

    TEXT = "text"
    INTEGER = "int"
    BOOLEAN = "bool"
    FLOAT = "float"
    RECORD = "record"
    UNSUPPORTED = "unsupported"

    @property
    def is_scalar(self) -> bool:
        """Return whether the kind is one of the four coercible scalar kinds."""

        return self in _SCALAR_KINDS


_SCALAR_KINDS = frozenset(
    {FieldKind.TEXT, FieldKind.INTEGER, FieldKind.BOOLEAN, FieldKind.FLOAT}
)


@dataclass(frozen=True, slots=True)
class BindingDirective:
    """Binding metadata parsed from a field tag.

    Attributes:
        name: Source key override; empty string when the declared name is used.
        required: Whether a missing key is an error.
        default: Text literal applied when the key is missing, if any.
    """

    name: str = ""
    required: bool = False
    default: str | None = None

    def resolve_key(self, field_name: str) -> str:
        """Return the source key for a field with the given declared name."""

        return self.name or field_name


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """One field of a destination record.

    Attributes:
        name: Declared attribute name.
        field_type: Resolved static type annotation.
        kind: Coercion kind derived from `field_type`.
        settable: Whether the binder may write the field.
        tag: Raw binding tag string, empty when the field has none.
    """

    name: str
    field_type: object
    kind: FieldKind
    settable: bool
    tag: str = ""
