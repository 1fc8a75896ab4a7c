"""Mapping-to-record binding components.

This package contains directive parsing, dataclass field introspection, value
coercion, and the structural `bind` entry point.
"""

from .binder import bind
from .coercion import coerce_default, coerce_value
from .directives import TAG_METADATA_KEY, field_tag, parse_directive, tagged
from .fields import classify_field_type, describe_fields, ensure_record

__all__ = [
    "TAG_METADATA_KEY",
    "bind",
    "classify_field_type",
    "coerce_default",
    "coerce_value",
    "describe_fields",
    "ensure_record",
    "field_tag",
    "parse_directive",
    "tagged",
]
