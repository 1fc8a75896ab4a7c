"""Binding directive parsing and dataclass field tagging.

A directive is a comma-separated tag attached to a dataclass field:
`"<name>,required,default=<value>"`. Every token is optional; the first token
is always read as the name override, so a tag that only sets flags starts
with a comma (`",required"`). Unknown tokens are ignored.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from ..models.datatypes import BindingDirective

TAG_METADATA_KEY = "envbind"

_REQUIRED_TOKEN = "required"
_DEFAULT_PREFIX = "default="


def parse_directive(tag: str) -> BindingDirective:
    """Parse a raw field tag into a `BindingDirective`."""

    tokens = tag.split(",")
    default: str | None = None
    for token in tokens:
        if token.startswith(_DEFAULT_PREFIX):
            default = token[len(_DEFAULT_PREFIX):] or None
            break

    return BindingDirective(
        name=tokens[0],
        required=_REQUIRED_TOKEN in tokens,
        default=default,
    )


def tagged(tag: str, **field_kwargs: Any) -> Any:
    """Declare a dataclass field carrying a binding tag.

    Extra keyword arguments are forwarded to `dataclasses.field`, so the
    field's own initial value is still given with `default=` or
    `default_factory=`.
    """

    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[TAG_METADATA_KEY] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)


def field_tag(field: dataclasses.Field) -> str:
    """Return the binding tag stored on a dataclass field, or an empty string."""

    return str(field.metadata.get(TAG_METADATA_KEY, ""))
