"""Shared typed data models for envbind.

This package contains the value aliases and dataclasses used by the loader
and the binder to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    BindingDirective,
    FieldDescriptor,
    FieldKind,
    RawMapping,
    RawValue,
)

__all__ = [
    "BindingDirective",
    "FieldDescriptor",
    "FieldKind",
    "RawMapping",
    "RawValue",
]
