"""Shared literal parsing helpers for binding and CLI value normalization."""

from __future__ import annotations

import math
import re
from typing import Mapping


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "t", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "f", "false", "no", "off"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def format_value(value: object) -> str:
    """Render a loosely-typed value as text.

    Booleans render as lowercase `true`/`false` so that a value read from a
    YAML source round-trips through a text field the way it was written.
    Whole floats render without a fractional part (`3.0` -> `3`). Mappings
    render with their keys in sorted order.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        items = ", ".join(
            f"{format_value(key)}: {format_value(value[key])}"
            for key in sorted(value, key=str)
        )
        return "{" + items + "}"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _format_float(value: float) -> str:
    """Render a float in shortest form, without a trailing `.0` for whole values.

    Whole values below 1e21 render as integers (`3.0` -> `3`); larger and
    fractional values use the shortest round-trip form (`1e+21`, `1e-05`).
    Infinities and NaN render as `+Inf`, `-Inf`, and `NaN`.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer() and abs(value) < 1e21:
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def parse_int(text: str) -> int:
    """Parse a base-10 integer literal.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace and digit-group underscores are rejected.

    Raises:
        ValueError: If `text` is not a base-10 integer literal.
    """

    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text, 10)


def parse_float(text: str) -> float:
    """Parse a floating-point literal without surrounding whitespace.

    Raises:
        ValueError: If `text` is not a float literal.
    """

    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float literal: {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"invalid float literal: {text!r}") from exc


def parse_bool(text: str) -> bool:
    """Parse a boolean literal from accepted textual tokens.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    token = text.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    raise ValueError(
        f"invalid boolean literal {text!r} "
        "(`true`/`false`, `t`/`f`, `1`/`0`, `yes`/`no`, `on`/`off`)"
    )
