"""Line-oriented reader for env-style `key=value` / `key: value` sources.

Each line is trimmed and then either discarded or turned into exactly one
key/value pair. A line is discarded when it is blank, when its first
character is a comment, section, or separator marker, when splitting on `=`
and `:` does not leave exactly two non-empty parts, or when it is a
bracketed `[section]` header. The two parts are returned as split, without
further trimming, so `name = alice` yields `("name ", " alice")`.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from ..telemetry.logger import EventLogger

_INVALID_LINE_PREFIXES = frozenset("/!@#;:=[]")
_SEPARATOR_PATTERN = re.compile(r"[=:]")

_logger = EventLogger("load")


def _tokenize_line(line: str) -> tuple[tuple[str, str] | None, str]:
    """Return the key/value pair for a line, or `None` with a skip reason."""

    stripped = line.strip()
    if not stripped:
        return None, "blank"
    if stripped[0] in _INVALID_LINE_PREFIXES:
        return None, "marker"

    parts = [part for part in _SEPARATOR_PATTERN.split(stripped) if part]
    if len(parts) != 2:
        return None, "malformed"

    key, value = parts
    if key.startswith("[") and value.endswith("]"):
        return None, "section"
    return (key, value), "ok"


def parse_line(line: str) -> tuple[str, str] | None:
    """Tokenize one source line into a key/value pair, or `None` to skip it."""

    pair, _ = _tokenize_line(line)
    return pair


def parse_env_lines(lines: Iterable[str], source: object = "<memory>") -> dict[str, str]:
    """Collect key/value pairs from lines; later duplicates overwrite earlier ones."""

    config: dict[str, str] = {}
    for line_number, line in enumerate(lines, start=1):
        pair, reason = _tokenize_line(line)
        if pair is None:
            _logger.log_line_skipped(source, line_number, reason)
            continue
        key, value = pair
        config[key] = value
    return config


def read_env_file(path: Path) -> dict[str, str]:
    """Read an env-style file into a raw string mapping.

    Raises:
        OSError: If the file cannot be opened or read.
    """

    text = path.read_text(encoding="utf-8")
    return parse_env_lines(text.splitlines(), source=path)
