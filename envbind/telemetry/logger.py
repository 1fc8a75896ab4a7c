"""Structured event logging utilities.

Responsibilities:
- Emit concise, deterministic single-line events through `loguru`.
- Keep library logging disabled until an application opts in.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE_NAME = "envbind"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def format_event(level: str, stage: str, event: str, **context: object) -> str:
    """Render one structured event line."""

    return f"[envbind] level={level} stage={stage} event={event}{_format_context(context)}"


def configure_logging(sink: TextIO | None = None, level: str = "WARNING") -> int:
    """Enable envbind logging and route it to a single sink.

    Returns:
        The `loguru` handler id, usable with `logger.remove`.
    """

    logger.remove()
    logger.enable(_PACKAGE_NAME)
    return logger.add(
        sink or sys.stderr,
        format="{message}",
        level=level.upper(),
        colorize=False,
    )


class EventLogger:
    """Emit deterministic stage events for loader and CLI activity."""

    def __init__(self, stage: str) -> None:
        self._stage = stage

    def _emit(self, level: str, event: str, **context: object) -> None:
        logger.log(level, format_event(level, self._stage, event, **context))

    def log_line_skipped(self, source: object, line_number: int, reason: str) -> None:
        """Emit a debug event for a discarded source line."""

        self._emit("DEBUG", "skip", source=source, line=line_number, reason=reason)

    def log_source_loaded(self, source: object, key_count: int) -> None:
        """Emit a source-complete event."""

        self._emit("INFO", "complete", source=source, keys=key_count)

    def log_failure(self, error_type: str, **context: object) -> None:
        """Emit a failure event without sensitive payload details."""

        self._emit("ERROR", "failure", error_type=error_type, **context)
