"""Telemetry and observability helpers.

This package emits structured loader and CLI events for diagnostics.
"""

from .logger import EventLogger, configure_logging, format_event

__all__ = ["EventLogger", "configure_logging", "format_event"]
