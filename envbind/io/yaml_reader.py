"""YAML reader producing typed scalars and nested mappings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml


def parse_yaml_text(raw_text: str, source: object = "<memory>") -> dict[str, Any]:
    """Parse YAML text and enforce a mapping root payload.

    Raises:
        ValueError: If the document root is not a mapping.
        yaml.YAMLError: If the text is not valid YAML.
    """

    payload = yaml.safe_load(raw_text)
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValueError(f"YAML source `{source}` must contain a top-level mapping/object.")
    return {str(key): value for key, value in payload.items()}


def read_yaml_file(path: Path) -> dict[str, Any]:
    """Read a YAML file into a raw mapping.

    Raises:
        OSError: If the file cannot be opened or read.
        ValueError: If the document root is not a mapping.
        yaml.YAMLError: If the file is not valid YAML.
    """

    return parse_yaml_text(path.read_text(encoding="utf-8"), source=path)
