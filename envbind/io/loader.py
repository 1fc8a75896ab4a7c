"""Configuration source loading entry points.

Key public functions:
- `load`: read a source file into a raw mapping, dispatching on file suffix.
- `load_into`: read a source file and bind it onto a dataclass record.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from ..binding.binder import bind
from ..errors import LoadError
from ..models.datatypes import RawValue
from ..telemetry.logger import EventLogger
from .env_reader import read_env_file
from .yaml_reader import read_yaml_file

DEFAULT_ENV_PATH = Path(".env")
_YAML_SUFFIXES = frozenset({".yml", ".yaml"})

_logger = EventLogger("load")


def resolve_source_path(path: str | os.PathLike[str] | None) -> Path:
    """Return the source path, defaulting to `.env` when none is given."""

    if path is None or str(path) == "":
        return DEFAULT_ENV_PATH
    return Path(path)


def load(path: str | os.PathLike[str] | None = None) -> dict[str, RawValue]:
    """Load a configuration source into a raw key/value mapping.

    Files with a `.yml`/`.yaml` suffix are read as YAML; everything else is
    read as an env-style `key=value` file.

    Raises:
        LoadError: If the file cannot be read, is not UTF-8, or its YAML content
            is invalid.
    """

    source_path = resolve_source_path(path)
    try:
        if source_path.suffix.lower() in _YAML_SUFFIXES:
            config: dict[str, RawValue] = read_yaml_file(source_path)
        else:
            config = dict(read_env_file(source_path))
    except FileNotFoundError as exc:
        _logger.log_failure(type(exc).__name__, source=source_path)
        raise LoadError(
            path=str(source_path),
            detail=f"Config file not found: `{source_path}`.",
            hint="Pass an existing file path or create `.env` in the working directory.",
        ) from exc
    except OSError as exc:
        _logger.log_failure(type(exc).__name__, source=source_path)
        raise LoadError(
            path=str(source_path),
            detail=f"Failed to read config file `{source_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc
    except UnicodeDecodeError as exc:
        _logger.log_failure(type(exc).__name__, source=source_path)
        raise LoadError(
            path=str(source_path),
            detail=f"Config file `{source_path}` is not valid UTF-8: {exc}",
            hint="Re-save the file with UTF-8 encoding.",
        ) from exc
    except (ValueError, yaml.YAMLError) as exc:
        _logger.log_failure(type(exc).__name__, source=source_path)
        raise LoadError(
            path=str(source_path),
            detail=f"Invalid config file `{source_path}`: {exc}",
            hint="Verify YAML syntax and that the document root is a mapping.",
        ) from exc

    _logger.log_source_loaded(source_path, len(config))
    return config


def load_into(path: str | os.PathLike[str] | None, destination: object) -> None:
    """Load a configuration source and bind it onto `destination`.

    Raises:
        LoadError: If the source cannot be loaded.
        BindError: If binding fails; see `envbind.binding.bind`.
        ValueError: If a text literal fails to parse for its field.
    """

    bind(load(path), destination)
