"""Input components for envbind.

This package contains the env-style and YAML source readers and the
`load`/`load_into` entry points.
"""

from .env_reader import parse_env_lines, parse_line, read_env_file
from .loader import DEFAULT_ENV_PATH, load, load_into, resolve_source_path
from .yaml_reader import parse_yaml_text, read_yaml_file

__all__ = [
    "DEFAULT_ENV_PATH",
    "load",
    "load_into",
    "parse_env_lines",
    "parse_line",
    "parse_yaml_text",
    "read_env_file",
    "read_yaml_file",
    "resolve_source_path",
]
