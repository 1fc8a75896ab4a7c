"""Top-level package for envbind.

This package loads env-style (and YAML) configuration files into a raw
mapping and binds that mapping onto typed dataclass records. The main entry
points are `load`, `bind`, and `load_into`.
"""

from loguru import logger

from .binding import bind, parse_directive, tagged
from .errors import (
    BindError,
    LoadError,
    NotARecordError,
    NotAReferenceError,
    RequiredFieldMissingError,
    TypeNotConvertibleError,
    UnsupportedFieldTypeError,
)
from .io import load, load_into

logger.disable(__name__)

__all__ = [
    "BindError",
    "LoadError",
    "NotARecordError",
    "NotAReferenceError",
    "RequiredFieldMissingError",
    "TypeNotConvertibleError",
    "UnsupportedFieldTypeError",
    "__version__",
    "bind",
    "load",
    "load_into",
    "parse_directive",
    "tagged",
]

__version__ = "0.1.0"
