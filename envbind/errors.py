"""Domain exceptions for binding, loading, and CLI diagnostics."""

from __future__ import annotations

from .parsing import format_value


class BindError(Exception):
    """Base class for failures raised while binding a mapping onto a record."""


class NotAReferenceError(BindError, TypeError):
    """Raised when the destination is not a mutable object handle."""

    def __init__(self, destination: object) -> None:
        super().__init__(
            f"destination is not a mutable reference: {type(destination).__name__}"
        )
        self.destination = destination


class NotARecordError(BindError, TypeError):
    """Raised when the destination is not a dataclass record instance."""

    def __init__(self, destination: object) -> None:
        super().__init__(
            f"destination should be a dataclass instance: {type(destination).__name__}"
        )
        self.destination = destination


class RequiredFieldMissingError(BindError, LookupError):
    """Raised when a field tagged `required` has no key in the source mapping."""

    def __init__(self, *, field_name: str, key: str) -> None:
        super().__init__(f"required field missing: `{field_name}` (key `{key}`)")
        self.field_name = field_name
        self.key = key


class TypeNotConvertibleError(BindError, TypeError):
    """Raised when a source value has no coercion path to the target kind."""

    def __init__(self, *, target: str, value: object) -> None:
        super().__init__(f"cannot convert to {target}: {format_value(value)}")
        self.target = target
        self.value = value


class UnsupportedFieldTypeError(BindError, TypeError):
    """Raised when a field's static type is outside the supported kinds."""

    def __init__(self, *, field_type: object, default_field: bool) -> None:
        message = "unsupported field type"
        if default_field:
            message += " for default value"
        super().__init__(f"{message}: {_type_label(field_type)}")
        self.field_type = field_type
        self.default_field = default_field


class LoadError(RuntimeError):
    """Raised when a configuration source cannot be read."""

    def __init__(
        self,
        *,
        path: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a source-scoped load error."""

        super().__init__(detail)
        self.path = path
        self.detail = detail
        self.hint = hint


class CommandError(RuntimeError):
    """Raised when a CLI command fails at a named stage."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


def _type_label(field_type: object) -> str:
    if isinstance(field_type, type):
        return field_type.__qualname__
    return str(field_type)
