"""Command-line interface for envbind.

Responsibilities:
- Expose user-facing commands for inspecting configuration sources.
- Map loader failures to concise stage-aware diagnostics.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_mapping, echo_mapping_json, exit_with_command_error
from .errors import CommandError
from .io.loader import load, resolve_source_path
from .parsing import format_value, normalize_optional_string
from .telemetry.logger import configure_logging

app = typer.Typer(
    name="envbind",
    no_args_is_help=True,
    help="Inspect env-style and YAML configuration files.",
)

_SOURCE_PATH_ENVVAR = "ENVBIND_FILE"


@app.callback()
def configure(
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            envvar="ENVBIND_LOG_LEVEL",
            help="Minimum log level for loader events (DEBUG, INFO, WARNING, ERROR).",
        ),
    ] = "WARNING",
) -> None:
    """Configure logging before running a command."""

    try:
        configure_logging(level=log_level)
    except ValueError:
        exit_with_command_error(
            "envbind",
            CommandError(
                stage="logging",
                detail=f"Unknown log level `{log_level}`.",
                hint="Use one of DEBUG, INFO, WARNING, ERROR.",
            ),
        )


@app.command("show")
def show_command(
    path: Annotated[
        Path | None,
        typer.Argument(
            envvar=_SOURCE_PATH_ENVVAR,
            help="Config file to read (defaults to `.env`).",
            show_default=False,
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the mapping as JSON."),
    ] = False,
) -> None:
    """Print every key/value pair read from a config file."""

    try:
        config = load(path)
    except Exception as exc:
        exit_with_command_error("show", exc)

    if as_json:
        echo_mapping_json(config)
    else:
        echo_mapping(config)


@app.command("get")
def get_command(
    key: Annotated[str, typer.Argument(help="Key to look up.")],
    path: Annotated[
        Path | None,
        typer.Argument(
            envvar=_SOURCE_PATH_ENVVAR,
            help="Config file to read (defaults to `.env`).",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Print the value stored under one key."""

    try:
        normalized_key = normalize_optional_string(key)
        if normalized_key is None:
            raise CommandError(
                stage="lookup",
                detail="Key must be a non-empty string.",
                hint="Pass the key exactly as written in the config file.",
            )
        config = load(path)
        if key not in config:
            raise CommandError(
                stage="lookup",
                detail=f"Key `{key}` not found in `{resolve_source_path(path)}`.",
                hint="Run `envbind show` to list available keys.",
            )
    except Exception as exc:
        exit_with_command_error("get", exc)

    typer.echo(format_value(config[key]))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
