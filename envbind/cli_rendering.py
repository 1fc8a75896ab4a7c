"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and raw mapping listings.
"""

from __future__ import annotations

import json
from typing import Mapping, NoReturn

import typer

from .errors import CommandError, LoadError
from .parsing import format_value


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, LoadError):
        typer.secho(
            f"{command_name} failed at stage `load`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_mapping(config: Mapping[str, object]) -> None:
    """Print `key=value` rows in deterministic key order."""

    for key in sorted(config):
        typer.echo(f"{key}={format_value(config[key])}")


def echo_mapping_json(config: Mapping[str, object]) -> None:
    """Print the mapping as sorted, indented JSON."""

    typer.echo(json.dumps(config, ensure_ascii=False, indent=2, sort_keys=True, default=str))
