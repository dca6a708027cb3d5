# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for inspecting schemas and upgrading state."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..builder import ProviderSchema
from ..config import ProviderConfig, ProviderMetadata
from ..errors import SchemaAssemblyError, StateUpgradeError, TargetResolutionError
from ..logging import configure_verbose_logging, info, ok, warn
from ..upgrade import apply_state_upgrades
from .rendering import build_fields_table, build_resources_table
from .targets import resolve_schema_target

app = typer.Typer(
    name="schemakit",
    help="Inspect composed provider schemas and migrate persisted state.",
    no_args_is_help=True,
    add_completion=False,
)

ERROR_CONSOLE_WIDTH = 240


def _error_console() -> Console:
    """Return the console used for status and error output.

    Returns:
        Console: Console bound to stderr, wide enough that file paths in
        error panels stay on one line.
    """

    return Console(stderr=True, width=ERROR_CONSOLE_WIDTH)


def _exit_with_error(message: str, *, cause: BaseException | None = None) -> NoReturn:
    """Render ``message`` in a red error panel and exit with status 1.

    Args:
        message: Plain-text description of the failure; never parsed as markup.
        cause: Exception chained onto the raised :class:`typer.Exit`.

    Raises:
        typer.Exit: Always, with exit code 1.
    """

    _error_console().print(Panel(Text(message, style="red"), border_style="red", expand=False))
    raise typer.Exit(code=1) from cause


def _load_schema(target: str) -> ProviderSchema:
    """Resolve ``target`` or exit with status 1 when it cannot be built."""

    try:
        return resolve_schema_target(target)
    except (TargetResolutionError, SchemaAssemblyError) as exc:
        _exit_with_error(str(exc), cause=exc)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logging to stderr."),
) -> None:
    """Inspect composed provider schemas and migrate persisted state."""
    if verbose:
        configure_verbose_logging()


@app.command("describe")
def describe(
    target: str = typer.Argument(..., help="Schema reference as 'package.module:attribute'."),
    resource: str | None = typer.Option(None, "--resource", "-r", help="Show the fields of one resource type."),
) -> None:
    """Render the resources registered in a provider schema."""
    schema = _load_schema(target)
    console = Console(soft_wrap=True)

    if resource is None:
        if not schema.resources:
            warn(_error_console(), "No resources registered")
            return
        console.print(build_resources_table(schema))
        return

    try:
        definition = schema.resource(resource)
    except KeyError as exc:
        _exit_with_error(f"Unknown resource type '{resource}'", cause=exc)
    console.print(build_fields_table(resource, definition))


@app.command("upgrade-state")
def upgrade_state(
    target: str = typer.Argument(..., help="Schema reference as 'package.module:attribute'."),
    resource: str = typer.Argument(..., help="Resource type owning the state."),
    state_file: Path = typer.Argument(..., help="JSON file holding the raw persisted state."),
    from_version: int = typer.Option(0, "--from-version", help="Schema version the state was written with."),
    namespace: str | None = typer.Option(
        None,
        "--namespace",
        help="Provider namespace; defaults to SCHEMAKIT_NAMESPACE.",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the upgraded state to this file."),
) -> None:
    """Upgrade raw resource state to the current schema version."""
    schema = _load_schema(target)
    err_console = _error_console()

    try:
        definition = schema.resource(resource)
    except KeyError as exc:
        _exit_with_error(f"Unknown resource type '{resource}'", cause=exc)

    path = state_file.expanduser().resolve()
    if not path.is_file():
        _exit_with_error(f"state file '{state_file}' not found")
    try:
        raw_state = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        _exit_with_error(f"{state_file}: invalid JSON ({exc.msg})", cause=exc)
    except (OSError, UnicodeDecodeError) as exc:
        _exit_with_error(f"cannot read state file '{state_file}': {exc}", cause=exc)
    if not isinstance(raw_state, dict):
        _exit_with_error(f"{state_file}: state must be a JSON object")

    try:
        config = ProviderConfig.from_environment() if namespace is None else ProviderConfig(namespace=namespace)
    except ValidationError as exc:
        _exit_with_error(f"invalid provider configuration: {exc.errors()[0]['msg']}", cause=exc)

    if from_version == definition.schema_version:
        info(err_console, f"State already at version {from_version}")
    try:
        upgraded = apply_state_upgrades(
            definition,
            raw_state,
            from_version,
            ProviderMetadata.from_config(config),
        )
    except StateUpgradeError as exc:
        _exit_with_error(str(exc), cause=exc)

    payload = json.dumps(upgraded, indent=2, sort_keys=True)
    if output is None:
        typer.echo(payload)
    else:
        try:
            output.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            _exit_with_error(f"cannot write upgraded state to '{output}': {exc}", cause=exc)
    ok(err_console, f"Upgraded '{resource}' state to version {definition.schema_version}")


def run() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "run"]
