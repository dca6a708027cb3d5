# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the schema inspection commands."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..builder import ProviderSchema
from ..model_field import FieldSchema
from ..model_resource import ResourceSchema


def build_resources_table(schema: ProviderSchema) -> Table:
    """Return a rich table summarising every registered resource.

    Args:
        schema: Provider schema to summarise.

    Returns:
        Table: Rich table with one row per resource type.
    """

    table = Table(title="Resources", box=box.SIMPLE, expand=True)
    table.add_column("Type", style="bold", no_wrap=True)
    table.add_column("Version", justify="right")
    table.add_column("Upgraders")
    table.add_column("Fields", justify="right")
    table.add_column("Force New", overflow="fold")

    for name in schema.resource_names:
        resource = schema.resource(name)
        upgraders = ", ".join(f"v{upgrader.version}" for upgrader in resource.state_upgraders) or "-"
        force_new = ", ".join(sorted(key for key, spec in resource.fields.items() if spec.force_new)) or "-"
        table.add_row(name, str(resource.schema_version), upgraders, str(len(resource.fields)), force_new)
    return table


def build_fields_table(name: str, resource: ResourceSchema) -> Table:
    """Return a rich table describing the fields of ``resource``.

    Args:
        name: Resource type name used as the table title.
        resource: Resource definition to describe.

    Returns:
        Table: Rich table with one row per field.
    """

    table = Table(title=f"{name} (version {resource.schema_version})", box=box.SIMPLE, expand=True)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Type")
    table.add_column("Mode")
    table.add_column("Default")
    table.add_column("Force New")
    table.add_column("Description", overflow="fold")

    for key in sorted(resource.fields):
        spec = resource.fields[key]
        default = "-" if spec.default is None else repr(spec.default)
        table.add_row(
            key,
            spec.field_type.value,
            _mode(spec),
            default,
            _yes_no(spec.force_new),
            spec.description or "-",
        )
    return table


def _mode(spec: FieldSchema) -> str:
    """Return the configuration mode label shown for ``spec``.

    Args:
        spec: Field definition being rendered.

    Returns:
        str: ``required``, ``optional``, ``optional+computed`` or ``computed``.
    """

    if spec.required:
        return "required"
    if spec.optional:
        return "optional+computed" if spec.computed else "optional"
    return "computed"


def _yes_no(value: bool) -> str:
    """Return a table cell label for a boolean flag.

    Args:
        value: Flag to render.

    Returns:
        str: ``yes`` when ``value`` is true, otherwise ``no``.
    """

    return "yes" if value else "no"


__all__ = ["build_fields_table", "build_resources_table"]
