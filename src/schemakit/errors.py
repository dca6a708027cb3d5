# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while assembling and migrating provider schemas."""

from __future__ import annotations

from typing import Literal

CollisionKind = Literal["field", "resource", "data source"]


class SchemaError(Exception):
    """Base class for errors raised by :mod:`schemakit`."""


class SchemaAssemblyError(SchemaError, RuntimeError):
    """Raised when the provider schema cannot be assembled.

    Assembly errors are programming mistakes made while the provider is being
    built. They are not meant to be caught and retried.
    """


class SchemaCollisionError(SchemaAssemblyError):
    """Raised when a contribution reuses a name already present in a map."""

    def __init__(self, kind: CollisionKind, name: str) -> None:
        """Create the collision error for the duplicate ``name``.

        Args:
            kind: Kind of map entry that collided.
            name: Duplicate key contributed to the map.
        """

        self.kind = kind
        self.name = name
        if kind == "field":
            message = f"cannot add schema field '{name}', already exists in the schema map"
        else:
            message = f"cannot add {kind}, {kind} map already contains '{name}'"
        super().__init__(message)


class StateUpgradeError(SchemaError):
    """Raised when persisted state cannot be migrated to the current version."""


class TargetResolutionError(SchemaError):
    """Raised when a ``module:attribute`` schema target cannot be resolved."""


__all__ = (
    "CollisionKind",
    "SchemaAssemblyError",
    "SchemaCollisionError",
    "SchemaError",
    "StateUpgradeError",
    "TargetResolutionError",
)
