# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared ``disable_remount`` guard field and its default state upgrade."""

from __future__ import annotations

from .interfaces import ProviderMeta
from .merge import merge_schema_into
from .model_field import FieldSchema, FieldType
from .model_resource import ResourceSchema, StateUpgrader
from .types import FIELD_DISABLE_REMOUNT, RawState

DISABLE_REMOUNT_SCHEMA_VERSION = 1


def disable_remount_field() -> FieldSchema:
    """Return the boolean guard opting a mount out of path migration."""

    return FieldSchema(
        field_type=FieldType.BOOL,
        optional=True,
        default=False,
        description="If set, opts out of mount migration on path updates.",
    )


def add_mount_migration_support(resource: ResourceSchema, custom_state_upgrade: bool = False) -> ResourceSchema:
    """Add the ``disable_remount`` field to ``resource`` in place.

    Unless ``custom_state_upgrade`` is set, the default version 0 upgrader is
    installed and the schema version becomes 1. Resources with their own
    upgrade chain pass ``True`` and register the version bump themselves.

    Args:
        resource: Resource definition to augment.
        custom_state_upgrade: Whether the caller supplies its own upgraders.

    Returns:
        ResourceSchema: The same ``resource`` instance.

    Raises:
        SchemaCollisionError: If ``resource`` already defines ``disable_remount``.
    """

    merge_schema_into(resource, {FIELD_DISABLE_REMOUNT: disable_remount_field()})

    if not custom_state_upgrade:
        # state written before the guard existed holds no value for it
        resource.state_upgraders = default_disable_remount_state_upgraders()
        resource.schema_version = DISABLE_REMOUNT_SCHEMA_VERSION

    return resource


def disable_remount_resource_v0() -> ResourceSchema:
    """Return the legacy resource shape expected by the version 0 upgrader."""

    return ResourceSchema(fields={FIELD_DISABLE_REMOUNT: disable_remount_field()})


def upgrade_disable_remount_v0(raw_state: RawState, meta: ProviderMeta | None = None) -> RawState:
    """Default ``disable_remount`` to ``False`` in version 0 state.

    Values already present are left untouched, which keeps the upgrade
    idempotent. This function never raises.

    Args:
        raw_state: Untyped state persisted under schema version 0.
        meta: Provider metadata supplied by the engine; unused.

    Returns:
        RawState: ``raw_state`` updated in place.
    """

    if raw_state.get(FIELD_DISABLE_REMOUNT) is None:
        raw_state[FIELD_DISABLE_REMOUNT] = False
    return raw_state


def default_disable_remount_state_upgraders() -> list[StateUpgrader]:
    """Return the upgrader chain installed by :func:`add_mount_migration_support`."""

    return [
        StateUpgrader(
            version=0,
            shape=disable_remount_resource_v0(),
            upgrade=upgrade_disable_remount_v0,
        ),
    ]


__all__ = [
    "DISABLE_REMOUNT_SCHEMA_VERSION",
    "add_mount_migration_support",
    "default_disable_remount_state_upgraders",
    "disable_remount_field",
    "disable_remount_resource_v0",
    "upgrade_disable_remount_v0",
]
