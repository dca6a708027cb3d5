# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the mount-migration guard field and its state upgrader."""

from __future__ import annotations

import pytest

from schemakit.errors import SchemaCollisionError
from schemakit.model_field import FieldSchema, FieldType
from schemakit.model_resource import ResourceSchema, StateUpgrader
from schemakit.mount_migration import (
    add_mount_migration_support,
    default_disable_remount_state_upgraders,
    disable_remount_resource_v0,
    upgrade_disable_remount_v0,
)
from schemakit.namespace import namespace_fields


def _mount_resource() -> ResourceSchema:
    return ResourceSchema(
        fields={
            "path": FieldSchema(field_type=FieldType.STRING, required=True),
            **namespace_fields(),
        },
    )


def test_add_mount_migration_support_installs_default_upgrade() -> None:
    resource = _mount_resource()

    result = add_mount_migration_support(resource, False)

    assert result is resource
    assert resource.schema_version == 1
    guard = resource.fields["disable_remount"]
    assert guard.field_type is FieldType.BOOL
    assert guard.optional is True
    assert guard.default is False
    assert [upgrader.version for upgrader in resource.state_upgraders] == [0]
    assert resource.state_upgraders[0].upgrade is upgrade_disable_remount_v0


def test_add_mount_migration_support_twice_fails() -> None:
    resource = add_mount_migration_support(_mount_resource())

    with pytest.raises(SchemaCollisionError, match="disable_remount"):
        add_mount_migration_support(resource)


def test_custom_state_upgrade_leaves_version_to_caller() -> None:
    custom = StateUpgrader(version=1, shape=ResourceSchema(), upgrade=lambda state, meta: state)
    resource = _mount_resource()
    resource.schema_version = 2
    resource.state_upgraders = [custom]

    add_mount_migration_support(resource, True)

    assert "disable_remount" in resource.fields
    assert resource.schema_version == 2
    assert resource.state_upgraders == [custom]


def test_upgrade_fills_missing_guard() -> None:
    assert upgrade_disable_remount_v0({}) == {"disable_remount": False}
    assert upgrade_disable_remount_v0({"disable_remount": None}, None) == {"disable_remount": False}


def test_upgrade_preserves_existing_guard() -> None:
    state = {"disable_remount": True, "path": "kv"}

    assert upgrade_disable_remount_v0(state) == {"disable_remount": True, "path": "kv"}


def test_upgrade_is_idempotent() -> None:
    once = upgrade_disable_remount_v0({"path": "kv"})
    twice = upgrade_disable_remount_v0(dict(once))

    assert once == twice == {"path": "kv", "disable_remount": False}


def test_legacy_shape_declares_only_guard() -> None:
    shape = disable_remount_resource_v0()

    assert list(shape.fields) == ["disable_remount"]
    assert shape.schema_version == 0
    upgraders = default_disable_remount_state_upgraders()
    assert len(upgraders) == 1
    assert list(upgraders[0].shape.fields) == ["disable_remount"]
