# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Schema composition and state migration helpers for provider resources."""

from __future__ import annotations

from importlib import metadata

from .builder import ProviderSchema, ProviderSchemaBuilder
from .config import ProviderClient, ProviderConfig, ProviderMetadata
from .errors import (
    SchemaAssemblyError,
    SchemaCollisionError,
    SchemaError,
    StateUpgradeError,
    TargetResolutionError,
)
from .interfaces import NamespacedClient, ProviderMeta, ResourceDiff
from .merge import add_field, merge_fields, merge_resources, merge_schema_into
from .model_field import FieldMap, FieldSchema, FieldType
from .model_resource import ResourceMap, ResourceSchema, StateUpgrader
from .mount_migration import (
    add_mount_migration_support,
    default_disable_remount_state_upgraders,
    disable_remount_resource_v0,
    upgrade_disable_remount_v0,
)
from .namespace import merge_namespace_field, namespace_field, namespace_fields, namespace_path_customize_diff
from .upgrade import apply_state_upgrades
from .validators import validate_no_leading_trailing_slashes

try:
    __version__ = metadata.version("provider-schemakit")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "FieldMap",
    "FieldSchema",
    "FieldType",
    "NamespacedClient",
    "ProviderClient",
    "ProviderConfig",
    "ProviderMeta",
    "ProviderMetadata",
    "ProviderSchema",
    "ProviderSchemaBuilder",
    "ResourceDiff",
    "ResourceMap",
    "ResourceSchema",
    "SchemaAssemblyError",
    "SchemaCollisionError",
    "SchemaError",
    "StateUpgradeError",
    "StateUpgrader",
    "TargetResolutionError",
    "__version__",
    "add_field",
    "add_mount_migration_support",
    "apply_state_upgrades",
    "default_disable_remount_state_upgraders",
    "disable_remount_resource_v0",
    "merge_fields",
    "merge_namespace_field",
    "merge_resources",
    "merge_schema_into",
    "namespace_field",
    "namespace_fields",
    "namespace_path_customize_diff",
    "upgrade_disable_remount_v0",
    "validate_no_leading_trailing_slashes",
]
