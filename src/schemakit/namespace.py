# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Namespace field definition and the namespace recreate diff policy."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping

from .interfaces import ProviderMeta, ResourceDiff
from .merge import merge_fields
from .model_field import FieldMap, FieldSchema, FieldType
from .model_resource import CustomizeDiffFunc
from .types import FIELD_NAMESPACE, PATH_SEPARATOR
from .validators import validate_no_leading_trailing_slashes

LOGGER = logging.getLogger(__name__)


def namespace_field() -> FieldSchema:
    """Return the standard ``namespace`` field definition.

    Returns:
        FieldSchema: Optional string field forcing replacement on change.
    """

    return FieldSchema(
        field_type=FieldType.STRING,
        optional=True,
        force_new=True,
        description="Target namespace. (requires Enterprise)",
        validate=validate_no_leading_trailing_slashes,
    )


def namespace_fields() -> FieldMap:
    """Return a field map holding only the ``namespace`` field."""

    return {FIELD_NAMESPACE: namespace_field()}


def merge_namespace_field(destination: MutableMapping[str, FieldSchema]) -> None:
    """Add the ``namespace`` field to ``destination``.

    Args:
        destination: Field map mutated in place.

    Raises:
        SchemaCollisionError: If ``destination`` already defines ``namespace``.
    """

    merge_fields(destination, namespace_fields())


def namespace_path_customize_diff() -> CustomizeDiffFunc:
    """Return a diff hook forcing replacement when the namespace path moved.

    State written by older provider versions may hold the fully qualified
    namespace (parent plus resource namespace) while newer configurations
    hold only the resource fragment. When the stored value matches the
    qualified form of the planned value nothing moved; any other change
    recreates the resource.

    Returns:
        CustomizeDiffFunc: Callback invoked by the engine for every plan.
    """

    def _customize(diff: ResourceDiff, meta: ProviderMeta) -> None:
        if not diff.has_change(FIELD_NAMESPACE):
            return

        old, new = diff.get_change(FIELD_NAMESPACE)
        # a first-time set never moves an existing resource
        if old is None or old == "":
            return

        parent = meta.get_client().namespace
        constructed = f"{parent}{PATH_SEPARATOR}{'' if new is None else new}"
        LOGGER.debug(
            "namespace diff: parent=%r constructed=%r old=%r new=%r",
            parent,
            constructed,
            old,
            new,
            extra={
                "parent_namespace": parent,
                "constructed_namespace": constructed,
                "old_namespace": old,
                "new_namespace": new,
            },
        )

        if old == constructed:
            return

        LOGGER.debug("namespace %r does not match %r, forcing replacement", old, constructed)
        diff.force_new(FIELD_NAMESPACE)

    return _customize


__all__ = [
    "merge_namespace_field",
    "namespace_field",
    "namespace_fields",
    "namespace_path_customize_diff",
]
