# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collision-checked merging of field and resource definitions."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping

from .errors import CollisionKind, SchemaCollisionError
from .model_field import FieldSchema
from .model_resource import ResourceSchema

ResourceTransform = Callable[[ResourceSchema], ResourceSchema]


def add_field(destination: MutableMapping[str, FieldSchema], name: str, definition: FieldSchema) -> None:
    """Insert ``definition`` under ``name`` unless the name is already taken.

    Args:
        destination: Field map receiving the definition.
        name: Field name to register.
        definition: Field definition to insert.

    Raises:
        SchemaCollisionError: If ``destination`` already defines ``name``.
    """

    if name in destination:
        raise SchemaCollisionError("field", name)
    destination[name] = definition


def merge_fields(
    destination: MutableMapping[str, FieldSchema],
    contributions: Mapping[str, FieldSchema],
) -> None:
    """Merge ``contributions`` into ``destination`` rejecting duplicate names.

    Entries are inserted in iteration order; those processed before a
    collision stay in ``destination``.

    Args:
        destination: Field map mutated in place.
        contributions: Named field definitions to add.

    Raises:
        SchemaCollisionError: If a contributed name already exists in ``destination``.
    """

    for name, definition in contributions.items():
        add_field(destination, name, definition)


def merge_schema_into(resource: ResourceSchema, contributions: Mapping[str, FieldSchema]) -> None:
    """Merge ``contributions`` into the field map of ``resource``.

    Args:
        resource: Resource definition whose fields are extended.
        contributions: Named field definitions to add.

    Raises:
        SchemaCollisionError: If ``resource`` already defines a contributed field.
    """

    merge_fields(resource.fields, contributions)


def merge_resources(
    destination: MutableMapping[str, ResourceSchema],
    contributions: Mapping[str, ResourceSchema],
    transform: ResourceTransform | None = None,
    *,
    kind: CollisionKind = "resource",
) -> None:
    """Merge resource definitions into ``destination`` rejecting duplicate types.

    Args:
        destination: Resource map mutated in place.
        contributions: Resource definitions keyed by resource type name.
        transform: Optional callable applied to every definition before insertion.
        kind: Map description used when reporting collisions.

    Raises:
        SchemaCollisionError: If a resource type name is already registered.
    """

    for name, resource in contributions.items():
        if transform is not None:
            resource = transform(resource)
        if name in destination:
            raise SchemaCollisionError(kind, name)
        destination[name] = resource


__all__ = [
    "ResourceTransform",
    "add_field",
    "merge_fields",
    "merge_resources",
    "merge_schema_into",
]
