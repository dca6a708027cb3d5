# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Explicit build step composing the provider schema from contributions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .merge import ResourceTransform, merge_fields, merge_resources
from .model_field import FieldMap, FieldSchema
from .model_resource import ResourceMap, ResourceSchema


@dataclass(frozen=True, slots=True)
class ProviderSchema:
    """Read-only provider schema produced by :class:`ProviderSchemaBuilder`."""

    fields: Mapping[str, FieldSchema]
    resources: Mapping[str, ResourceSchema]
    data_sources: Mapping[str, ResourceSchema]

    @property
    def resource_names(self) -> tuple[str, ...]:
        """Return registered resource type names in sorted order."""

        return tuple(sorted(self.resources))

    @property
    def data_source_names(self) -> tuple[str, ...]:
        """Return registered data source names in sorted order."""

        return tuple(sorted(self.data_sources))

    def resource(self, name: str) -> ResourceSchema:
        """Return the resource definition registered as ``name``.

        Args:
            name: Resource type name to resolve.

        Returns:
            ResourceSchema: Registered resource definition.

        Raises:
            KeyError: If ``name`` is not a registered resource type.
        """

        return self.resources[name]

    def data_source(self, name: str) -> ResourceSchema:
        """Return the data source definition registered as ``name``.

        Raises:
            KeyError: If ``name`` is not a registered data source.
        """

        return self.data_sources[name]


@dataclass(slots=True)
class ProviderSchemaBuilder:
    """Accumulate provider fields, resources and data sources.

    Every ``add_*`` call rejects names already registered in the same map with
    :class:`~schemakit.errors.SchemaCollisionError`. The builder assumes
    exclusive access while a call is in progress.
    """

    _fields: FieldMap = field(default_factory=dict, init=False, repr=False)
    _resources: ResourceMap = field(default_factory=dict, init=False, repr=False)
    _data_sources: ResourceMap = field(default_factory=dict, init=False, repr=False)

    def add_fields(self, contributions: Mapping[str, FieldSchema]) -> ProviderSchemaBuilder:
        """Register provider-level fields.

        Args:
            contributions: Named field definitions to add.

        Returns:
            ProviderSchemaBuilder: The builder, for chaining.
        """

        merge_fields(self._fields, contributions)
        return self

    def add_resources(
        self,
        contributions: Mapping[str, ResourceSchema],
        transform: ResourceTransform | None = None,
    ) -> ProviderSchemaBuilder:
        """Register resources, optionally transforming each definition first.

        Args:
            contributions: Resource definitions keyed by resource type name.
            transform: Optional callable applied to every definition.

        Returns:
            ProviderSchemaBuilder: The builder, for chaining.
        """

        merge_resources(self._resources, contributions, transform)
        return self

    def add_data_sources(
        self,
        contributions: Mapping[str, ResourceSchema],
        transform: ResourceTransform | None = None,
    ) -> ProviderSchemaBuilder:
        """Register data sources, optionally transforming each definition first.

        Args:
            contributions: Data source definitions keyed by name.
            transform: Optional callable applied to every definition.

        Returns:
            ProviderSchemaBuilder: The builder, for chaining.
        """

        merge_resources(self._data_sources, contributions, transform, kind="data source")
        return self

    def build(self) -> ProviderSchema:
        """Return an immutable snapshot of the registered schema.

        The outer maps are read-only views. Every resource in the snapshot is a
        private copy with its own field map, upgrader list and diff hooks, so
        later in-place changes to the registered definitions do not reach it.

        Returns:
            ProviderSchema: Schema isolated from later builder changes.
        """

        return ProviderSchema(
            fields=MappingProxyType(dict(self._fields)),
            resources=MappingProxyType(_snapshot_resources(self._resources)),
            data_sources=MappingProxyType(_snapshot_resources(self._data_sources)),
        )


def _snapshot_resources(resources: ResourceMap) -> ResourceMap:
    """Return copies of ``resources`` detached from the registered definitions.

    Args:
        resources: Resource map owned by the builder.

    Returns:
        ResourceMap: New map holding one copy per resource definition.
    """

    return {
        name: replace(
            resource,
            fields=dict(resource.fields),
            state_upgraders=list(resource.state_upgraders),
            customize_diff=list(resource.customize_diff),
        )
        for name, resource in resources.items()
    }


__all__ = ["ProviderSchema", "ProviderSchemaBuilder"]
