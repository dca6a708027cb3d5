# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resource definition models bundling fields, versions and migrations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from .interfaces import ProviderMeta, ResourceDiff
from .model_field import FieldMap
from .types import JSONValue, RawState

StateUpgradeFunc: TypeAlias = Callable[[RawState, ProviderMeta | None], RawState]
CustomizeDiffFunc: TypeAlias = Callable[[ResourceDiff, ProviderMeta], None]


@dataclass(slots=True)
class ResourceSchema:
    """Describe one manageable entity type exposed by the provider.

    Resource definitions are assembled in place by their authors and handed
    over to the provider registry once complete.
    """

    fields: FieldMap = field(default_factory=dict)
    schema_version: int = 0
    state_upgraders: list[StateUpgrader] = field(default_factory=list)
    customize_diff: list[CustomizeDiffFunc] = field(default_factory=list)
    description: str = ""

    def json_schema(self) -> dict[str, JSONValue]:
        """Return a JSON Schema describing the persisted state of the resource.

        Undeclared keys are permitted since raw state routinely carries
        attributes owned by other schema versions.

        Returns:
            dict[str, JSONValue]: Object schema keyed by field name.
        """

        properties: dict[str, JSONValue] = {name: spec.json_schema() for name, spec in sorted(self.fields.items())}
        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": properties,
            "additionalProperties": True,
        }

    def upgrader_for(self, version: int) -> StateUpgrader | None:
        """Return the upgrader migrating state persisted at ``version``.

        Args:
            version: Schema version the stored state was written with.

        Returns:
            StateUpgrader | None: Upgrader registered for ``version``, or
            ``None`` when the resource declares none.
        """

        for upgrader in self.state_upgraders:
            if upgrader.version == version:
                return upgrader
        return None


@dataclass(frozen=True, slots=True)
class StateUpgrader:
    """Versioned transform applied to state persisted under an older schema."""

    version: int
    shape: ResourceSchema
    upgrade: StateUpgradeFunc


ResourceMap: TypeAlias = dict[str, ResourceSchema]

__all__ = [
    "CustomizeDiffFunc",
    "ResourceMap",
    "ResourceSchema",
    "StateUpgradeFunc",
    "StateUpgrader",
]
