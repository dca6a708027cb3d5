# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Apply versioned state upgraders to persisted resource state."""

from __future__ import annotations

import logging

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .errors import StateUpgradeError
from .interfaces import ProviderMeta
from .model_resource import ResourceSchema, StateUpgrader
from .types import RawState

LOGGER = logging.getLogger(__name__)


def apply_state_upgrades(
    resource: ResourceSchema,
    raw_state: RawState,
    stored_version: int,
    meta: ProviderMeta | None = None,
) -> RawState:
    """Migrate ``raw_state`` from ``stored_version`` to the current schema version.

    Each version gap is bridged by exactly one upgrader, applied in ascending
    order. Before an upgrader runs, the state is checked against the legacy
    shape the upgrader declares.

    Args:
        resource: Resource definition owning the upgrader chain.
        raw_state: Untyped state as persisted; upgraders may mutate it.
        stored_version: Schema version recorded alongside the state.
        meta: Provider metadata forwarded to each upgrader.

    Returns:
        RawState: State valid for ``resource.schema_version``.

    Raises:
        StateUpgradeError: If the version is out of range, an upgrader is
            missing, or the state does not match an upgrader's shape.
    """

    current_version = resource.schema_version
    if stored_version < 0 or stored_version > current_version:
        raise StateUpgradeError(
            f"state version {stored_version} cannot be upgraded to schema version {current_version}",
        )

    state = raw_state
    for version in range(stored_version, current_version):
        upgrader = resource.upgrader_for(version)
        if upgrader is None:
            raise StateUpgradeError(f"no state upgrader registered for version {version}")
        _check_shape(upgrader, state)
        LOGGER.debug("upgrading state from version %d to %d", version, version + 1)
        state = upgrader.upgrade(state, meta)
    return state


def _check_shape(upgrader: StateUpgrader, state: RawState) -> None:
    """Validate ``state`` against the shape declared by ``upgrader``.

    Raises:
        StateUpgradeError: When ``state`` does not match the declared shape.
    """

    validator = Draft202012Validator(upgrader.shape.json_schema())
    try:
        validator.validate(dict(state))
    except JsonSchemaValidationError as exc:
        raise StateUpgradeError(f"state at version {upgrader.version} is malformed: {exc.message}") from exc


__all__ = ["apply_state_upgrades"]
