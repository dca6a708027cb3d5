# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and field-name constants for provider schemas."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

# Untyped state handed over by the persistence engine.
RawState: TypeAlias = MutableMapping[str, JSONValue]

FIELD_NAMESPACE: Final[str] = "namespace"
FIELD_DISABLE_REMOUNT: Final[str] = "disable_remount"
PATH_SEPARATOR: Final[str] = "/"

__all__ = [
    "FIELD_DISABLE_REMOUNT",
    "FIELD_NAMESPACE",
    "JSONPrimitive",
    "JSONValue",
    "PATH_SEPARATOR",
    "RawState",
]
