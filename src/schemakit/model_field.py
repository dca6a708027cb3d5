# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Field definition models used to describe resource attributes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeAlias

from .errors import SchemaAssemblyError
from .types import JSONValue
from .validators import ValidateFunc


class FieldType(StrEnum):
    """Enumerate value types supported by field definitions."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    LIST = "list"
    MAP = "map"


_JSON_SCHEMA_TYPES: Final[dict[FieldType, str]] = {
    FieldType.STRING: "string",
    FieldType.BOOL: "boolean",
    FieldType.INT: "integer",
    FieldType.FLOAT: "number",
    FieldType.LIST: "array",
    FieldType.MAP: "object",
}


@dataclass(frozen=True, slots=True)
class FieldSchema:
    """Describe one configurable attribute of a resource."""

    field_type: FieldType
    optional: bool = False
    required: bool = False
    computed: bool = False
    default: JSONValue = None
    description: str = ""
    force_new: bool = False
    sensitive: bool = False
    validate: ValidateFunc | None = None

    def __post_init__(self) -> None:
        """Reject contradictory attribute flags."""

        if self.required and self.optional:
            raise SchemaAssemblyError("a field cannot be both required and optional")
        if self.required and self.default is not None:
            raise SchemaAssemblyError("a required field cannot declare a default")
        if not (self.required or self.optional or self.computed):
            raise SchemaAssemblyError("a field must be required, optional or computed")

    def validate_value(self, value: JSONValue, key: str) -> tuple[str, ...]:
        """Return the problems found when ``value`` is assigned to ``key``.

        Unset values (``None``) are not validated.

        Args:
            value: Candidate value for the field.
            key: Field name used in error messages.

        Returns:
            tuple[str, ...]: Error messages; empty when ``value`` is acceptable.
        """

        if value is None:
            return ()
        if not _matches_type(self.field_type, value):
            return (f"expected type of '{key}' to be {self.field_type.value}",)
        if self.validate is None:
            return ()
        return tuple(self.validate(value, key))

    def json_schema(self) -> dict[str, JSONValue]:
        """Return the JSON Schema fragment describing persisted values.

        Returns:
            dict[str, JSONValue]: Nullable schema fragment for the field.
        """

        fragment: dict[str, JSONValue] = {"type": [_JSON_SCHEMA_TYPES[self.field_type], "null"]}
        if self.description:
            fragment["description"] = self.description
        return fragment


FieldMap: TypeAlias = dict[str, FieldSchema]


def _matches_type(field_type: FieldType, value: JSONValue) -> bool:
    """Return whether ``value`` is a JSON value of ``field_type``.

    Booleans never satisfy the numeric types and strings never satisfy
    :attr:`FieldType.LIST`.

    Args:
        field_type: Declared type of the field.
        value: Non-null value to check.

    Returns:
        bool: ``True`` when ``value`` has the declared type.
    """

    if field_type is FieldType.STRING:
        return isinstance(value, str)
    if field_type is FieldType.BOOL:
        return isinstance(value, bool)
    if field_type is FieldType.INT:
        return isinstance(value, int) and not isinstance(value, bool)
    if field_type is FieldType.FLOAT:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if field_type is FieldType.LIST:
        return isinstance(value, Sequence) and not isinstance(value, str)
    return isinstance(value, Mapping)


__all__ = ["FieldMap", "FieldSchema", "FieldType"]
