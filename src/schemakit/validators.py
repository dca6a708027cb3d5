# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reusable validation functions attached to field definitions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from .types import PATH_SEPARATOR, JSONValue

# Validators return the error messages for ``value``; an empty sequence means valid.
ValidateFunc: TypeAlias = Callable[[JSONValue, str], Sequence[str]]


def validate_no_leading_trailing_slashes(value: JSONValue, key: str) -> tuple[str, ...]:
    """Reject path values that start or end with a path separator.

    Args:
        value: Candidate field value.
        key: Field name used in error messages.

    Returns:
        tuple[str, ...]: Error messages describing the violation, if any.
    """

    if not isinstance(value, str):
        return (f"expected type of '{key}' to be string",)
    if value.startswith(PATH_SEPARATOR) or value.endswith(PATH_SEPARATOR):
        return (f"invalid value '{value}' for '{key}', contains leading/trailing '{PATH_SEPARATOR}'",)
    return ()


__all__ = ["ValidateFunc", "validate_no_leading_trailing_slashes"]
