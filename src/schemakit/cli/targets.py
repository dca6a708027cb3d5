# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve ``module:attribute`` references into provider schemas."""

from __future__ import annotations

import importlib

from ..builder import ProviderSchema, ProviderSchemaBuilder
from ..errors import TargetResolutionError


def resolve_schema_target(target: str) -> ProviderSchema:
    """Import ``target`` and return the provider schema it designates.

    ``target`` names an attribute as ``package.module:attribute``. The
    attribute may be a :class:`ProviderSchema`, a :class:`ProviderSchemaBuilder`
    or a zero-argument callable returning either.

    Args:
        target: Reference to the schema object.

    Returns:
        ProviderSchema: Built provider schema.

    Raises:
        TargetResolutionError: If the module or attribute cannot be resolved.
        SchemaAssemblyError: If building the schema fails.
    """

    module_path, _, attribute_name = target.partition(":")
    if not module_path or not attribute_name:
        raise TargetResolutionError(f"target '{target}' must look like 'package.module:attribute'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise TargetResolutionError(f"unable to import schema module '{module_path}'") from exc
    attribute = getattr(module, attribute_name, None)
    if attribute is None:
        raise TargetResolutionError(f"module '{module_path}' has no attribute '{attribute_name}'")

    if callable(attribute) and not isinstance(attribute, (ProviderSchema, ProviderSchemaBuilder)):
        attribute = attribute()
    if isinstance(attribute, ProviderSchemaBuilder):
        attribute = attribute.build()
    if not isinstance(attribute, ProviderSchema):
        raise TargetResolutionError(f"'{target}' does not resolve to a provider schema")
    return attribute


__all__ = ["resolve_schema_target"]
