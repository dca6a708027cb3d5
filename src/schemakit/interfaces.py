# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts for the collaborators that invoke schema callbacks.

The persistence engine, its per-apply diff object and the provider client are
owned elsewhere. Only the operations used by :mod:`schemakit` are described
here so that callbacks can be exercised with lightweight fakes.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from .types import JSONValue


@runtime_checkable
class NamespacedClient(Protocol):
    """Define the read-only view of a configured provider client."""

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Return the parent namespace configured on the provider.

        Returns:
            str: Parent namespace path, possibly empty.
        """
        raise NotImplementedError("NamespacedClient.namespace must be implemented")


@runtime_checkable
class ProviderMeta(Protocol):
    """Define the provider-level state handed to engine callbacks."""

    @abstractmethod
    def get_client(self) -> NamespacedClient:
        """Return the client configured for the provider.

        Returns:
            NamespacedClient: Client exposing the parent namespace.
        """
        raise NotImplementedError("ProviderMeta.get_client must be implemented")


@runtime_checkable
class ResourceDiff(Protocol):
    """Define the subset of a plan-time resource diff used by diff hooks."""

    @abstractmethod
    def has_change(self, key: str) -> bool:
        """Return ``True`` when ``key`` differs between state and configuration.

        Args:
            key: Field name to inspect.

        Returns:
            bool: ``True`` when the field changed in this diff.
        """
        raise NotImplementedError("ResourceDiff.has_change must be implemented")

    @abstractmethod
    def get_change(self, key: str) -> tuple[JSONValue, JSONValue]:
        """Return the old and new values of ``key``.

        Args:
            key: Field name to inspect.

        Returns:
            tuple[JSONValue, JSONValue]: Value stored in state and value planned
            from configuration.
        """
        raise NotImplementedError("ResourceDiff.get_change must be implemented")

    @abstractmethod
    def force_new(self, key: str) -> None:
        """Mark ``key`` as requiring the resource to be destroyed and recreated.

        Args:
            key: Field name forcing replacement.
        """
        raise NotImplementedError("ResourceDiff.force_new must be implemented")


__all__ = ["NamespacedClient", "ProviderMeta", "ResourceDiff"]
