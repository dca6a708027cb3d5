# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Provider configuration and the client view handed to schema callbacks."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, ConfigDict, field_validator

from .validators import validate_no_leading_trailing_slashes

NAMESPACE_ENV: Final[str] = "SCHEMAKIT_NAMESPACE"


class ProviderConfig(BaseModel):
    """Provider-block settings relevant to schema callbacks."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str = ""

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        """Reject namespaces with leading or trailing separators."""

        if not value:
            return value
        problems = validate_no_leading_trailing_slashes(value, "namespace")
        if problems:
            raise ValueError(problems[0])
        return value

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> ProviderConfig:
        """Build the configuration from environment variables.

        Args:
            env: Mapping consulted instead of :data:`os.environ` when provided.

        Returns:
            ProviderConfig: Configuration populated from ``SCHEMAKIT_NAMESPACE``.
        """

        source = os.environ if env is None else env
        return cls(namespace=source.get(NAMESPACE_ENV, ""))


@dataclass(frozen=True, slots=True)
class ProviderClient:
    """Immutable client view exposing the configured parent namespace."""

    config: ProviderConfig

    @property
    def namespace(self) -> str:
        """Return the parent namespace configured on the provider."""

        return self.config.namespace


@dataclass(frozen=True, slots=True)
class ProviderMetadata:
    """Provider-level state passed to diff hooks and state upgraders."""

    client: ProviderClient

    @classmethod
    def from_config(cls, config: ProviderConfig) -> ProviderMetadata:
        """Return metadata wrapping a client built from ``config``."""

        return cls(client=ProviderClient(config=config))

    def get_client(self) -> ProviderClient:
        """Return the configured provider client."""

        return self.client


__all__ = ["NAMESPACE_ENV", "ProviderClient", "ProviderConfig", "ProviderMetadata"]
