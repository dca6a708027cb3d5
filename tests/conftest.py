# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and collaborator fakes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import pytest

from schemakit.types import JSONValue


@dataclass
class FakeDiff:
    """In-memory diff recording which fields were forced to recreate."""

    old: Mapping[str, JSONValue] = field(default_factory=dict)
    new: Mapping[str, JSONValue] = field(default_factory=dict)
    forced: list[str] = field(default_factory=list)

    def has_change(self, key: str) -> bool:
        return self.old.get(key) != self.new.get(key)

    def get_change(self, key: str) -> tuple[JSONValue, JSONValue]:
        return self.old.get(key, ""), self.new.get(key, "")

    def force_new(self, key: str) -> None:
        self.forced.append(key)


@dataclass(frozen=True)
class FakeClient:
    namespace: str = ""


@dataclass(frozen=True)
class FakeMeta:
    client: FakeClient

    def get_client(self) -> FakeClient:
        return self.client


@pytest.fixture
def make_diff() -> Callable[..., FakeDiff]:
    """Return a factory building diffs from old and new field values."""

    def _make(old: Mapping[str, JSONValue] | None = None, new: Mapping[str, JSONValue] | None = None) -> FakeDiff:
        return FakeDiff(old=dict(old or {}), new=dict(new or {}))

    return _make


@pytest.fixture
def make_meta() -> Callable[[str], FakeMeta]:
    """Return a factory building provider metadata for a parent namespace."""

    def _make(parent: str) -> FakeMeta:
        return FakeMeta(client=FakeClient(namespace=parent))

    return _make
