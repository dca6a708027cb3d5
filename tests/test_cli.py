# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the schemakit command-line interface."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from schemakit.cli.app import app

SAMPLE_PROVIDER = textwrap.dedent(
    """
    from schemakit import (
        FieldSchema,
        FieldType,
        ProviderSchemaBuilder,
        ResourceSchema,
        add_mount_migration_support,
        namespace_fields,
    )


    def build_schema():
        mount = ResourceSchema(
            fields={
                "path": FieldSchema(field_type=FieldType.STRING, required=True, description="Mount path."),
                **namespace_fields(),
            },
        )
        return ProviderSchemaBuilder().add_resources({"mount": mount}, add_mount_migration_support)


    def build_colliding_schema():
        builder = ProviderSchemaBuilder().add_resources({"mount": ResourceSchema()})
        return builder.add_resources({"mount": ResourceSchema()})


    not_a_schema = 42
    """,
)


@pytest.fixture
def provider_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable provider module and return its name."""

    (tmp_path / "sample_provider.py").write_text(SAMPLE_PROVIDER, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "sample_provider"


def test_describe_lists_resources(provider_module: str) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["describe", f"{provider_module}:build_schema"])

    assert result.exit_code == 0, result.output
    assert "mount" in result.output
    assert "v0" in result.output


def test_describe_single_resource_fields(provider_module: str) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["describe", f"{provider_module}:build_schema", "--resource", "mount"])

    assert result.exit_code == 0, result.output
    assert "disable_remount" in result.output
    assert "namespace" in result.output


def test_describe_unknown_resource_fails(provider_module: str) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["describe", f"{provider_module}:build_schema", "--resource", "missing"])

    assert result.exit_code == 1
    assert "Unknown resource type 'missing'" in result.output
    assert "╭" in result.output


@pytest.mark.parametrize(
    ("target", "message"),
    [
        ("sample_provider", "package.module:attribute"),
        ("sample_provider:missing", "has no attribute"),
        ("sample_provider:not_a_schema", "does not resolve"),
        ("does_not_exist_provider:build", "unable to import"),
        ("sample_provider:build_colliding_schema", "already contains 'mount'"),
    ],
)
def test_describe_reports_target_errors(provider_module: str, target: str, message: str) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["describe", target])

    assert result.exit_code == 1
    assert message in result.output


def test_upgrade_state_writes_upgraded_json(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_text(json.dumps({"path": "kv", "namespace": "team-a"}), encoding="utf-8")
    output = tmp_path / "upgraded.json"
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "upgrade-state",
            f"{provider_module}:build_schema",
            "mount",
            str(state_file),
            "--from-version",
            "0",
            "--namespace",
            "root",
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text(encoding="utf-8")) == {
        "disable_remount": False,
        "namespace": "team-a",
        "path": "kv",
    }


def test_upgrade_state_rejects_malformed_state(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_text(json.dumps({"disable_remount": "yes"}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["upgrade-state", f"{provider_module}:build_schema", "mount", str(state_file)])

    assert result.exit_code == 1
    assert "malformed" in result.output


def test_upgrade_state_rejects_non_object_state(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_text("[1, 2]", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["upgrade-state", f"{provider_module}:build_schema", "mount", str(state_file)])

    assert result.exit_code == 1
    assert "must be a JSON object" in result.output


def test_upgrade_state_rejects_invalid_namespace(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_text("{}", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["upgrade-state", f"{provider_module}:build_schema", "mount", str(state_file), "--namespace", "/root"],
    )

    assert result.exit_code == 1
    assert "invalid provider configuration" in result.output


def test_upgrade_state_reports_undecodable_state(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_bytes(b'{"path": "\xff"}')
    runner = CliRunner()

    result = runner.invoke(app, ["upgrade-state", f"{provider_module}:build_schema", "mount", str(state_file)])

    assert result.exit_code == 1
    assert "cannot read state file" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_upgrade_state_reports_missing_state_file(provider_module: str, tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["upgrade-state", f"{provider_module}:build_schema", "mount", str(tmp_path / "absent.json")],
    )

    assert result.exit_code == 1
    assert "not found" in result.output


def test_upgrade_state_reports_unwritable_output(provider_module: str, tmp_path: Path) -> None:
    state_file = tmp_path / "state.json"
    state_file.write_text(json.dumps({"path": "kv"}), encoding="utf-8")
    output = tmp_path / "missing-dir" / "upgraded.json"
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "upgrade-state",
            f"{provider_module}:build_schema",
            "mount",
            str(state_file),
            "--namespace",
            "root",
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 1
    assert "cannot write upgraded state" in result.output
    assert not output.exists()
