"""Tests for the ros7api CLI (``generate`` and ``schema`` commands)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from ros7api import __version__
from ros7api.app import app
from ros7api.exit_codes import EXIT_SCHEMA_ERROR


class TestGlobalOptions:
    def test_version(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"ros7api {__version__}" in result.output

    def test_no_args_shows_help(self, cli_runner) -> None:
        result = cli_runner.invoke(app, [])
        assert "generate" in result.output
        assert "schema" in result.output


class TestGenerateCommand:
    def test_generate_from_file(
        self,
        cli_runner,
        tmp_path: Path,
        vlan_schema_raw: dict[str, Any],
    ) -> None:
        schema = tmp_path / "schema.yaml"
        schema.write_text(yaml.safe_dump(vlan_schema_raw), encoding="utf-8")
        out = tmp_path / "api"

        result = cli_runner.invoke(
            app, ["--no-color", "generate", "--schema", str(schema), "--output", str(out)]
        )

        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out.iterdir()) == ["__init__.py", "interface_bridge_vlan.py"]
        assert "Generated 1 record module(s)" in result.output

    def test_generate_bundled(self, cli_runner, tmp_path: Path) -> None:
        out = tmp_path / "api"
        result = cli_runner.invoke(app, ["--quiet", "generate", "--output", str(out)])
        assert result.exit_code == 0, result.output
        assert (out / "interface_bridge_port.py").is_file()
        assert (out / "ip_address.py").is_file()

    def test_generate_from_stdin(
        self, cli_runner, tmp_path: Path, vlan_schema_raw: dict[str, Any]
    ) -> None:
        out = tmp_path / "api"
        result = cli_runner.invoke(
            app,
            ["--quiet", "generate", "--schema", "-", "--output", str(out)],
            input=json.dumps(vlan_schema_raw),
        )
        assert result.exit_code == 0, result.output
        assert (out / "interface_bridge_vlan.py").is_file()

    def test_unknown_type_tag_fails(self, cli_runner, tmp_path: Path) -> None:
        schema = tmp_path / "schema.json"
        schema.write_text(
            json.dumps(
                {
                    "children": [
                        {
                            "name": "ip",
                            "record": {"properties": [{"name": "mtu", "type": "float"}]},
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )
        out = tmp_path / "api"

        result = cli_runner.invoke(
            app, ["--no-color", "generate", "--schema", str(schema), "--output", str(out)]
        )

        assert result.exit_code == EXIT_SCHEMA_ERROR
        assert "Invalid schema" in result.output
        assert not out.exists()

    def test_missing_schema_file(self, cli_runner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            app, ["--no-color", "generate", "--schema", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == EXIT_SCHEMA_ERROR
        assert "not found" in result.output


class TestSchemaCommand:
    def test_json_table(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--json", "schema"])
        assert result.exit_code == 0, result.output
        rows = json.loads(result.stdout)
        assert rows == [
            {
                "Path": "interface/bridge/port",
                "Type": "InterfaceBridgePort",
                "Properties": "9",
                "Read-only": "2",
            },
            {
                "Path": "interface/bridge/vlan",
                "Type": "InterfaceBridgeVlan",
                "Properties": "9",
                "Read-only": "3",
            },
            {
                "Path": "ip/address",
                "Type": "IpAddress",
                "Properties": "8",
                "Read-only": "3",
            },
        ]

    def test_plain_table(
        self, cli_runner, tmp_path: Path, vlan_schema_raw: dict[str, Any]
    ) -> None:
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps(vlan_schema_raw), encoding="utf-8")
        result = cli_runner.invoke(app, ["--plain", "schema", "--schema", str(schema)])
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "Path\tType\tProperties\tRead-only",
            "interface/bridge/vlan\tInterfaceBridgeVlan\t5\t1",
        ]


@pytest.mark.parametrize("argv", [["generate", "--help"], ["schema", "--help"]])
def test_command_help(cli_runner, argv: list[str]) -> None:
    result = cli_runner.invoke(app, argv)
    assert result.exit_code == 0
    assert "--schema" in result.output
