"""Shared test fixtures for ros7api.

Provides reusable fixtures for loading schema fixtures, creating isolated
config environments, managing output state, and running CLI commands.
These fixtures are automatically discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from ros7api.models import MenuDef
from ros7api.output import OutputFormat, OutputManager, reset_output, set_output
from ros7api.schema import SchemaNode, build_tree, parse_schema



# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time.  When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale
    ("I/O operation on closed file").  Resetting forces a fresh manager
    to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Schema fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def vlan_schema_raw() -> dict[str, Any]:
    """A minimal schema with a single ``interface/bridge/vlan`` record."""
    return {
        "children": [
            {
                "name": "interface",
                "children": [
                    {
                        "name": "bridge",
                        "children": [
                            {
                                "name": "vlan",
                                "record": {
                                    "description": "Bridge VLAN entries.",
                                    "properties": [
                                        {"name": "bridge", "type": "string"},
                                        {"name": "disabled", "type": "boolean"},
                                        {"name": "tagged", "type": "string-list"},
                                        {"name": "vlan-ids", "type": "number-range-list"},
                                        {
                                            "name": "dynamic",
                                            "type": "boolean",
                                            "read_only": True,
                                        },
                                    ],
                                },
                            }
                        ],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def vlan_schema(vlan_schema_raw: dict[str, Any]) -> MenuDef:
    return parse_schema(vlan_schema_raw)


@pytest.fixture
def vlan_tree(vlan_schema: MenuDef) -> SchemaNode:
    return build_tree(vlan_schema)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path
    so that tests never touch real user config. Clears all ROS7API_*
    environment variables and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("ros7api.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["ROS7API_PROFILE", "ROS7API_ADDRESS", "ROS7API_PASSWORD"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
