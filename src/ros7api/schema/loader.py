"""Load a RouterOS schema description from a file or stdin.

The schema is a tree of menus written as JSON or YAML::

    children:
      - name: interface
        children:
          - name: bridge
            children:
              - name: vlan
                record:
                  description: Bridge VLAN filtering entries.
                  properties:
                    - name: bridge
                      type: string
                    - name: vlan-ids
                      type: number-range-list
                    - name: dynamic
                      type: boolean
                      read_only: true

The two public functions are:

* :func:`load_schema` -- Load and validate a schema from a path or ``-``.
* :func:`parse_schema` -- Validate an already-parsed dictionary.

Both return a :class:`~ros7api.models.MenuDef`; pass it to
:func:`~ros7api.schema.tree.build_tree` to get the navigable node tree.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ros7api.exceptions import SchemaError
from ros7api.models import MenuDef


BUNDLED_SCHEMA = Path(__file__).parent / "routeros.yaml"
"""Schema shipped with the package; the source of :mod:`ros7api.api`."""


def load_schema(source: str | Path = BUNDLED_SCHEMA) -> MenuDef:
    """Load a schema description from a file path, or stdin when *source* is ``-``.

    Args:
        source: Path to a ``.json``, ``.yaml`` or ``.yml`` file, or ``"-"``.

    Returns:
        The validated root :class:`~ros7api.models.MenuDef`.

    Raises:
        SchemaError: If the source cannot be read, parsed, or validated.
    """
    if str(source) == "-":
        content = sys.stdin.read()
        hint = ""
        if not content.strip():
            raise SchemaError("No input received from stdin")
    else:
        path = Path(source)
        if not path.is_file():
            raise SchemaError(f"Schema file not found: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SchemaError(f"Failed to read schema file {path}: {exc}") from exc
        if not content.strip():
            raise SchemaError(f"Schema file is empty: {path}")
        suffix = path.suffix.lower()
        hint = "json" if suffix == ".json" else "yaml" if suffix in (".yaml", ".yml") else ""

    return parse_schema(_parse_content(content, hint=hint))


def parse_schema(data: dict[str, Any]) -> MenuDef:
    """Validate a parsed schema dictionary.

    Raises:
        SchemaError: On any structural problem, including an unknown property
            type tag. Generation cannot continue past an unsupported schema.
    """
    try:
        return MenuDef.model_validate(data)
    except ValidationError as exc:
        raise SchemaError(f"Invalid schema: {exc}") from exc


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.
    """
    json_error: Exception | None = None

    if hint != "yaml":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise SchemaError(f"Invalid JSON: {exc}") from exc
        else:
            return _require_mapping(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        msg = "Failed to parse schema as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SchemaError(msg) from exc
    return _require_mapping(result)


def _require_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SchemaError(f"Schema must be a JSON/YAML object (got {kind})")
    return result
