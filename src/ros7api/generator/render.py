"""Render generation units into Python source with Jinja2.

Two templates live in ``generator/templates/``:

* ``record.py.j2`` -- one module per record-bearing node: ``PATH``, the
  enumerations, the resource and update models, and the list/patch
  functions.
* ``package_init.py.j2`` -- the package ``__init__`` re-exporting every
  generated name.

Values coming from the schema (paths, wire names, descriptions) only reach
the output through the ``quote``, ``docstring`` and ``comment`` filters, so
arbitrary schema text cannot break the generated syntax.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ros7api.generator.unit import GeneratedUnit


TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``generator/templates/``)."""


def create_environment() -> Environment:
    """Create the Jinja2 environment used for code generation.

    Autoescape is disabled for ``.py.j2`` templates (they produce Python, not
    HTML). Undefined variables raise instead of rendering as empty strings.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(disabled_extensions=("py.j2",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["quote"] = quote
    env.filters["docstring"] = docstring
    env.filters["comment"] = comment
    return env


def render_unit(unit: GeneratedUnit, env: Optional[Environment] = None) -> str:
    """Render the module source for one record."""
    env = env or create_environment()
    return env.get_template("record.py.j2").render(unit=unit)


def render_index(
    units: Sequence[GeneratedUnit], env: Optional[Environment] = None
) -> str:
    """Render the package ``__init__`` importing every unit's public names."""
    env = env or create_environment()
    return env.get_template("package_init.py.j2").render(
        units=units, exports=sorted(exported_names(units))
    )


def exported_names(units: Sequence[GeneratedUnit]) -> list[str]:
    """Public names of all *units*, in generation order."""
    names: list[str] = []
    for unit in units:
        names.append(unit.type_name)
        names.append(unit.update_type_name)
        names.extend(enum.type_name for enum in unit.enums)
        names.append(unit.list_function)
        names.append(unit.patch_function)
    return names


# --------------------------------------------------------------------------- #
# Filters
# --------------------------------------------------------------------------- #


def quote(value: str) -> str:
    """Render *value* as a double-quoted Python string literal."""
    return json.dumps(value, ensure_ascii=False)


def docstring(value: str) -> str:
    """Make free text safe to embed inside a triple-quoted docstring."""
    text = value.strip().replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    return "\n".join(line.rstrip() for line in text.splitlines())


def comment(value: str) -> str:
    """Collapse free text onto a single comment line."""
    return " ".join(value.split())
