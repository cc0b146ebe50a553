"""Write a generated package to disk."""

from __future__ import annotations

from pathlib import Path

from ros7api.config import atomic_write
from ros7api.generator.render import create_environment, render_index, render_unit
from ros7api.generator.unit import GeneratedUnit, build_unit
from ros7api.output import debug, info
from ros7api.schema.tree import SchemaNode, record_nodes


def build_units(root: SchemaNode) -> list[GeneratedUnit]:
    """Build one unit per record-bearing node under *root*, in walk order."""
    return [build_unit(node) for node in record_nodes(root)]


def generate_sources(root: SchemaNode) -> dict[str, str]:
    """Render the whole package for *root*.

    Returns:
        Mapping of file name (``interface_bridge_vlan.py``, ``__init__.py``)
        to source text, record modules first.

    Raises:
        SchemaError: If a record cannot be turned into Python names.
    """
    env = create_environment()
    units = build_units(root)
    sources: dict[str, str] = {}
    for unit in units:
        debug(f"Rendering {unit.path} as {unit.module}.{unit.type_name}")
        sources[f"{unit.module}.py"] = render_unit(unit, env)
    sources["__init__.py"] = render_index(units, env)
    return sources


def generate_package(root: SchemaNode, output_dir: Path) -> list[Path]:
    """Generate the record package for *root* into *output_dir*.

    Existing files with the same names are replaced atomically; other files
    in *output_dir* are left alone.

    Returns:
        The paths written, record modules first and ``__init__.py`` last.
    """
    written: list[Path] = []
    for filename, source in generate_sources(root).items():
        path = output_dir / filename
        info(f"Writing {path}")
        atomic_write(path, source)
        written.append(path)
    return written
