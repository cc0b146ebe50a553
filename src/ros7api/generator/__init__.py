"""Code generator -- turn a RouterOS schema into typed record modules.

The pipeline is :func:`~ros7api.generator.unit.build_unit` (names and
annotations per record) followed by :mod:`~ros7api.generator.render` (Jinja2
templates) and :func:`~ros7api.generator.writer.generate_package` (atomic
writes). :mod:`~ros7api.generator.naming` holds the identifier rules.

Example::

    from pathlib import Path

    from ros7api.generator import generate_package
    from ros7api.schema import build_tree, load_schema

    generate_package(build_tree(load_schema()), Path("src/ros7api/api"))
"""

from ros7api.generator.render import render_index, render_unit
from ros7api.generator.unit import EnumMember, EnumUnit, FieldUnit, GeneratedUnit, build_unit
from ros7api.generator.writer import build_units, generate_package, generate_sources

__all__ = [
    "EnumMember",
    "EnumUnit",
    "FieldUnit",
    "GeneratedUnit",
    "build_unit",
    "build_units",
    "generate_package",
    "generate_sources",
    "render_index",
    "render_unit",
]
