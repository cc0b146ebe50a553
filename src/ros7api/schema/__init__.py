"""RouterOS schema model -- load a menu tree and navigate it.

Typical usage::

    from ros7api.schema import build_tree, load_schema, record_nodes

    root = build_tree(load_schema("schema.yaml"))
    for node in record_nodes(root):
        print(node.path)

Sub-modules:

* :mod:`~ros7api.schema.loader` -- JSON/YAML I/O and validation.
* :mod:`~ros7api.schema.tree` -- the immutable :class:`SchemaNode` tree.
"""

from ros7api.schema.loader import BUNDLED_SCHEMA, load_schema, parse_schema
from ros7api.schema.tree import SchemaNode, build_tree, record_nodes, walk

__all__ = [
    "BUNDLED_SCHEMA",
    "SchemaNode",
    "build_tree",
    "load_schema",
    "parse_schema",
    "record_nodes",
    "walk",
]
