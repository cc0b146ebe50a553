"""The immutable schema node tree.

:func:`build_tree` turns a validated :class:`~ros7api.models.MenuDef` into
:class:`SchemaNode` objects addressed by slash-joined paths
(``interface/bridge/vlan``). :func:`walk` and :func:`record_nodes` traverse
the tree depth-first; children are visited in name order so that repeated
runs see nodes in the same order.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ros7api.exceptions import SchemaError
from ros7api.models import MenuDef, RecordDef


@dataclass(frozen=True)
class SchemaNode:
    """One entry of the RouterOS menu namespace.

    Attributes:
        name: Last path segment (empty for the root).
        path: Slash-joined ancestor names, e.g. ``interface/bridge/vlan``.
        record: The record carried by this node, if any.
        children: Child nodes keyed by name (read-only mapping).
    """

    name: str
    path: str
    record: Optional[RecordDef]
    children: Mapping[str, SchemaNode]

    @property
    def segments(self) -> list[str]:
        """The path split into its segments (empty for the root)."""
        return self.path.split("/") if self.path else []

    def get(self, path: str) -> SchemaNode:
        """Return the descendant at the relative *path*.

        Raises:
            KeyError: If no such node exists.
        """
        node = self
        for segment in path.strip("/").split("/"):
            if segment:
                node = node.children[segment]
        return node


def build_tree(menu: MenuDef, path: str = "") -> SchemaNode:
    """Build a :class:`SchemaNode` tree rooted at *menu*.

    Raises:
        SchemaError: If a child is unnamed, a name contains ``/``, two
            siblings share a name, or the root itself carries a record.
    """
    if not path and menu.record is not None:
        raise SchemaError("The schema root cannot carry a record")

    children: dict[str, SchemaNode] = {}
    for child in menu.children:
        if not child.name or "/" in child.name:
            raise SchemaError(f"Invalid menu name {child.name!r} under {path or '/'}")
        child_path = f"{path}/{child.name}" if path else child.name
        if child.name in children:
            raise SchemaError(f"Duplicate menu {child_path!r}")
        children[child.name] = build_tree(child, child_path)

    return SchemaNode(
        name=menu.name,
        path=path,
        record=menu.record,
        children=MappingProxyType(children),
    )


def walk(node: SchemaNode) -> Iterator[SchemaNode]:
    """Yield *node* and all its descendants, depth-first, pre-order."""
    yield node
    for name in sorted(node.children):
        yield from walk(node.children[name])


def record_nodes(node: SchemaNode) -> Iterator[SchemaNode]:
    """Yield every node under (and including) *node* that carries a record."""
    for candidate in walk(node):
        if candidate.record is not None:
            yield candidate
