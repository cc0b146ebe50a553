"""Derive Python identifiers from RouterOS wire names and menu paths.

All functions here are pure. The derivations are:

* **Generated identifier** of a property -- split the wire name on ``-`` and
  concatenate the capitalised segments (``vlan-ids`` -> ``VlanIds``), unless
  the schema overrides it. See :func:`pascal_name`.
* **Type name** of a node -- the same treatment applied to every path segment
  (``interface/bridge/vlan`` -> ``InterfaceBridgeVlan``). See :func:`type_name`.
* **Enumeration type name** -- ``<TypeName>_<Identifier>``, which keeps enums
  of different records apart. See :func:`enum_type_name`.
* **Attribute name** -- the snake_case form of the generated identifier, as
  used for model fields. See :func:`attribute_name`.

Two distinct wire names can map to the same identifier (``a-b`` and ``a--b``
both give ``AB``). That is a precondition on schema authors and is not
checked here.
"""

from __future__ import annotations

import keyword
import re

from pydantic import BaseModel


# Matches any character that is not alphanumeric or underscore.
_INVALID_IDENT_RE = re.compile(r"[^a-zA-Z0-9_]")

# Names a model field must not take: BaseModel's public API, plus the record ID.
_RESERVED_ATTRIBUTES = frozenset(
    name for name in dir(BaseModel) if not name.startswith("_")
) | {"id"}


def capitalize(segment: str) -> str:
    """Upper-case the first character of *segment*, leaving the rest untouched."""
    return segment[:1].upper() + segment[1:]


def pascal_name(wire_name: str) -> str:
    """Derive a generated identifier from a hyphen-delimited wire name.

    Example::

        >>> pascal_name("vlan-ids")
        'VlanIds'
        >>> pascal_name("current-tagged")
        'CurrentTagged'
    """
    return "".join(capitalize(part) for part in wire_name.split("-"))


def type_name(path: str) -> str:
    """Derive the generated type name of the node at *path*.

    Example::

        >>> type_name("interface/bridge/vlan")
        'InterfaceBridgeVlan'
        >>> type_name("ip/dhcp-server")
        'IpDhcpServer'
    """
    return "".join(pascal_name(segment) for segment in path.split("/"))


def enum_type_name(record_type: str, identifier: str) -> str:
    """Name of the enumeration type for one property of one record."""
    return f"{record_type}_{identifier}"


def attribute_name(identifier: str) -> str:
    """Convert a generated identifier into a model field name.

    Applies the following transformations in order:

    1. CamelCase boundaries are split with underscores (``VlanIds`` becomes
       ``Vlan_Ids``).
    2. The string is lowercased.
    3. Hyphens, dots and any other invalid characters become underscores.
    4. Consecutive and leading/trailing underscores are collapsed.
    5. An empty result defaults to ``"value"``.
    6. A leading digit gets an ``n`` prefix (a leading underscore would make
       the field private to pydantic).
    7. Python keywords and names reserved by :class:`pydantic.BaseModel` get a
       trailing underscore (``from`` becomes ``from_``, ``copy`` becomes
       ``copy_``).

    Example::

        >>> attribute_name("VlanIds")
        'vlan_ids'
        >>> attribute_name("From")
        'from_'
    """
    result = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", identifier)
    result = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", result)
    result = result.lower()
    result = _INVALID_IDENT_RE.sub("_", result)
    result = re.sub(r"_+", "_", result).strip("_")
    if not result:
        result = "value"
    if result[0].isdigit():
        result = f"n{result}"
    if keyword.iskeyword(result) or result in _RESERVED_ATTRIBUTES:
        result = f"{result}_"
    return result


def module_name(path: str) -> str:
    """Name of the generated module for the node at *path*.

    Example::

        >>> module_name("interface/bridge/vlan")
        'interface_bridge_vlan'
    """
    result = _INVALID_IDENT_RE.sub("_", path.replace("/", "_").lower())
    result = re.sub(r"_+", "_", result).strip("_")
    if result[:1].isdigit():
        result = f"n{result}"
    if keyword.iskeyword(result):
        result = f"{result}_"
    return result


def enum_member_name(value: str) -> str:
    """Name of the enumeration member for a variant's wire value.

    Example::

        >>> enum_member_name("admit-only-vlan-tagged")
        'ADMIT_ONLY_VLAN_TAGGED'
        >>> enum_member_name("802.3ad")
        'V_802_3AD'
    """
    result = _INVALID_IDENT_RE.sub("_", value.upper())
    result = re.sub(r"_+", "_", result).strip("_")
    if not result:
        return "EMPTY"
    if result[0].isdigit():
        result = f"V_{result}"
    return result
