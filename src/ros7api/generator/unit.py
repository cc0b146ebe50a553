"""Per-record generation units.

A :class:`GeneratedUnit` is everything the templates need to emit one record
module: the type names, the enumerations, and one :class:`FieldUnit` per
property with its annotation already resolved. :func:`build_unit` derives a
unit from a :class:`~ros7api.schema.tree.SchemaNode`; rendering is left to
:mod:`ros7api.generator.render`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ros7api.exceptions import SchemaError
from ros7api.generator.naming import (
    attribute_name,
    enum_member_name,
    enum_type_name,
    module_name,
    pascal_name,
    type_name,
)
from ros7api.models import PropertyDef, PropertyType
from ros7api.schema.tree import SchemaNode


# Annotation emitted for each non-enumeration type tag. Each name is exported
# by :mod:`ros7api.codec` except ``str``, which needs no codec. Enumerations
# are emitted as :class:`~ros7api.codec.WireEnum` subclasses.
_ANNOTATIONS: dict[PropertyType, str] = {
    PropertyType.STRING: "str",
    PropertyType.INTEGER: "Number",
    PropertyType.BOOLEAN: "Boolean",
    PropertyType.IP_ADDRESS: "IPAddress",
    PropertyType.IP_NETWORK: "IPNetwork",
    PropertyType.STRING_LIST: "StringList",
    PropertyType.NUMBER_RANGE_LIST: "NumberList",
}


@dataclass(frozen=True)
class EnumMember:
    name: str
    value: str
    description: str = ""


@dataclass(frozen=True)
class EnumUnit:
    """An enumeration type emitted for one enumeration-typed property."""

    type_name: str
    wire_name: str
    members: tuple[EnumMember, ...]


@dataclass(frozen=True)
class FieldUnit:
    """One model field.

    Attributes:
        attribute: Python attribute name (``vlan_ids``).
        wire_name: JSON key on the wire (``vlan-ids``), used as the alias.
        annotation: Type expression inside ``Optional[...]``.
        description: Free text from the schema.
        read_only: Read-only fields are left out of the update model.
    """

    attribute: str
    wire_name: str
    annotation: str
    description: str = ""
    read_only: bool = False


@dataclass(frozen=True)
class GeneratedUnit:
    """The generated artefacts of one record-bearing node."""

    path: str
    module: str
    type_name: str
    update_type_name: str
    list_function: str
    patch_function: str
    description: str = ""
    enums: tuple[EnumUnit, ...] = ()
    fields: tuple[FieldUnit, ...] = ()
    codec_imports: tuple[str, ...] = ()

    @property
    def update_fields(self) -> tuple[FieldUnit, ...]:
        """The fields that appear in the update model, in declaration order."""
        return tuple(f for f in self.fields if not f.read_only)


def build_unit(node: SchemaNode) -> GeneratedUnit:
    """Derive the :class:`GeneratedUnit` for a record-bearing *node*.

    Raises:
        SchemaError: If *node* carries no record, or a derived type name is
            not a valid Python identifier.
    """
    if node.record is None:
        raise SchemaError(f"Node {node.path or '/'} carries no record")

    record_type = type_name(node.path)
    if not record_type.isidentifier():
        raise SchemaError(
            f"Menu path {node.path!r} does not yield a valid type name ({record_type!r})"
        )
    module = module_name(node.path)

    enums: list[EnumUnit] = []
    fields: list[FieldUnit] = []
    codecs: set[str] = set()

    for prop in node.record.properties:
        identifier = prop.identifier or pascal_name(prop.name)
        if prop.type is PropertyType.ENUMERATION:
            enum_unit = _build_enum(record_type, identifier, prop)
            enums.append(enum_unit)
            annotation = enum_unit.type_name
            codecs.add("WireEnum")
        else:
            annotation = _annotation_for(prop)
            if annotation != "str":
                codecs.add(annotation)
        fields.append(
            FieldUnit(
                attribute=attribute_name(identifier),
                wire_name=prop.name,
                annotation=annotation,
                description=prop.description,
                read_only=prop.read_only,
            )
        )

    return GeneratedUnit(
        path=node.path,
        module=module,
        type_name=record_type,
        update_type_name=f"{record_type}Update",
        list_function=f"{module}_list",
        patch_function=f"{module}_patch",
        description=node.record.description,
        enums=tuple(enums),
        fields=tuple(fields),
        codec_imports=tuple(sorted(codecs)),
    )


def _annotation_for(prop: PropertyDef) -> str:
    try:
        return _ANNOTATIONS[prop.type]
    except KeyError:
        raise SchemaError(
            f"Property {prop.name!r} has unsupported type {prop.type.value!r}"
        ) from None


def _build_enum(record_type: str, identifier: str, prop: PropertyDef) -> EnumUnit:
    name = enum_type_name(record_type, identifier)
    if not name.isidentifier():
        raise SchemaError(
            f"Property {prop.name!r} does not yield a valid enumeration name ({name!r})"
        )
    members: list[EnumMember] = []
    seen: set[str] = set()
    for variant in prop.variants:
        member = enum_member_name(variant.value)
        if member in seen:
            raise SchemaError(
                f"Enumeration {name} has two variants named {member} "
                f"(property {prop.name!r})"
            )
        seen.add(member)
        members.append(EnumMember(member, variant.value, variant.description))
    return EnumUnit(type_name=name, wire_name=prop.name, members=tuple(members))
