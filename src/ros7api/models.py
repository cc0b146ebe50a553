"""Canonical Pydantic models shared across all ros7api modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`RequestConfig` and :class:`DeviceProfile`.

**Schema description models** -- the logical shape of a RouterOS menu tree,
loaded by :mod:`ros7api.schema.loader` and consumed by the generator:
    :class:`PropertyType`, :class:`EnumVariant`, :class:`PropertyDef`,
    :class:`RecordDef` and :class:`MenuDef`.

Schema models are frozen; once loaded, a schema is never modified.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Configuration ---


class RequestConfig(BaseModel):
    """HTTP request settings applied to every call against a device."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    ca_bundle: Optional[str] = Field(
        default=None,
        description="Path to a PEM bundle to trust instead of the system store "
        "(e.g. the Let's Encrypt chain for certificates issued by RouterOS itself)",
    )


class DeviceProfile(BaseModel):
    """Per-device profile stored as JSON under the ``profiles/`` config directory.

    Each profile names one RouterOS device reachable over its ``www-ssl``
    service. The password is never stored directly; ``password_source`` is a
    credential source descriptor resolved by
    :func:`~ros7api.config.resolve_credential`.

    Example::

        DeviceProfile(
            name="core-switch",
            address="10.0.0.1",
            password_source="env:CORE_SWITCH_PASSWORD",
        )
    """

    model_config = ConfigDict(extra="allow")

    name: str
    address: str = Field(
        description="Host, host:port or [IPv6]:port of the www-ssl service"
    )
    username: str = Field(default="admin")
    password_source: str = Field(
        default="env:ROS7API_PASSWORD",
        description="Credential source: env:VAR, file:/path or prompt",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- Schema description ---


class PropertyType(str, enum.Enum):
    """Type tag of a record property. One tag per wire codec."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    IP_ADDRESS = "ip-address"
    IP_NETWORK = "ip-network"
    STRING_LIST = "string-list"
    NUMBER_RANGE_LIST = "number-range-list"
    ENUMERATION = "enumeration"


class EnumVariant(BaseModel):
    """One allowed value of an enumeration-typed property."""

    model_config = ConfigDict(frozen=True)

    value: str
    description: str = ""


class PropertyDef(BaseModel):
    """A single property of a record.

    ``name`` is the wire identifier (hyphen-delimited, e.g. ``vlan-ids``).
    ``identifier`` optionally overrides the generated identifier, which is
    otherwise derived from ``name`` by :func:`~ros7api.generator.naming.pascal_name`.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    identifier: Optional[str] = None
    type: PropertyType
    read_only: bool = False
    description: str = ""
    variants: tuple[EnumVariant, ...] = ()

    @model_validator(mode="after")
    def _check_variants(self) -> PropertyDef:
        if self.type is PropertyType.ENUMERATION and not self.variants:
            raise ValueError(f"enumeration property {self.name!r} declares no variants")
        if self.type is not PropertyType.ENUMERATION and self.variants:
            raise ValueError(
                f"property {self.name!r} of type {self.type.value!r} cannot declare variants"
            )
        return self


class RecordDef(BaseModel):
    """A record type: an ordered sequence of properties."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    properties: tuple[PropertyDef, ...] = ()


class MenuDef(BaseModel):
    """One element of the RouterOS menu tree as written in a schema file."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    record: Optional[RecordDef] = None
    children: tuple[MenuDef, ...] = ()
