"""RouterOS ``interface/bridge/vlan`` records.

Bridge VLAN filtering table entries.

Automatically generated by ros7api.generator from the schema description,
do not edit.
"""

from typing import Optional

from pydantic import Field

from ros7api.client.operations import list_records, patch_record
from ros7api.client.records import Record, RecordID, RecordUpdate
from ros7api.client.transport import DEFAULT_TIMEOUT, Deadline, Transport
from ros7api.codec import Boolean, NumberList, StringList


PATH = "interface/bridge/vlan"


class InterfaceBridgeVlan(Record):
    """The ``interface/bridge/vlan`` record as returned by the device."""

    bridge: Optional[str] = Field(
        default=None,
        alias="bridge",
        description="The bridge interface this entry applies to.",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    tagged: Optional[StringList] = Field(
        default=None,
        alias="tagged",
        description="Interfaces with tagged membership in the VLANs.",
    )
    untagged: Optional[StringList] = Field(
        default=None,
        alias="untagged",
        description="Interfaces with untagged membership in the VLANs.",
    )
    vlan_ids: Optional[NumberList] = Field(
        default=None,
        alias="vlan-ids",
        description="VLAN IDs covered by this entry.",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )
    current_tagged: Optional[StringList] = Field(
        default=None,
        alias="current-tagged",
    )
    current_untagged: Optional[StringList] = Field(
        default=None,
        alias="current-untagged",
    )
    dynamic: Optional[Boolean] = Field(
        default=None,
        alias="dynamic",
    )


class InterfaceBridgeVlanUpdate(RecordUpdate):
    """Changes to the ``interface/bridge/vlan`` record. Unset fields are left as they are."""

    bridge: Optional[str] = Field(
        default=None,
        alias="bridge",
        description="The bridge interface this entry applies to.",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    tagged: Optional[StringList] = Field(
        default=None,
        alias="tagged",
        description="Interfaces with tagged membership in the VLANs.",
    )
    untagged: Optional[StringList] = Field(
        default=None,
        alias="untagged",
        description="Interfaces with untagged membership in the VLANs.",
    )
    vlan_ids: Optional[NumberList] = Field(
        default=None,
        alias="vlan-ids",
        description="VLAN IDs covered by this entry.",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )


def interface_bridge_vlan_list(
    client: Transport, *, timeout: Deadline = DEFAULT_TIMEOUT
) -> list[InterfaceBridgeVlan]:
    """Fetch every ``interface/bridge/vlan`` record."""
    return list_records(client, PATH, InterfaceBridgeVlan, timeout=timeout)


def interface_bridge_vlan_patch(
    client: Transport,
    record_id: RecordID,
    update: InterfaceBridgeVlanUpdate,
    *,
    timeout: Deadline = DEFAULT_TIMEOUT,
) -> InterfaceBridgeVlan:
    """Apply *update* to the ``interface/bridge/vlan`` record *record_id*."""
    return patch_record(
        client, PATH, record_id, update, InterfaceBridgeVlan, timeout=timeout
    )
