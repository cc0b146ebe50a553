"""RouterOS ``interface/bridge/port`` records.

Bridge port settings.

Automatically generated by ros7api.generator from the schema description,
do not edit.
"""

from typing import Optional

from pydantic import Field

from ros7api.client.operations import list_records, patch_record
from ros7api.client.records import Record, RecordID, RecordUpdate
from ros7api.client.transport import DEFAULT_TIMEOUT, Deadline, Transport
from ros7api.codec import Boolean, Number, WireEnum


PATH = "interface/bridge/port"


class InterfaceBridgePort_FrameTypes(WireEnum):
    """Known values of ``frame-types``. Unlisted values are kept as they are."""

    ADMIT_ALL = "admit-all"
    ADMIT_ONLY_UNTAGGED_AND_PRIORITY_TAGGED = "admit-only-untagged-and-priority-tagged"
    ADMIT_ONLY_VLAN_TAGGED = "admit-only-vlan-tagged"


class InterfaceBridgePort(Record):
    """The ``interface/bridge/port`` record as returned by the device."""

    bridge: Optional[str] = Field(
        default=None,
        alias="bridge",
        description="The bridge interface the port belongs to.",
    )
    interface: Optional[str] = Field(
        default=None,
        alias="interface",
        description="Name of the interface added to the bridge.",
    )
    pvid: Optional[Number] = Field(
        default=None,
        alias="pvid",
        description="Port VLAN ID assigned to untagged ingress traffic.",
    )
    frame_types: Optional[InterfaceBridgePort_FrameTypes] = Field(
        default=None,
        alias="frame-types",
        description="Frame types accepted on ingress.",
    )
    ingress_filtering: Optional[Boolean] = Field(
        default=None,
        alias="ingress-filtering",
        description="Drop ingress frames whose VLAN is not configured on the port.",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )
    dynamic: Optional[Boolean] = Field(
        default=None,
        alias="dynamic",
    )
    inactive: Optional[Boolean] = Field(
        default=None,
        alias="inactive",
    )


class InterfaceBridgePortUpdate(RecordUpdate):
    """Changes to the ``interface/bridge/port`` record. Unset fields are left as they are."""

    bridge: Optional[str] = Field(
        default=None,
        alias="bridge",
        description="The bridge interface the port belongs to.",
    )
    interface: Optional[str] = Field(
        default=None,
        alias="interface",
        description="Name of the interface added to the bridge.",
    )
    pvid: Optional[Number] = Field(
        default=None,
        alias="pvid",
        description="Port VLAN ID assigned to untagged ingress traffic.",
    )
    frame_types: Optional[InterfaceBridgePort_FrameTypes] = Field(
        default=None,
        alias="frame-types",
        description="Frame types accepted on ingress.",
    )
    ingress_filtering: Optional[Boolean] = Field(
        default=None,
        alias="ingress-filtering",
        description="Drop ingress frames whose VLAN is not configured on the port.",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )


def interface_bridge_port_list(
    client: Transport, *, timeout: Deadline = DEFAULT_TIMEOUT
) -> list[InterfaceBridgePort]:
    """Fetch every ``interface/bridge/port`` record."""
    return list_records(client, PATH, InterfaceBridgePort, timeout=timeout)


def interface_bridge_port_patch(
    client: Transport,
    record_id: RecordID,
    update: InterfaceBridgePortUpdate,
    *,
    timeout: Deadline = DEFAULT_TIMEOUT,
) -> InterfaceBridgePort:
    """Apply *update* to the ``interface/bridge/port`` record *record_id*."""
    return patch_record(
        client, PATH, record_id, update, InterfaceBridgePort, timeout=timeout
    )
