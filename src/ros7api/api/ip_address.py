"""RouterOS ``ip/address`` records.

IP addresses assigned to interfaces.

Automatically generated by ros7api.generator from the schema description,
do not edit.
"""

from typing import Optional

from pydantic import Field

from ros7api.client.operations import list_records, patch_record
from ros7api.client.records import Record, RecordID, RecordUpdate
from ros7api.client.transport import DEFAULT_TIMEOUT, Deadline, Transport
from ros7api.codec import Boolean, IPAddress, IPNetwork


PATH = "ip/address"


class IpAddress(Record):
    """The ``ip/address`` record as returned by the device."""

    address: Optional[IPNetwork] = Field(
        default=None,
        alias="address",
        description="Host address with prefix length, e.g. 192.168.88.1/24.",
    )
    network: Optional[IPAddress] = Field(
        default=None,
        alias="network",
        description="Network address of the assigned prefix.",
    )
    interface: Optional[str] = Field(
        default=None,
        alias="interface",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )
    actual_interface: Optional[str] = Field(
        default=None,
        alias="actual-interface",
    )
    dynamic: Optional[Boolean] = Field(
        default=None,
        alias="dynamic",
    )
    invalid: Optional[Boolean] = Field(
        default=None,
        alias="invalid",
    )


class IpAddressUpdate(RecordUpdate):
    """Changes to the ``ip/address`` record. Unset fields are left as they are."""

    address: Optional[IPNetwork] = Field(
        default=None,
        alias="address",
        description="Host address with prefix length, e.g. 192.168.88.1/24.",
    )
    network: Optional[IPAddress] = Field(
        default=None,
        alias="network",
        description="Network address of the assigned prefix.",
    )
    interface: Optional[str] = Field(
        default=None,
        alias="interface",
    )
    disabled: Optional[Boolean] = Field(
        default=None,
        alias="disabled",
    )
    comment: Optional[str] = Field(
        default=None,
        alias="comment",
    )


def ip_address_list(
    client: Transport, *, timeout: Deadline = DEFAULT_TIMEOUT
) -> list[IpAddress]:
    """Fetch every ``ip/address`` record."""
    return list_records(client, PATH, IpAddress, timeout=timeout)


def ip_address_patch(
    client: Transport,
    record_id: RecordID,
    update: IpAddressUpdate,
    *,
    timeout: Deadline = DEFAULT_TIMEOUT,
) -> IpAddress:
    """Apply *update* to the ``ip/address`` record *record_id*."""
    return patch_record(
        client, PATH, record_id, update, IpAddress, timeout=timeout
    )
