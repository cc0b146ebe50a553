"""RouterOS REST client runtime.

Provides the pieces generated record modules are built on:

* :mod:`~ros7api.client.transport` -- :class:`Client`, the httpx-backed
  transport, and the :class:`Transport` protocol it satisfies.
* :mod:`~ros7api.client.records` -- :class:`Record` and :class:`RecordUpdate`,
  the base classes of generated models.
* :mod:`~ros7api.client.operations` -- :func:`list_records` and
  :func:`patch_record`, the List and Patch operations.

:meth:`Client.from_profile` with no argument connects to the active device
profile (see :func:`ros7api.config.resolve_profile`). A :class:`Client` can
also be built directly from an address and credentials.

Example::

    from ros7api.api import InterfaceBridgeVlanUpdate, interface_bridge_vlan_list, interface_bridge_vlan_patch
    from ros7api.client import Client

    with Client.from_profile() as client:
        for vlan in interface_bridge_vlan_list(client):
            if vlan.vlan_ids and 3005 in vlan.vlan_ids:
                interface_bridge_vlan_patch(
                    client, vlan.id, InterfaceBridgeVlanUpdate(tagged=[*(vlan.tagged or []), "ether8"])
                )
"""

from ros7api.client.operations import list_records, patch_record
from ros7api.client.records import Record, RecordID, RecordUpdate
from ros7api.client.transport import DEFAULT_TIMEOUT, Client, Deadline, Transport

__all__ = [
    "DEFAULT_TIMEOUT",
    "Client",
    "Deadline",
    "Record",
    "RecordID",
    "RecordUpdate",
    "Transport",
    "list_records",
    "patch_record",
]
