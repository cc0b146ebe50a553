"""Typed access to RouterOS menus.

Automatically generated by ros7api.generator from the schema description,
do not edit.
"""

from .interface_bridge_port import (
    InterfaceBridgePort,
    InterfaceBridgePortUpdate,
    InterfaceBridgePort_FrameTypes,
    interface_bridge_port_list,
    interface_bridge_port_patch,
)
from .interface_bridge_vlan import (
    InterfaceBridgeVlan,
    InterfaceBridgeVlanUpdate,
    interface_bridge_vlan_list,
    interface_bridge_vlan_patch,
)
from .ip_address import (
    IpAddress,
    IpAddressUpdate,
    ip_address_list,
    ip_address_patch,
)

__all__ = [
    "InterfaceBridgePort",
    "InterfaceBridgePortUpdate",
    "InterfaceBridgePort_FrameTypes",
    "InterfaceBridgeVlan",
    "InterfaceBridgeVlanUpdate",
    "IpAddress",
    "IpAddressUpdate",
    "interface_bridge_port_list",
    "interface_bridge_port_patch",
    "interface_bridge_vlan_list",
    "interface_bridge_vlan_patch",
    "ip_address_list",
    "ip_address_patch",
]
