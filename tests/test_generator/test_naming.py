"""Tests for ros7api.generator.naming -- identifier derivation."""

from __future__ import annotations

import pytest

from ros7api.generator.naming import (
    attribute_name,
    enum_member_name,
    enum_type_name,
    module_name,
    pascal_name,
    type_name,
)


class TestPascalName:
    @pytest.mark.parametrize(
        "wire, expected",
        [
            ("vlan-ids", "VlanIds"),
            ("bridge", "Bridge"),
            ("current-tagged", "CurrentTagged"),
            ("l2mtu", "L2mtu"),
            ("a--b", "AB"),
        ],
    )
    def test_derivation(self, wire: str, expected: str) -> None:
        assert pascal_name(wire) == expected


class TestTypeName:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("interface/bridge/vlan", "InterfaceBridgeVlan"),
            ("ip/address", "IpAddress"),
            ("ip/dhcp-server/lease", "IpDhcpServerLease"),
        ],
    )
    def test_derivation(self, path: str, expected: str) -> None:
        assert type_name(path) == expected

    def test_enum_type_name(self) -> None:
        assert enum_type_name("InterfaceBridgePort", "FrameTypes") == (
            "InterfaceBridgePort_FrameTypes"
        )


class TestAttributeName:
    @pytest.mark.parametrize(
        "identifier, expected",
        [
            ("VlanIds", "vlan_ids"),
            ("Bridge", "bridge"),
            ("L2mtu", "l2mtu"),
            ("MACAddress", "mac_address"),
            ("From", "from_"),
            ("Copy", "copy_"),
            ("Id", "id_"),
            ("Schema", "schema_"),
            ("802Ad", "n802_ad"),
            ("", "value"),
        ],
    )
    def test_derivation(self, identifier: str, expected: str) -> None:
        assert attribute_name(identifier) == expected


class TestModuleName:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("interface/bridge/vlan", "interface_bridge_vlan"),
            ("ip/dhcp-server", "ip_dhcp_server"),
            ("ip/import", "ip_import"),
            ("6to4", "n6to4"),
        ],
    )
    def test_derivation(self, path: str, expected: str) -> None:
        assert module_name(path) == expected


class TestEnumMemberName:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("admit-all", "ADMIT_ALL"),
            ("admit-only-vlan-tagged", "ADMIT_ONLY_VLAN_TAGGED"),
            ("802.3ad", "V_802_3AD"),
            ("", "EMPTY"),
            ("--", "EMPTY"),
        ],
    )
    def test_derivation(self, value: str, expected: str) -> None:
        assert enum_member_name(value) == expected
