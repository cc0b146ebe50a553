"""Tests for ros7api.client.operations -- List and Patch."""

from __future__ import annotations

import json
from typing import Any

import pytest

from ros7api.api import (
    InterfaceBridgePort_FrameTypes,
    InterfaceBridgePortUpdate,
    InterfaceBridgeVlan,
    InterfaceBridgeVlanUpdate,
    interface_bridge_port_list,
    interface_bridge_port_patch,
    interface_bridge_vlan_list,
    interface_bridge_vlan_patch,
)
from ros7api.client import RecordID, list_records, patch_record
from ros7api.client.transport import DEFAULT_TIMEOUT
from ros7api.codec import NumberList
from ros7api.exceptions import DecodeError, ServerError, TransportError


VLAN = {
    ".id": "*1",
    "bridge": "bridge1",
    "disabled": "false",
    "dynamic": "false",
    "tagged": "ether1,ether2",
    "untagged": "",
    "vlan-ids": "100,105-110",
    "current-tagged": "ether1",
    "current-untagged": "",
    "comment": "",
}


class FakeTransport:
    """Records calls and replays canned response bodies."""

    def __init__(self, body: Any = None, raw: bytes | None = None, exc: Exception | None = None):
        self.raw = raw if raw is not None else json.dumps(body).encode()
        self.exc = exc
        self.calls: list[tuple[str, str, bytes | None, Any]] = []

    def get(self, path: str, *, timeout: Any = DEFAULT_TIMEOUT) -> bytes:
        self.calls.append(("GET", path, None, timeout))
        if self.exc:
            raise self.exc
        return self.raw

    def patch(self, path: str, body: bytes, *, timeout: Any = DEFAULT_TIMEOUT) -> bytes:
        self.calls.append(("PATCH", path, body, timeout))
        if self.exc:
            raise self.exc
        return self.raw


class TestList:
    def test_decodes_records_in_order(self) -> None:
        second = dict(VLAN, **{".id": "*2", "vlan-ids": "200"})
        transport = FakeTransport([VLAN, second])

        vlans = interface_bridge_vlan_list(transport)

        assert [v.id for v in vlans] == ["*1", "*2"]
        assert vlans[0].vlan_ids == NumberList([(100, 100), (105, 110)])
        assert vlans[0].untagged == [""]
        assert transport.calls == [("GET", "interface/bridge/vlan", None, DEFAULT_TIMEOUT)]

    def test_empty_list(self) -> None:
        assert interface_bridge_vlan_list(FakeTransport([])) == []

    def test_timeout_passed_through(self) -> None:
        transport = FakeTransport([])
        interface_bridge_vlan_list(transport, timeout=2.5)
        assert transport.calls[0][3] == 2.5

    def test_bad_value_fails_whole_call(self) -> None:
        bad = dict(VLAN, **{".id": "*2", "disabled": "maybe"})
        with pytest.raises(DecodeError, match="interface/bridge/vlan: invalid boolean"):
            interface_bridge_vlan_list(FakeTransport([VLAN, bad]))

    def test_missing_id(self) -> None:
        item = {k: v for k, v in VLAN.items() if k != ".id"}
        with pytest.raises(DecodeError, match="invalid InterfaceBridgeVlan"):
            interface_bridge_vlan_list(FakeTransport([item]))

    def test_error_object(self) -> None:
        transport = FakeTransport({"error": 400, "message": "Bad Request", "detail": "no such command"})
        with pytest.raises(ServerError) as excinfo:
            interface_bridge_vlan_list(transport)
        assert excinfo.value.code == 400
        assert excinfo.value.detail == "no such command"

    def test_non_array(self) -> None:
        with pytest.raises(DecodeError, match="expected a JSON array"):
            interface_bridge_vlan_list(FakeTransport({}))

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError, match="not valid JSON"):
            interface_bridge_vlan_list(FakeTransport(raw=b"<html>"))

    def test_transport_error_propagates(self) -> None:
        with pytest.raises(TransportError):
            interface_bridge_vlan_list(FakeTransport(exc=TransportError("refused")))

    def test_generic_helper(self) -> None:
        vlans = list_records(FakeTransport([VLAN]), "interface/bridge/vlan", InterfaceBridgeVlan)
        assert vlans[0].bridge == "bridge1"


class TestPatch:
    def test_sends_only_set_fields(self) -> None:
        response = dict(VLAN, error=0, disabled="true")
        transport = FakeTransport(response)
        update = InterfaceBridgeVlanUpdate(disabled=True)

        vlan = interface_bridge_vlan_patch(transport, RecordID("*1"), update, timeout=5)

        assert vlan.disabled is True
        assert transport.calls == [
            ("PATCH", "interface/bridge/vlan/*1", b'{"disabled":"true"}', 5)
        ]

    def test_response_without_status_fields(self) -> None:
        vlan = interface_bridge_vlan_patch(
            FakeTransport(VLAN), RecordID("*1"), InterfaceBridgeVlanUpdate(comment="x")
        )
        assert vlan.id == "*1"

    def test_server_error_wins_over_record(self) -> None:
        response = dict(
            VLAN, error=400, message="Bad Request", detail="failure: vlan-ids out of range"
        )
        with pytest.raises(ServerError) as excinfo:
            interface_bridge_vlan_patch(
                FakeTransport(response), RecordID("*1"), InterfaceBridgeVlanUpdate()
            )
        exc = excinfo.value
        assert exc.code == 400
        assert exc.message == "Bad Request"
        assert exc.detail == "failure: vlan-ids out of range"
        assert str(exc) == "server error 400: Bad Request: failure: vlan-ids out of range"

    def test_server_error_with_malformed_record(self) -> None:
        response = {"error": 500, "message": "Internal", "disabled": "garbage"}
        with pytest.raises(ServerError):
            interface_bridge_vlan_patch(
                FakeTransport(response), RecordID("*1"), InterfaceBridgeVlanUpdate()
            )

    def test_array_response(self) -> None:
        with pytest.raises(DecodeError, match="expected a JSON object"):
            interface_bridge_vlan_patch(
                FakeTransport([VLAN]), RecordID("*1"), InterfaceBridgeVlanUpdate()
            )

    def test_malformed_status(self) -> None:
        with pytest.raises(DecodeError, match="invalid status fields"):
            interface_bridge_vlan_patch(
                FakeTransport({"error": "boom"}), RecordID("*1"), InterfaceBridgeVlanUpdate()
            )

    def test_generic_helper(self) -> None:
        transport = FakeTransport(VLAN)
        patch_record(
            transport,
            "interface/bridge/vlan",
            RecordID("*7"),
            InterfaceBridgeVlanUpdate(bridge="bridge2"),
            InterfaceBridgeVlan,
        )
        assert transport.calls[0][1] == "interface/bridge/vlan/*7"
        assert transport.calls[0][2] == b'{"bridge":"bridge2"}'


class TestEnumerations:
    PORT = {".id": "*1", "bridge": "bridge1", "interface": "ether2", "frame-types": "admit-all"}

    def test_listed_value_decodes_to_member(self) -> None:
        ports = interface_bridge_port_list(FakeTransport([self.PORT]))
        assert ports[0].frame_types is InterfaceBridgePort_FrameTypes.ADMIT_ALL
        assert ports[0].frame_types.is_known

    def test_unlisted_value_is_kept(self) -> None:
        newer = dict(self.PORT, **{".id": "*2", "frame-types": "admit-something-new"})
        ports = interface_bridge_port_list(FakeTransport([self.PORT, newer]))

        frame_types = ports[1].frame_types
        assert isinstance(frame_types, InterfaceBridgePort_FrameTypes)
        assert frame_types.value == "admit-something-new"
        assert frame_types == "admit-something-new"
        assert not frame_types.is_known

    def test_unlisted_value_round_trips_through_patch(self) -> None:
        transport = FakeTransport(dict(self.PORT, **{"frame-types": "admit-something-new"}))
        update = InterfaceBridgePortUpdate(frame_types="admit-something-new")

        port = interface_bridge_port_patch(transport, RecordID("*1"), update)

        assert transport.calls[0][2] == b'{"frame-types":"admit-something-new"}'
        assert port.frame_types.value == "admit-something-new"
