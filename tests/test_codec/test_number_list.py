"""Tests for ros7api.codec.number_list -- RouterOS number-range lists."""

from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel

from ros7api.codec import NUMBER_LIST, NumberList
from ros7api.exceptions import DecodeError


WIRE = "123,280-290,200-300,1004,1005"


@pytest.fixture
def vlans() -> NumberList:
    return NumberList.parse(WIRE)


class TestParse:
    def test_keeps_input_order(self, vlans: NumberList) -> None:
        assert vlans.ranges == (
            (123, 123),
            (280, 290),
            (200, 300),
            (1004, 1004),
            (1005, 1005),
        )

    def test_unmodified_encodes_byte_identically(self, vlans: NumberList) -> None:
        assert str(vlans) == WIRE
        assert NUMBER_LIST.encode(vlans) == WIRE

    def test_single_number(self) -> None:
        assert NumberList.parse("1337").ranges == ((1337, 1337),)

    @pytest.mark.parametrize(
        "wire",
        ["", "abc", "1,,2", "1-2-3", "5-5", "10-5", "1-", "-1", "1-x", " 1"],
    )
    def test_rejects_invalid(self, wire: str) -> None:
        with pytest.raises(DecodeError):
            NumberList.parse(wire)


class TestMutation:
    def test_optimize_sorts_and_merges(self, vlans: NumberList) -> None:
        vlans.optimize()
        assert vlans.ranges == ((123, 123), (200, 300), (1004, 1005))
        assert str(vlans) == "123,200-300,1004-1005"

    def test_add_sequence(self, vlans: NumberList) -> None:
        vlans.optimize()
        vlans.add(150)
        vlans.add(124)
        for _ in range(3):
            vlans.add(150)
        vlans.add(124)
        vlans.add_range(299, 303)
        assert str(vlans) == "123-124,150,200-303,1004-1005"

    def test_any_mutation_normalises(self, vlans: NumberList) -> None:
        vlans.add(123)
        assert str(vlans) == "123,200-300,1004-1005"

    def test_remove_splits_range(self, vlans: NumberList) -> None:
        vlans.optimize()
        vlans.remove(254)
        assert vlans.ranges == ((123, 123), (200, 253), (255, 300), (1004, 1005))
        assert vlans.contains(253)
        assert not vlans.contains(254)
        assert vlans.contains(255)

    def test_remove_then_add_restores(self, vlans: NumberList) -> None:
        vlans.optimize()
        vlans.remove(254)
        vlans.add(254)
        assert str(vlans) == "123,200-300,1004-1005"

    def test_remove_bounds(self) -> None:
        values = NumberList.parse("10-12")
        values.remove(10)
        values.remove(12)
        assert str(values) == "11"
        values.remove(11)
        assert str(values) == ""

    def test_remove_absent_value(self) -> None:
        values = NumberList.parse("10-12")
        values.remove(50)
        assert str(values) == "10-12"

    def test_add_range_inverted_fails_unchanged(self, vlans: NumberList) -> None:
        with pytest.raises(ValueError):
            vlans.add_range(10, 5)
        assert str(vlans) == WIRE

    def test_add_range_single_value(self) -> None:
        values = NumberList()
        values.add_range(7, 7)
        assert str(values) == "7"

    def test_constructor_rejects_inverted(self) -> None:
        with pytest.raises(ValueError):
            NumberList([(3, 1)])

    def test_add_outside_64_bit_fails_unchanged(self) -> None:
        values = NumberList.parse("1")
        with pytest.raises(ValueError, match="64-bit"):
            values.add(2**63)
        assert str(values) == "1"
        assert NUMBER_LIST.decode(NUMBER_LIST.encode(values)) == values

    def test_add_range_outside_64_bit_fails_unchanged(self, vlans: NumberList) -> None:
        with pytest.raises(ValueError, match="64-bit"):
            vlans.add_range(-(2**63) - 1, 0)
        assert str(vlans) == WIRE

    def test_constructor_rejects_outside_64_bit(self) -> None:
        with pytest.raises(ValueError, match="64-bit"):
            NumberList([(1, 2**63)])

    def test_64_bit_limits_accepted(self) -> None:
        values = NumberList()
        values.add(2**63 - 1)
        assert str(values) == "9223372036854775807"


class TestProtocols:
    def test_in_operator(self, vlans: NumberList) -> None:
        assert 285 in vlans
        assert 301 not in vlans
        assert "285" not in vlans

    def test_iteration_yields_pairs(self) -> None:
        assert list(NumberList.parse("1,3-4")) == [(1, 1), (3, 4)]

    def test_equality_compares_stored_ranges(self) -> None:
        assert NumberList.parse("1-2") == NumberList([(1, 2)])
        assert NumberList.parse("1,2") != NumberList.parse("1-2")

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(NumberList())

    def test_repr(self) -> None:
        assert repr(NumberList.parse("1-2")) == "NumberList('1-2')"


class TestPydanticIntegration:
    class Model(BaseModel):
        vlan_ids: Optional[NumberList] = None

    def test_decode_from_wire(self) -> None:
        model = self.Model.model_validate({"vlan_ids": "10,20-29"})
        assert model.vlan_ids == NumberList([(10, 10), (20, 29)])

    def test_accepts_instance(self) -> None:
        values = NumberList([(5, 6)])
        assert self.Model(vlan_ids=values).vlan_ids is values

    def test_encode_to_wire(self) -> None:
        model = self.Model(vlan_ids=NumberList.parse("1337"))
        assert model.model_dump(mode="json") == {"vlan_ids": "1337"}

    def test_invalid_wire_raises_decode_error(self) -> None:
        with pytest.raises(DecodeError):
            self.Model.model_validate({"vlan_ids": "10-5"})
