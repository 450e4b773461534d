"""
Tests for dict / YAML rendering of variant values.
"""

import ipaddress

import pytest
from enumatch.coin import Coin, Penny, Quarter, StateCoin, UsState
from enumatch.ip import IpAddrStd, IpAddrTypes, IpV4Octets, parse
from enumatch.message import Message, Move
from enumatch.option import NOTHING, Option, Some
from enumatch.serialization import (
    variant_from_dict,
    variant_from_yaml,
    variant_to_dict,
    variant_to_yaml,
)


class TestToDict:
    """Test the dict rendering."""

    def test_enum_member(self):
        assert variant_to_dict(Coin.DIME) == {"tag": "DIME"}

    def test_unit_variant(self):
        assert variant_to_dict(Penny()) == {"tag": "Penny"}

    def test_nested_variant(self):
        """Nested enum payloads render recursively."""
        assert variant_to_dict(Quarter(UsState.VIRGINIA)) == {
            "tag": "Quarter",
            "state": {"tag": "VIRGINIA"},
        }

    def test_named_fields(self):
        assert variant_to_dict(Move(x=1, y=2)) == {"tag": "Move", "x": 1, "y": 2}

    def test_address_payload(self):
        assert variant_to_dict(parse("::1")) == {"tag": "V6", "address": "::1"}


class TestFromDict:
    """Test rebuilding values."""

    def test_nested(self):
        d = {"tag": "Quarter", "state": {"tag": "TEXAS"}}
        assert variant_from_dict(d, StateCoin) == Quarter(UsState.TEXAS)

    def test_address(self):
        value = variant_from_dict({"tag": "V4", "address": "10.0.0.1"}, IpAddrStd)
        assert value.address == ipaddress.IPv4Address("10.0.0.1")

    def test_option(self):
        assert variant_from_dict({"tag": "Some", "value": 5}, Option) == Some(5)
        assert variant_from_dict({"tag": "Nothing"}, Option) == NOTHING

    def test_unknown_tag(self):
        with pytest.raises(ValueError, match="Unknown tag"):
            variant_from_dict({"tag": "Shout"}, Message)

    def test_missing_payload_field(self):
        """A dict without a declared field is rejected with ValueError."""
        with pytest.raises(ValueError, match="missing payload fields: y"):
            variant_from_dict({"tag": "Move", "x": 1}, Message)

    def test_not_a_tagged_dict(self):
        with pytest.raises(ValueError, match="'tag' key"):
            variant_from_dict(["Penny"], StateCoin)
        with pytest.raises(ValueError, match="'tag' key"):
            variant_from_yaml("just text", StateCoin)


class TestGenericPayload:
    """Test tagged values stored inside Some."""

    def test_variant_inside_some(self):
        """A quarter inside Some comes back as a Quarter."""
        value = Some(Quarter(UsState.TEXAS))
        restored = variant_from_yaml(variant_to_yaml(value), Option, payload=StateCoin)
        assert restored == value
        assert isinstance(restored.value, Quarter)

    def test_nothing_inside_some(self):
        value = Some(NOTHING)
        assert variant_from_yaml(variant_to_yaml(value), Option, payload=Option) == value

    def test_enum_inside_some(self):
        value = Some(Coin.DIME)
        assert variant_from_dict(variant_to_dict(value), Option, payload=Coin) == value

    def test_tagged_payload_needs_closed_set(self):
        """Without payload= a tagged generic value is an error, not a raw dict."""
        with pytest.raises(ValueError, match="needs its closed set"):
            variant_from_dict({"tag": "Some", "value": {"tag": "Penny"}}, Option)

    def test_plain_payload_needs_nothing(self):
        assert variant_from_dict({"tag": "Some", "value": "e"}, Option) == Some("e")


def test_yaml_roundtrip():
    for value, closed in [
        (Quarter(UsState.NEW_MEXICO), StateCoin),
        (IpV4Octets(192, 168, 1, 1), IpAddrTypes),
        (Move(x=-5, y=7), Message),
        (Coin.NICKEL, Coin),
    ]:
        text = variant_to_yaml(value)
        assert text.startswith("tag:")
        assert variant_from_yaml(text, closed) == value
