import json

import pytest

from feather_sdk.core.wasm.tokenfactory import MsgCreateDenom
from feather_sdk.errors import MsgError


@pytest.fixture
def msg() -> MsgCreateDenom:
    return MsgCreateDenom("terra1abc", "mytoken")


def test_amino_round_trip(msg):
    amino = msg.to_amino()
    assert amino == {
        "type": "osmosis/tokenfactory/create-denom",
        "value": {"sender": "terra1abc", "subdenom": "mytoken"},
    }
    assert MsgCreateDenom.from_amino(amino) == msg


def test_data_round_trip(msg):
    data = msg.to_data()
    assert data == {
        "@type": "/cosmwasm.tokenfactory.v1beta1.MsgCreateDenom",
        "sender": "terra1abc",
        "subdenom": "mytoken",
    }
    assert MsgCreateDenom.from_data(data) == msg


def test_proto_wire_bytes(msg):
    assert msg.to_proto().SerializeToString() == b"\n\x09terra1abc\x12\x07mytoken"


def test_empty_fields_are_omitted_on_the_wire():
    assert MsgCreateDenom("", "").to_proto().SerializeToString() == b""
    assert MsgCreateDenom.from_proto(MsgCreateDenom("", "").to_proto()) == MsgCreateDenom("", "")


def test_pack_any(msg):
    packed = msg.pack_any()
    assert packed.type_url == "/cosmwasm.tokenfactory.v1beta1.MsgCreateDenom"
    assert MsgCreateDenom.unpack_any(packed) == msg


def test_json_views(msg):
    assert msg.to_amino_json() == (
        '{"type":"osmosis/tokenfactory/create-denom",'
        '"value":{"sender":"terra1abc","subdenom":"mytoken"}}'
    )
    assert msg.to_json() == (
        '{"@type":"/cosmwasm.tokenfactory.v1beta1.MsgCreateDenom",'
        '"sender":"terra1abc","subdenom":"mytoken"}'
    )
    assert json.loads(msg.to_json()) == msg.to_data()


def test_from_amino_requires_mapping():
    with pytest.raises(MsgError):
        MsgCreateDenom.from_amino("osmosis/tokenfactory/create-denom")
