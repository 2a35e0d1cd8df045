import pytest

from feather_sdk.core.msg import MSG_TYPES, Msg
from feather_sdk.errors import MsgError, UnknownMessageError
from feather_sdk.proto import Any
from feather_sdk import MsgClaimDelegationRewards, MsgCreateDenom

MESSAGES = [
    MsgClaimDelegationRewards("terra1delegator", "terravaloper1validator", "uluna"),
    MsgCreateDenom("terra1abc", "mytoken"),
]


@pytest.mark.parametrize("msg", MESSAGES, ids=lambda m: type(m).__name__)
def test_dispatch_every_representation(msg):
    assert Msg.from_amino(msg.to_amino()) == msg
    assert Msg.from_data(msg.to_data()) == msg
    assert Msg.from_proto(msg.pack_any()) == msg


def test_registered_types_are_unique():
    assert len({cls.AMINO_TYPE for cls in MSG_TYPES}) == len(MSG_TYPES)
    assert len({cls.TYPE_URL for cls in MSG_TYPES}) == len(MSG_TYPES)


def test_unknown_types_raise():
    with pytest.raises(UnknownMessageError):
        Msg.from_amino({"type": "bank/MsgSend", "value": {}})
    with pytest.raises(UnknownMessageError):
        Msg.from_data({"@type": "/cosmos.bank.v1beta1.MsgSend"})
    with pytest.raises(UnknownMessageError):
        Msg.from_proto(Any(type_url="/cosmos.bank.v1beta1.MsgSend", value=b""))


def test_unknown_type_error_is_a_msg_error():
    with pytest.raises(MsgError):
        Msg.from_data({"@type": ["not", "hashable"]})


def test_missing_discriminator():
    with pytest.raises(MsgError) as ei:
        Msg.from_amino({"value": {}})
    assert ei.value.field == "type"


@pytest.mark.parametrize("cls", MSG_TYPES, ids=lambda c: c.__name__)
def test_from_proto_rejects_corrupt_bytes(cls):
    with pytest.raises(MsgError) as exc:
        Msg.from_proto(Any(type_url=cls.TYPE_URL, value=b"\xff"))
    assert exc.value.msg_type == cls.TYPE_URL
