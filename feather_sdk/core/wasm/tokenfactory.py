"""
Messages of the x/tokenfactory module (as deployed alongside CosmWasm).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping

from google.protobuf.message import DecodeError

from ...proto import Any as AnyProto
from ...proto import MsgCreateDenom_pb
from ...errors import MsgError
from ...utils.json import JSONSerializable, require

__all__ = ["MsgCreateDenom"]


@dataclass
class MsgCreateDenom(JSONSerializable):
    """
    Create a new token denom `factory/{sender}/{subdenom}` owned by `sender`.
    """

    AMINO_TYPE: ClassVar[str] = "osmosis/tokenfactory/create-denom"
    TYPE_URL: ClassVar[str] = "/cosmwasm.tokenfactory.v1beta1.MsgCreateDenom"
    PROTO: ClassVar[Any] = MsgCreateDenom_pb

    sender: str
    subdenom: str

    def to_amino(self) -> Dict[str, Any]:
        return {
            "type": self.AMINO_TYPE,
            "value": {
                "sender": self.sender,
                "subdenom": self.subdenom,
            },
        }

    @classmethod
    def from_proto(cls, proto: Any) -> "MsgCreateDenom":
        return cls(proto.sender, proto.subdenom)

    def to_proto(self) -> Any:
        return MsgCreateDenom_pb(sender=self.sender, subdenom=self.subdenom)

    def pack_any(self) -> AnyProto:
        return AnyProto(type_url=self.TYPE_URL, value=self.to_proto().SerializeToString())

    @classmethod
    def unpack_any(cls, msg_any: AnyProto) -> "MsgCreateDenom":
        try:
            proto = MsgCreateDenom_pb.FromString(msg_any.value)
        except DecodeError as e:
            raise MsgError(f"corrupt protobuf payload: {e}", msg_type=cls.TYPE_URL) from e
        return cls.from_proto(proto)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "MsgCreateDenom":
        return cls(
            require(data, "sender", msg_type=cls.TYPE_URL),
            require(data, "subdenom", msg_type=cls.TYPE_URL),
        )

    def to_data(self) -> Dict[str, Any]:
        return {
            "@type": self.TYPE_URL,
            "sender": self.sender,
            "subdenom": self.subdenom,
        }

    @classmethod
    def from_amino(cls, data: Mapping[str, Any]) -> "MsgCreateDenom":
        value = require(data, "value", msg_type=cls.AMINO_TYPE)
        return cls(
            require(value, "sender", msg_type=cls.AMINO_TYPE),
            require(value, "subdenom", msg_type=cls.AMINO_TYPE),
        )
