"""
Messages of the x/alliance module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping

from google.protobuf.message import DecodeError

from ...proto import Any as AnyProto
from ...proto import MsgClaimDelegationRewards_pb
from ...errors import MsgError
from ...utils.json import JSONSerializable, require

__all__ = ["MsgClaimDelegationRewards"]


@dataclass
class MsgClaimDelegationRewards(JSONSerializable):
    """
    A delegator can withdraw currently outstanding rewards accrued from their
    delegation toward a validator by submitting this message to x/alliance.

    The rewards are deposited to the delegator's withdraw address.

    Fields:
      - delegator_address: delegator's account address
      - validator_address: validator's operator address
      - denom: alliance denom to claim rewards for (e.g. ibc/AAE7E4... or uluna)
    """

    AMINO_TYPE: ClassVar[str] = "alliance/MsgClaimDelegationRewards"
    TYPE_URL: ClassVar[str] = "/alliance.alliance.MsgClaimDelegationRewards"
    PROTO: ClassVar[Any] = MsgClaimDelegationRewards_pb

    delegator_address: str
    validator_address: str
    denom: str

    @classmethod
    def from_amino(cls, data: Mapping[str, Any]) -> "MsgClaimDelegationRewards":
        value = require(data, "value", msg_type=cls.AMINO_TYPE)
        return cls(
            require(value, "delegatorAddress", msg_type=cls.AMINO_TYPE),
            require(value, "validatorAddress", msg_type=cls.AMINO_TYPE),
            require(value, "denom", msg_type=cls.AMINO_TYPE),
        )

    def to_amino(self) -> Dict[str, Any]:
        return {
            "type": self.AMINO_TYPE,
            "value": {
                "delegatorAddress": self.delegator_address,
                "validatorAddress": self.validator_address,
                "denom": self.denom,
            },
        }

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "MsgClaimDelegationRewards":
        return cls(
            require(data, "delegatorAddress", msg_type=cls.TYPE_URL),
            require(data, "validatorAddress", msg_type=cls.TYPE_URL),
            require(data, "denom", msg_type=cls.TYPE_URL),
        )

    def to_data(self) -> Dict[str, Any]:
        return {
            "@type": self.TYPE_URL,
            "delegatorAddress": self.delegator_address,
            "validatorAddress": self.validator_address,
            "denom": self.denom,
        }

    @classmethod
    def from_proto(cls, proto: Any) -> "MsgClaimDelegationRewards":
        return cls(proto.delegator_address, proto.validator_address, proto.denom)

    def to_proto(self) -> Any:
        return MsgClaimDelegationRewards_pb(
            delegator_address=self.delegator_address,
            validator_address=self.validator_address,
            denom=self.denom,
        )

    def pack_any(self) -> AnyProto:
        return AnyProto(type_url=self.TYPE_URL, value=self.to_proto().SerializeToString())

    @classmethod
    def unpack_any(cls, msg_any: AnyProto) -> "MsgClaimDelegationRewards":
        try:
            proto = MsgClaimDelegationRewards_pb.FromString(msg_any.value)
        except DecodeError as e:
            raise MsgError(f"corrupt protobuf payload: {e}", msg_type=cls.TYPE_URL) from e
        return cls.from_proto(proto)
