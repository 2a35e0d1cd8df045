"""Protobuf message classes (`*_pb`) and the well-known `Any` wrapper."""

from google.protobuf.any_pb2 import Any  # noqa: F401

from .registry import MsgClaimDelegationRewards as MsgClaimDelegationRewards_pb  # noqa: F401
from .registry import MsgCreateDenom as MsgCreateDenom_pb  # noqa: F401

__all__ = ["Any", "MsgClaimDelegationRewards_pb", "MsgCreateDenom_pb"]
