"""
feather_sdk.core.msg
====================

Dispatch incoming Amino / Data / packed-Any payloads to the message class
that understands them.

    Msg.from_amino({"type": "alliance/MsgClaimDelegationRewards", "value": {...}})
    Msg.from_data({"@type": "/alliance.alliance.MsgClaimDelegationRewards", ...})
    Msg.from_proto(any_msg)   # google.protobuf.Any
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Tuple, Type, Union

from ..errors import UnknownMessageError
from ..proto import Any as AnyProto
from ..utils.json import require
from .alliance.msgs import MsgClaimDelegationRewards
from .wasm.tokenfactory import MsgCreateDenom

log = logging.getLogger(__name__)

__all__ = ["Msg", "MsgType", "MSG_TYPES"]

MsgType = Union[MsgClaimDelegationRewards, MsgCreateDenom]

MSG_TYPES: Tuple[Type[Any], ...] = (
    MsgClaimDelegationRewards,
    MsgCreateDenom,
)

_BY_AMINO_TYPE: Dict[str, Type[Any]] = {cls.AMINO_TYPE: cls for cls in MSG_TYPES}
_BY_TYPE_URL: Dict[str, Type[Any]] = {cls.TYPE_URL: cls for cls in MSG_TYPES}


def _lookup(table: Dict[str, Type[Any]], key: str, kind: str) -> Type[Any]:
    try:
        cls = table[key]
    except (KeyError, TypeError):
        raise UnknownMessageError(f"unknown {kind}", msg_type=str(key)) from None
    log.debug("dispatching %s %s to %s", kind, key, cls.__name__)
    return cls


class Msg:
    """Namespace of dispatching constructors."""

    @staticmethod
    def from_amino(data: Mapping[str, Any]) -> MsgType:
        cls = _lookup(_BY_AMINO_TYPE, require(data, "type"), "amino type")
        return cls.from_amino(data)

    @staticmethod
    def from_data(data: Mapping[str, Any]) -> MsgType:
        cls = _lookup(_BY_TYPE_URL, require(data, "@type"), "@type")
        return cls.from_data(data)

    @staticmethod
    def from_proto(msg_any: AnyProto) -> MsgType:
        cls = _lookup(_BY_TYPE_URL, msg_any.type_url, "type_url")
        return cls.unpack_any(msg_any)
