"""
Protobuf schemas for the chain messages this SDK speaks.

The file descriptors are assembled here (instead of shipping protoc output)
and loaded into a private DescriptorPool, so the generated classes never clash
with other packages registering the same proto files in the default pool.
Only proto3 scalar `string` fields are needed by the current messages.
"""

from __future__ import annotations

import logging
from typing import Dict, Sequence, Type

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

log = logging.getLogger(__name__)

__all__ = ["POOL", "message_class", "MsgClaimDelegationRewards", "MsgCreateDenom"]

POOL = descriptor_pool.DescriptorPool()

_FieldDescriptorProto = descriptor_pb2.FieldDescriptorProto


def _add_file(name: str, package: str, messages: Dict[str, Sequence[str]]) -> None:
    """Register a proto3 file whose messages carry string fields numbered from 1."""
    fdp = descriptor_pb2.FileDescriptorProto(name=name, package=package, syntax="proto3")
    for msg_name, fields in messages.items():
        msg = fdp.message_type.add(name=msg_name)
        for number, field_name in enumerate(fields, start=1):
            msg.field.add(
                name=field_name,
                number=number,
                type=_FieldDescriptorProto.TYPE_STRING,
                label=_FieldDescriptorProto.LABEL_OPTIONAL,
            )
    POOL.AddSerializedFile(fdp.SerializeToString())
    log.debug("registered proto file %s (%d messages)", name, len(messages))


def message_class(full_name: str) -> Type[Message]:
    """Concrete message class for a fully qualified proto name."""
    return message_factory.GetMessageClass(POOL.FindMessageTypeByName(full_name))


_add_file(
    "alliance/alliance/tx.proto",
    "alliance.alliance",
    {"MsgClaimDelegationRewards": ("delegator_address", "validator_address", "denom")},
)
_add_file(
    "cosmwasm/tokenfactory/v1beta1/tx.proto",
    "cosmwasm.tokenfactory.v1beta1",
    {"MsgCreateDenom": ("sender", "subdenom")},
)

MsgClaimDelegationRewards = message_class("alliance.alliance.MsgClaimDelegationRewards")
MsgCreateDenom = message_class("cosmwasm.tokenfactory.v1beta1.MsgCreateDenom")
