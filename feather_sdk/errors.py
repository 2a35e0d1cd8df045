"""
Typed error classes for the Python SDK.

These are raised by the address codec, the message classes and the message
dispatcher so callers can catch specific failure modes while still being able
to catch the base `FeatherSdkError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "FeatherSdkError",
    "AddressError",
    "MsgError",
    "UnknownMessageError",
]


class FeatherSdkError(Exception):
    """Base class for all SDK errors."""


@dataclass
class AddressError(FeatherSdkError, ValueError):
    """
    Raised when a bech32 address cannot be decoded or encoded.

    Fields:
      - reason: human-readable description
      - address: the offending input (may be a prefix when encoding)
    """

    reason: str
    address: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.address is None:
            return f"AddressError: {self.reason}"
        return f"AddressError: {self.reason} (address={self.address!r})"


@dataclass
class MsgError(FeatherSdkError, ValueError):
    """
    Raised when an Amino/Data/Proto payload cannot be turned into a message.

    Typical causes: a missing field, a non-mapping payload.
    """

    message: str
    msg_type: Optional[str] = None
    field: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = []
        if self.msg_type:
            where.append(f"type={self.msg_type}")
        if self.field:
            where.append(f"field={self.field}")
        where_s = (" [" + ", ".join(where) + "]") if where else ""
        return f"MsgError{where_s}: {self.message}"


class UnknownMessageError(MsgError):
    """Raised by the dispatcher when no message class handles a type."""
