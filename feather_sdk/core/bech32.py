"""
feather_sdk.core.bech32
=======================

Validation and derivation helpers for the five bech32 address families used
by the chain.

Format
------
Every address is a bech32 string ``<prefix>1<data><checksum>``. The prefix is
the chain's root prefix (e.g. "terra") followed by a family suffix:

    account address              terra1...
    account public key           terrapub1...
    validator operator address   terravaloper1...
    validator public key         terravaloperpub1...
    validator consensus address  terravalcons1...

Derivations only change the prefix; the 5-bit payload words are re-encoded
unchanged.

This module provides, per family (``AccAddress``, ``AccPubKey``, ``ValAddress``,
``ValPubKey``, ``ValConsAddress``):

- validate(data, prefix=None) -> bool   (never raises)
- get_prefix(address) -> str            (raises AddressError)
- from_*(source, prefix=None) -> str    (raises AddressError; not on ValConsAddress)

and the generic primitives ``decode``, ``encode`` and ``check_length``.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Pattern, Sequence, Tuple

from bech32 import bech32_decode, bech32_encode

from ..errors import AddressError

log = logging.getLogger(__name__)

__all__ = [
    "AddressFamily",
    "AccAddress",
    "AccPubKey",
    "ValAddress",
    "ValPubKey",
    "ValConsAddress",
    "decode",
    "encode",
    "check_length",
    "validate",
    "derive",
    "get_prefix",
]

# Upper bound on the full encoded string (BIP-0173).
MAX_LENGTH = 90


class AddressFamily(Enum):
    """Address families: (suffix appended to the root prefix, accepted word lengths)."""

    # 32 words for a 20-byte account, 52 words for a 32-byte contract account
    ACC_ADDRESS = ("", (32, 52))
    ACC_PUBKEY = ("pub", (32,))
    VAL_ADDRESS = ("valoper", (32,))
    VAL_PUBKEY = ("valoperpub", (32,))
    VAL_CONS_ADDRESS = ("valcons", (32,))

    def __init__(self, suffix: str, word_lengths: Tuple[int, ...]) -> None:
        self.suffix = suffix
        self.word_lengths = word_lengths

    @property
    def pattern(self) -> Optional[Pattern[str]]:
        """Prefix pattern checked when no explicit root prefix is given."""
        if not self.suffix:
            return None
        return _PATTERNS[self.suffix]

    def prefix_for(self, root: str) -> str:
        return f"{root}{self.suffix}"

    def strip_suffix(self, prefix: str) -> str:
        """Remove the family suffix from a decoded prefix (length based, unchecked)."""
        if not self.suffix:
            return prefix
        return prefix[: max(len(prefix) - len(self.suffix), 0)]


_PATTERNS = {
    fam.suffix: re.compile(rf"[a-z]{{2,20}}{fam.suffix}")
    for fam in AddressFamily
    if fam.suffix
}


# ---- Codec primitives --------------------------------------------------------


def decode(address: str) -> Tuple[str, List[int]]:
    """
    Decode a bech32 string into (prefix, words).

    Raises AddressError for anything the codec rejects: bad checksum, invalid
    characters, mixed case, missing separator or an overlong string.
    """
    if not isinstance(address, str):
        raise AddressError("address must be a string", address=repr(address))
    prefix, words = bech32_decode(address)
    if prefix is None or words is None:
        raise AddressError("invalid bech32 string", address=address)
    return prefix, list(words)


def encode(prefix: str, words: Sequence[int]) -> str:
    """Encode 5-bit `words` under `prefix` (lowercased)."""
    if not isinstance(prefix, str) or not prefix:
        raise AddressError("prefix must be a non-empty string", address=repr(prefix))
    if any(ord(c) < 33 or ord(c) > 126 for c in prefix):
        raise AddressError("invalid prefix", address=prefix)
    prefix = prefix.lower()
    words = list(words)
    if any(w < 0 or w > 31 for w in words):
        raise AddressError("words must be 5-bit integers (0..31)", address=prefix)
    if len(prefix) + 7 + len(words) > MAX_LENGTH:
        raise AddressError(f"encoded address exceeds {MAX_LENGTH} characters", address=prefix)
    return bech32_encode(prefix, words)


def check_length(data: str, length: int) -> Optional[str]:
    """
    Return the decoded prefix of `data` if its payload is exactly `length`
    words, otherwise None. Decode failures are reported as None.
    """
    try:
        prefix, words = decode(data)
    except AddressError as e:
        log.debug("bech32 decode failed: %s", e)
        return None
    return prefix if len(words) == length else None


# ---- Generic operations over AddressFamily ------------------------------------


def _decoded_prefix(family: AddressFamily, data: str) -> Optional[str]:
    for length in family.word_lengths:
        prefix = check_length(data, length)
        if prefix:
            return prefix
    return None


def validate(family: AddressFamily, data: str, prefix: Optional[str] = None) -> bool:
    """
    Check `data` against a family.

    With a root `prefix` the decoded prefix must equal ``prefix + suffix``;
    without one the decoded prefix must match the family's pattern (account
    addresses only need a valid length). Never raises.
    """
    decoded = _decoded_prefix(family, data)
    if decoded is None:
        return False
    if prefix:
        return decoded == family.prefix_for(prefix)
    pattern = family.pattern
    if pattern is None:
        return True
    return pattern.search(decoded) is not None


def derive(
    source: str,
    source_family: AddressFamily,
    target_family: AddressFamily,
    prefix: Optional[str] = None,
) -> str:
    """
    Re-encode the payload of `source` under the target family's prefix.

    The target prefix is ``prefix + target suffix``; when `prefix` is omitted
    the root prefix of `source` is used.
    """
    decoded, words = decode(source)
    root = prefix if prefix is not None else source_family.strip_suffix(decoded)
    return encode(target_family.prefix_for(root), words)


def get_prefix(family: AddressFamily, address: str) -> str:
    """Root prefix of `address` (decoded prefix minus the family suffix)."""
    decoded, _ = decode(address)
    return family.strip_suffix(decoded)


# ---- Per-family namespaces ---------------------------------------------------


class AccAddress:
    """`terra-` prefixed account address."""

    family = AddressFamily.ACC_ADDRESS

    @staticmethod
    def validate(data: str, prefix: Optional[str] = None) -> bool:
        """
        Checks if a string is a valid account address (normal or contract).

        :param data: string to check
        :param prefix: expected chain prefix
        """
        return validate(AddressFamily.ACC_ADDRESS, data, prefix)

    @staticmethod
    def from_val_address(address: str) -> str:
        """Converts a validator operator address into an account address."""
        return derive(address, AddressFamily.VAL_ADDRESS, AddressFamily.ACC_ADDRESS)

    @staticmethod
    def get_prefix(address: str) -> str:
        return get_prefix(AddressFamily.ACC_ADDRESS, address)


class AccPubKey:
    """`terrapub-` prefixed account public key."""

    family = AddressFamily.ACC_PUBKEY

    @staticmethod
    def validate(data: str, prefix: Optional[str] = None) -> bool:
        return validate(AddressFamily.ACC_PUBKEY, data, prefix)

    @staticmethod
    def from_acc_address(address: str, prefix: Optional[str] = None) -> str:
        """
        Converts an account address to an account pubkey.

        :param address: account address to convert
        :param prefix: chain prefix; defaults to the address's own
        """
        return derive(address, AddressFamily.ACC_ADDRESS, AddressFamily.ACC_PUBKEY, prefix)

    @staticmethod
    def get_prefix(address: str) -> str:
        return get_prefix(AddressFamily.ACC_PUBKEY, address)


class ValAddress:
    """`terravaloper-` prefixed validator operator address."""

    family = AddressFamily.VAL_ADDRESS

    @staticmethod
    def validate(data: str, prefix: Optional[str] = None) -> bool:
        return validate(AddressFamily.VAL_ADDRESS, data, prefix)

    @staticmethod
    def from_acc_address(address: str, prefix: Optional[str] = None) -> str:
        """
        Converts an account address to a validator operator address.

        :param address: account address to convert
        :param prefix: chain prefix; defaults to the address's own
        """
        return derive(address, AddressFamily.ACC_ADDRESS, AddressFamily.VAL_ADDRESS, prefix)

    @staticmethod
    def get_prefix(address: str) -> str:
        return get_prefix(AddressFamily.VAL_ADDRESS, address)


class ValPubKey:
    """`terravaloperpub-` prefixed validator public key."""

    family = AddressFamily.VAL_PUBKEY

    @staticmethod
    def validate(data: str, prefix: Optional[str] = None) -> bool:
        return validate(AddressFamily.VAL_PUBKEY, data, prefix)

    @staticmethod
    def from_val_address(val_address: str, prefix: Optional[str] = None) -> str:
        """Converts a validator operator address to a validator pubkey."""
        return derive(val_address, AddressFamily.VAL_ADDRESS, AddressFamily.VAL_PUBKEY, prefix)

    @staticmethod
    def get_prefix(address: str) -> str:
        return get_prefix(AddressFamily.VAL_PUBKEY, address)


class ValConsAddress:
    """`terravalcons-` prefixed validator consensus address."""

    family = AddressFamily.VAL_CONS_ADDRESS

    @staticmethod
    def validate(data: str, prefix: Optional[str] = None) -> bool:
        return validate(AddressFamily.VAL_CONS_ADDRESS, data, prefix)

    @staticmethod
    def get_prefix(address: str) -> str:
        return get_prefix(AddressFamily.VAL_CONS_ADDRESS, address)
