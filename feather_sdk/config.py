"""
SDK configuration: bech32 root prefix, chain id and log level.

- Loads sane defaults and supports overrides via environment variables (FEATHER_*).
- Validates the prefix so that derived addresses stay encodable.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_DEFAULT_PREFIX = "terra"
_DEFAULT_CHAIN_ID = "phoenix-1"
_DEFAULT_LOG_LEVEL = "WARNING"

# bech32 human-readable parts are 1..83 printable chars; roots we derive from
# must stay lowercase so the family suffixes can be appended.
_PREFIX_RE = re.compile(r"^[a-z0-9]{1,72}$")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None and v != "" else default


def _check_prefix(prefix: str) -> str:
    if not _PREFIX_RE.match(prefix):
        raise ValueError(f"bech32 prefix must be lowercase alphanumeric, got: {prefix!r}")
    return prefix


def _check_log_level(level: str) -> str:
    norm = str(level).strip().upper()
    if norm not in _LOG_LEVELS:
        raise ValueError(f"log level must be one of {_LOG_LEVELS}, got: {level!r}")
    return norm


@dataclass(slots=True)
class SDKConfig:
    bech32_prefix: str = field(default=_DEFAULT_PREFIX)
    chain_id: str = field(default=_DEFAULT_CHAIN_ID)
    log_level: str = field(default=_DEFAULT_LOG_LEVEL)

    @classmethod
    def from_env(cls, prefix: str = "FEATHER_") -> "SDKConfig":
        """
        Create config from environment variables:

        FEATHER_BECH32_PREFIX   (root account prefix, e.g. "terra")
        FEATHER_CHAIN_ID        (str)
        FEATHER_LOG_LEVEL       (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        """
        bech32_prefix = _env(f"{prefix}BECH32_PREFIX", _DEFAULT_PREFIX)
        chain_id = _env(f"{prefix}CHAIN_ID", _DEFAULT_CHAIN_ID)
        log_level = _env(f"{prefix}LOG_LEVEL", _DEFAULT_LOG_LEVEL)

        return cls(
            bech32_prefix=_check_prefix(bech32_prefix or _DEFAULT_PREFIX),
            chain_id=chain_id or _DEFAULT_CHAIN_ID,
            log_level=_check_log_level(log_level or _DEFAULT_LOG_LEVEL),
        )

    @classmethod
    def with_overrides(
        cls, base: Optional["SDKConfig"] = None, **overrides: Any
    ) -> "SDKConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys and None values are ignored.
        """
        base = base or cls.from_env()
        data = base.to_dict()
        data.update(
            {k: v for k, v in overrides.items() if k in data and v is not None}
        )
        data["bech32_prefix"] = _check_prefix(data["bech32_prefix"])
        data["log_level"] = _check_log_level(data["log_level"])
        return cls(**data)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bech32_prefix": self.bech32_prefix,
            "chain_id": self.chain_id,
            "log_level": self.log_level,
        }


__all__ = ["SDKConfig"]
