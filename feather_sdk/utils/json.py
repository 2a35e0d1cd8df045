"""
JSON helpers shared by every message class.

- `JSONSerializable`: base class providing `to_json` / `to_amino_json` on top
  of the per-message `to_data` / `to_amino` / `to_proto` conversions.
- `remove_null`: drop None values from nested mappings.
- `prepare_sign_bytes`: recursively key-sorted copy without None values; this
  is the canonical shape of legacy Amino sign bytes.
- `require`: fetch a mandatory field from an incoming payload.
"""

from __future__ import annotations

import abc
import json
from typing import Any, Dict, Mapping, Optional

from ..errors import MsgError

__all__ = ["JSONSerializable", "remove_null", "prepare_sign_bytes", "require"]


def remove_null(obj: Any) -> Any:
    """Drop keys whose value is None, recursing into nested mappings (not lists)."""
    if isinstance(obj, Mapping):
        return {
            k: remove_null(v) if isinstance(v, Mapping) else v
            for k, v in obj.items()
            if v is not None
        }
    return obj


def prepare_sign_bytes(obj: Any) -> Any:
    """Sort mapping keys at every level and drop None values."""
    if isinstance(obj, (list, tuple)):
        return [prepare_sign_bytes(v) for v in obj]
    if not isinstance(obj, Mapping):
        return obj
    return {
        k: prepare_sign_bytes(obj[k])
        for k in sorted(obj)
        if obj[k] is not None
    }


def _dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def require(data: Any, key: str, *, msg_type: Optional[str] = None) -> Any:
    if not isinstance(data, Mapping):
        raise MsgError("payload must be a mapping", msg_type=msg_type)
    if key not in data:
        raise MsgError("missing field", msg_type=msg_type, field=key)
    return data[key]


class JSONSerializable(abc.ABC):
    """Common surface of objects with Amino, Data and Proto representations."""

    @abc.abstractmethod
    def to_amino(self) -> Dict[str, Any]:
        ...

    @abc.abstractmethod
    def to_data(self) -> Dict[str, Any]:
        ...

    @abc.abstractmethod
    def to_proto(self) -> Any:
        ...

    def to_json(self) -> str:
        return _dumps(remove_null(self.to_data()))

    def to_amino_json(self) -> str:
        return _dumps(prepare_sign_bytes(self.to_amino()))
