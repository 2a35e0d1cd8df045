"""
feather SDK, Python client
Convenience exports for the most common client APIs.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import SDKConfig  # noqa: F401
from .errors import (  # noqa: F401
    AddressError,
    FeatherSdkError,
    MsgError,
    UnknownMessageError,
)

# Addresses
from .core.bech32 import (  # noqa: F401
    AccAddress,
    AccPubKey,
    AddressFamily,
    ValAddress,
    ValConsAddress,
    ValPubKey,
)

# Messages
from .core.alliance.msgs import MsgClaimDelegationRewards  # noqa: F401
from .core.msg import Msg  # noqa: F401
from .core.wasm.tokenfactory import MsgCreateDenom  # noqa: F401

__all__ = [
    "__version__",
    # Core
    "SDKConfig",
    "FeatherSdkError", "AddressError", "MsgError", "UnknownMessageError",
    # Address
    "AddressFamily",
    "AccAddress", "AccPubKey", "ValAddress", "ValPubKey", "ValConsAddress",
    # Messages
    "Msg", "MsgClaimDelegationRewards", "MsgCreateDenom",
]
