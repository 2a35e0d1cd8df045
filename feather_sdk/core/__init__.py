from .bech32 import (  # noqa: F401
    AccAddress,
    AccPubKey,
    AddressFamily,
    ValAddress,
    ValConsAddress,
    ValPubKey,
)
