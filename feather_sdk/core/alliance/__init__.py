from .msgs import MsgClaimDelegationRewards  # noqa: F401

__all__ = ["MsgClaimDelegationRewards"]
