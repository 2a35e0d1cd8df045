from .tokenfactory import MsgCreateDenom  # noqa: F401

__all__ = ["MsgCreateDenom"]
