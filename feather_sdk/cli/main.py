"""
feather_sdk.cli.main
====================

`feather-sdk`: offline helpers for addresses and packed messages.

Examples
--------
    $ feather-sdk validate terra1...
    $ feather-sdk validate terravaloper1... --family valoper
    $ feather-sdk convert terra1... --to valoper
    $ feather-sdk prefix terravaloper1... --family valoper
    $ feather-sdk unpack /cosmwasm.tokenfactory.v1beta1.MsgCreateDenom 0x0a2c...

Configuration
-------------
- Root prefix : `--prefix` or env `FEATHER_BECH32_PREFIX` (default: terra)
- Chain ID    : `--chain-id` or env `FEATHER_CHAIN_ID` (default: phoenix-1)
- Log level   : `--log-level` or env `FEATHER_LOG_LEVEL` (default: WARNING)
"""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from typing import Any, Dict, Optional

import typer

from ..config import SDKConfig
from ..core.bech32 import AddressFamily, derive, get_prefix, validate
from ..core.msg import Msg
from ..errors import FeatherSdkError
from ..proto import Any as AnyProto
from ..version import __version__

log = logging.getLogger(__name__)

app = typer.Typer(
    name="feather-sdk",
    help="feather SDK CLI: validate and convert addresses, decode messages.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]


class Family(str, Enum):
    acc = "acc"
    accpub = "accpub"
    valoper = "valoper"
    valoperpub = "valoperpub"
    valcons = "valcons"


_FAMILIES: Dict[Family, AddressFamily] = {
    Family.acc: AddressFamily.ACC_ADDRESS,
    Family.accpub: AddressFamily.ACC_PUBKEY,
    Family.valoper: AddressFamily.VAL_ADDRESS,
    Family.valoperpub: AddressFamily.VAL_PUBKEY,
    Family.valcons: AddressFamily.VAL_CONS_ADDRESS,
}

# (source, target) pairs with a derivation
_CONVERSIONS = {
    (Family.valoper, Family.acc),
    (Family.acc, Family.accpub),
    (Family.acc, Family.valoper),
    (Family.valoper, Family.valoperpub),
}


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _config(ctx: typer.Context) -> SDKConfig:
    return ctx.obj


@app.callback()
def _root(
    ctx: typer.Context,
    prefix: Optional[str] = typer.Option(
        None,
        "--prefix",
        help="Root bech32 prefix of the chain (e.g. terra).",
        envvar="FEATHER_BECH32_PREFIX",
    ),
    chain_id: Optional[str] = typer.Option(
        None,
        "--chain-id",
        help="Chain ID reported by `env`.",
        envvar="FEATHER_CHAIN_ID",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Python logging level.",
        envvar="FEATHER_LOG_LEVEL",
    ),
) -> None:
    """
    Resolve the effective configuration for this CLI process.
    """
    try:
        cfg = SDKConfig.with_overrides(
            SDKConfig(), bech32_prefix=prefix, chain_id=chain_id, log_level=log_level
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    logging.basicConfig(level=cfg.logging_level, format="%(levelname)s %(name)s: %(message)s")
    log.debug("effective config: %s", cfg.to_dict())
    ctx.obj = cfg


@app.command("version")
def version() -> None:
    """Print the SDK CLI version."""
    typer.echo(f"feather-sdk {__version__}")


@app.command("env")
def env(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    _print_json({**_config(ctx).to_dict(), "sdk_version": __version__})


@app.command("validate")
def validate_cmd(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Address or public key to check."),
    family: Family = typer.Option(Family.acc, "--family", "-f", help="Address family."),
    any_prefix: bool = typer.Option(
        False, "--any-prefix", help="Accept any root prefix instead of the configured one."
    ),
) -> None:
    """
    Check an address against a family. Exits with status 1 when invalid.
    """
    root = None if any_prefix else _config(ctx).bech32_prefix
    ok = validate(_FAMILIES[family], address, root)
    _print_json({"address": address, "family": family.value, "prefix": root, "valid": ok})
    if not ok:
        raise typer.Exit(code=1)


@app.command("convert")
def convert(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Source address."),
    to: Family = typer.Option(..., "--to", "-t", help="Target family."),
    source: Optional[Family] = typer.Option(
        None, "--from", help="Source family (guessed from the address when omitted)."
    ),
) -> None:
    """
    Derive another family's address from the same payload.
    """
    src = source or _guess_family(address)
    if (src, to) not in _CONVERSIONS:
        raise typer.BadParameter(f"cannot derive {to.value} from {src.value}")
    # valoper -> acc keeps the address's own root prefix
    root = None if to is Family.acc else _config(ctx).bech32_prefix
    try:
        typer.echo(derive(address, _FAMILIES[src], _FAMILIES[to], root))
    except FeatherSdkError as e:
        raise typer.BadParameter(str(e)) from e


@app.command("prefix")
def prefix_cmd(
    address: str = typer.Argument(..., help="Address or public key."),
    family: Optional[Family] = typer.Option(
        None, "--family", "-f", help="Address family (guessed when omitted)."
    ),
) -> None:
    """Print the root chain prefix of an address."""
    fam = family or _guess_family(address)
    try:
        typer.echo(get_prefix(_FAMILIES[fam], address))
    except FeatherSdkError as e:
        raise typer.BadParameter(str(e)) from e


@app.command("unpack")
def unpack(
    type_url: str = typer.Argument(..., help="Any.type_url, e.g. /alliance.alliance.MsgClaimDelegationRewards"),
    value_hex: str = typer.Argument(..., help="Protobuf-encoded message bytes (hex)."),
) -> None:
    """Decode a packed message and print its Data JSON."""
    try:
        msg = Msg.from_proto(AnyProto(type_url=type_url, value=_parse_hex(value_hex)))
    except (FeatherSdkError, ValueError) as e:
        raise typer.BadParameter(str(e)) from e
    _print_json(msg.to_data())


def _parse_hex(value: str) -> bytes:
    if value.startswith(("0x", "0X")):
        value = value[2:]
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise typer.BadParameter(f"invalid hex: {e}") from e


def _guess_family(address: str) -> Family:
    """
    Pick the family whose pattern matches the decoded prefix, trying the
    longest suffix first so `valoperpub` wins over `valoper`.
    """
    ordered = (Family.valoperpub, Family.valoper, Family.valcons, Family.accpub)
    for fam in ordered:
        if validate(_FAMILIES[fam], address):
            return fam
    if validate(AddressFamily.ACC_ADDRESS, address):
        return Family.acc
    raise typer.BadParameter(f"not a recognized bech32 address: {address!r}")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI. Returns an integer exit code.
    """
    try:
        # non-standalone click returns the exit code of a raised typer.Exit
        rv = app(prog_name="feather-sdk", standalone_mode=False, args=argv)
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return int(e.exit_code)
    except Exception as e:
        typer.echo(f"error: {e}", err=True)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
