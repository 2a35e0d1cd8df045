import logging

import pytest

from feather_sdk.config import SDKConfig


def test_defaults():
    cfg = SDKConfig.from_env()
    assert cfg.to_dict() == {
        "bech32_prefix": "terra",
        "chain_id": "phoenix-1",
        "log_level": "WARNING",
    }
    assert cfg.logging_level == logging.WARNING


def test_from_env(monkeypatch):
    monkeypatch.setenv("FEATHER_BECH32_PREFIX", "osmo")
    monkeypatch.setenv("FEATHER_CHAIN_ID", "osmosis-1")
    monkeypatch.setenv("FEATHER_LOG_LEVEL", "debug")
    cfg = SDKConfig.from_env()
    assert cfg.bech32_prefix == "osmo"
    assert cfg.chain_id == "osmosis-1"
    assert cfg.log_level == "DEBUG"


def test_empty_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("FEATHER_BECH32_PREFIX", "")
    assert SDKConfig.from_env().bech32_prefix == "terra"


@pytest.mark.parametrize("prefix", ["Terra", "terra-1", "a" * 80])
def test_invalid_prefix_rejected(monkeypatch, prefix):
    monkeypatch.setenv("FEATHER_BECH32_PREFIX", prefix)
    with pytest.raises(ValueError):
        SDKConfig.from_env()


def test_with_overrides_ignores_unknown_and_none():
    cfg = SDKConfig.with_overrides(
        SDKConfig(), bech32_prefix="juno", chain_id=None, rpc_url="http://x"
    )
    assert cfg.bech32_prefix == "juno"
    assert cfg.chain_id == "phoenix-1"


def test_with_overrides_validates_log_level():
    with pytest.raises(ValueError):
        SDKConfig.with_overrides(SDKConfig(), log_level="chatty")
