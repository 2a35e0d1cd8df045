import pytest

from addresses import ACCOUNT_BYTES, CONTRACT_BYTES, ROOT, encode_payload


@pytest.fixture
def acc_address() -> str:
    return encode_payload(ROOT, ACCOUNT_BYTES)


@pytest.fixture
def contract_address() -> str:
    return encode_payload(ROOT, CONTRACT_BYTES)


@pytest.fixture
def val_address() -> str:
    return encode_payload(ROOT + "valoper", ACCOUNT_BYTES)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FEATHER_BECH32_PREFIX", "FEATHER_CHAIN_ID", "FEATHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
