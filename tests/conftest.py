from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from abilens.params import ParameterStore

TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
APPROVAL_T0 = "0x8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925"

FROM = "0x" + "a" * 40
TO = "0x" + "b" * 40


def pad(h: str) -> str:
    """Left-pad a 0x-hex value to a 32-byte 0x-hex slot."""
    return "0x" + h.removeprefix("0x").rjust(64, "0")


def uint_slot(v: int) -> str:
    return v.to_bytes(32, "big").hex()


@pytest.fixture
def abi_path() -> Path:
    return Path(__file__).parent / "abi" / "erc20_abi.json"


@pytest.fixture
def abi_text(abi_path: Path) -> str:
    return abi_path.read_text()


@pytest.fixture
def transfer_log() -> dict[str, Any]:
    return {
        "address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        "transactionHash": "0x" + "12" * 32,
        "blockNumber": 19_000_000,
        "logIndex": 7,
        "topics": [TRANSFER_T0, pad(FROM), pad(TO)],
        "data": "0x" + uint_slot(1000),
    }


@pytest.fixture
def store(abi_text: str) -> ParameterStore:
    s = ParameterStore()
    s.set(abi_text)
    return s


@pytest.fixture
def mock_rpc():
    rpc = AsyncMock()
    rpc.get_logs = AsyncMock(return_value=[])
    rpc.latest_block = AsyncMock(return_value=100)
    rpc.aclose = AsyncMock()
    return rpc
