from typing import Any
from unittest.mock import patch

import pytest

from abilens.core.config import FetchDecodeConfig
from abilens.fetch import FetchStats, fetch_decode, iter_chunks


def test_iter_chunks_inclusive() -> None:
    assert list(iter_chunks(0, 10, 4)) == [(0, 3), (4, 7), (8, 10)]
    assert list(iter_chunks(5, 5, 100)) == [(5, 5)]
    assert list(iter_chunks(6, 5, 100)) == []


@pytest.mark.asyncio
async def test_fetch_decode_no_logs(mock_rpc: Any, abi_text: str) -> None:
    config = FetchDecodeConfig(rpc_url="http://localhost:8545", address="0x123", from_block=0, to_block=99, step=50)
    stats = FetchStats()
    with patch("abilens.fetch.RPC", return_value=mock_rpc):
        out = [r async for r in fetch_decode(config, abi_text, stats=stats)]

    assert out == []
    assert stats.chunks == 2
    assert mock_rpc.get_logs.await_count == 2
    mock_rpc.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_decode_decodes_and_counts_failures(
    mock_rpc: Any, abi_text: str, transfer_log: dict[str, Any]
) -> None:
    broken = dict(transfer_log, data="0x")
    mock_rpc.get_logs.return_value = [transfer_log, broken]
    config = FetchDecodeConfig(rpc_url="http://localhost:8545", address="0x123", from_block=0, to_block=10)
    stats = FetchStats()
    with patch("abilens.fetch.RPC", return_value=mock_rpc):
        out = [r async for r in fetch_decode(config, abi_text, stats=stats)]

    assert [r["signature"] for r in out] == ["Transfer(address,address,uint256)"]
    assert stats.logs == 2
    assert stats.decoded == 1
    assert stats.failed == 1
    topic0s = mock_rpc.get_logs.call_args.kwargs["topic0s"]
    assert len(topic0s) == 2


@pytest.mark.asyncio
async def test_fetch_decode_abi_without_events_skips_rpc(mock_rpc: Any) -> None:
    config = FetchDecodeConfig(rpc_url="http://localhost:8545", address="0x123", from_block=0, to_block=10)
    with patch("abilens.fetch.RPC", return_value=mock_rpc) as MockRPC:
        out = [r async for r in fetch_decode(config, "[]")]

    assert out == []
    MockRPC.assert_not_called()
