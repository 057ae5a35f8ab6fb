"""Lightweight JSON-RPC client for Ethereum-compatible nodes.

This module provides:
- `RPC`: an async client with sane timeouts/connection limits
- Helper utilities to format block numbers and topics

It returns raw log mappings shaped like the decoder's input records
(`transactionHash`, `blockNumber` as int, `topics`, `data`).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class RPCError(RuntimeError):
    """JSON-RPC error object returned by the node."""


def to_hex_block(x: int) -> str:
    """Return a 0x-prefixed hex block number."""
    return hex(x)


def topics_param(topic0s: Sequence[str]) -> list[list[str]]:
    """Format topic0 signatures for eth_getLogs RPC call."""
    return [[t.lower() for t in topic0s]]


def normalize_log(rl: dict[str, Any]) -> dict[str, Any]:
    """Convert an RPC log object into a decoder input record."""
    out = dict(rl)
    bn = rl.get("blockNumber")
    if isinstance(bn, str):
        out["blockNumber"] = int(bn, 16)
    out["topics"] = [t.lower() for t in rl.get("topics", [])]
    out["data"] = str(rl.get("data") or "0x")
    out["transactionHash"] = (rl.get("transactionHash") or "").lower()
    return out


class RPC:
    """Minimal async RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write).
    max_connections : int
        Maximum concurrent connections to keep in the pool.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: int = 20,
        max_connections: int = 16,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=timeout_s,
                read=timeout_s,
                write=timeout_s,
                pool=max(30, timeout_s * 3),
            ),
            limits=httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max(1, max_connections // 2),
            ),
            http2=transport is None,
            transport=transport,
        )

    async def _call(self, method: str, params: list[Any]) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        r = await self.client.post(self.url, json=payload)
        r.raise_for_status()
        data = r.json()
        if "error" in data:
            e = data["error"]
            msg = f"{e.get('code')} {e.get('message')}" if isinstance(e, dict) else str(e)
            raise RPCError(f"RPC error: {msg}")
        return data.get("result")

    async def latest_block(self) -> int:
        """Return the latest block number as an int."""
        return int(await self._call("eth_blockNumber", []), 16)

    async def get_logs(
        self,
        *,
        address: str,
        topic0s: Sequence[str],
        from_block: int,
        to_block: int,
    ) -> list[dict[str, Any]]:
        """Fetch logs for an address and a set of topic0 signatures within a block range."""
        params = [
            {
                "address": address.lower(),
                "fromBlock": to_hex_block(from_block),
                "toBlock": to_hex_block(to_block),
                "topics": topics_param(topic0s),
            }
        ]
        result = await self._call("eth_getLogs", params) or []
        logger.debug("eth_getLogs %d-%d returned %d logs", from_block, to_block, len(result))
        return [normalize_log(rl) for rl in result]

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
