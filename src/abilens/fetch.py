"""Fetch logs over JSON-RPC and decode them against an ABI.

The RPC client is only used for I/O; each fetched log goes through the same
synchronous `decode_log` call as any other record.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Generator
from dataclasses import dataclass, field
from typing import Any

from abilens.abi_events import get_event_topic0s, get_events_from_abi
from abilens.clients.rpc import RPC
from abilens.core.config import DEFAULT_CONFIG, DecoderConfig, FetchDecodeConfig
from abilens.core.errors import AbiLensError
from abilens.engine import decode_log

logger = logging.getLogger(__name__)


def iter_chunks(a: int, b: int, step: int) -> Generator[tuple[int, int], None, None]:
    """Yield inclusive [start, end] block ranges of size at most `step`."""
    x = a
    while x <= b:
        y = min(b, x + step - 1)
        yield (x, y)
        x = y + 1


@dataclass(kw_only=True)
class FetchStats:
    chunks: int = 0
    logs: int = 0
    decoded: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)


async def fetch_decode(
    config: FetchDecodeConfig,
    abi_text: str,
    *,
    decoder_config: DecoderConfig = DEFAULT_CONFIG,
    stats: FetchStats | None = None,
) -> AsyncIterator[dict[str, Any]]:
    """Yield decoded records for every log the ABI's events emitted in the range.

    Records that fail to decode are counted in `stats` and skipped.
    """
    stats = stats if stats is not None else FetchStats()
    topic0s = get_event_topic0s(get_events_from_abi(abi_text))
    if not topic0s:
        return

    rpc = RPC(config.rpc_url, timeout_s=config.timeout_s)
    try:
        for a, b in iter_chunks(config.from_block, config.to_block, config.step):
            logs = await rpc.get_logs(address=config.address, topic0s=topic0s, from_block=a, to_block=b)
            stats.chunks += 1
            stats.logs += len(logs)
            for log in logs:
                try:
                    out = decode_log(log, abi_text, decoder_config)
                except AbiLensError as e:
                    stats.failed += 1
                    stats.errors.append(f"{log.get('transactionHash')}: {e}")
                    logger.warning("failed to decode log in %s: %s", log.get("transactionHash"), e)
                    continue
                stats.decoded += 1
                yield out
    finally:
        await rpc.aclose()
