import asyncio
import json
from pathlib import Path

from abilens.core.config import FetchDecodeConfig
from abilens.fetch import FetchStats, fetch_decode
from abilens.lens import IterableSource, set_param, transform_all

EXAMPLES_ROOT = Path(__file__).parent
assert EXAMPLES_ROOT.name == "examples"
REPO_ROOT = EXAMPLES_ROOT.parent

ABI = REPO_ROOT / "tests" / "abi" / "erc20_abi.json"
assert ABI.is_file()

config = FetchDecodeConfig(
    rpc_url="https://ethereum-rpc.publicnode.com",
    address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",  # USDC
    from_block=19_000_000,
    to_block=19_000_010,
    step=5,
)


async def fetch_data() -> list[dict]:
    stats = FetchStats()
    out = [r async for r in fetch_decode(config, ABI.read_text(), stats=stats)]
    print(f"chunks={stats.chunks} logs={stats.logs} decoded={stats.decoded} failed={stats.failed}")
    return out


def replay_through_lens(records: list[dict]) -> None:
    """Feed already-fetched raw logs through the lens host interface."""
    err = set_param(json.dumps({"abi": ABI.read_text()}))
    assert err is None, err
    for result in transform_all(IterableSource(records)):
        if result.kind == "record":
            decoded = result.json()
            print(decoded.get("signature"), [a["value"] for a in decoded.get("arguments", [])])
        else:
            print(result.kind, result.message)


if __name__ == "__main__":
    decoded = asyncio.run(fetch_data())
    for row in decoded[:5]:
        print(json.dumps(row["arguments"]))
    replay_through_lens(decoded[:5])
