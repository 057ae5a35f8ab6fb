import asyncio
import json
import logging
import os
from pathlib import Path
from typing import IO

import click
import httpx
from rich.console import Console
from rich.table import Table

from abilens.abi_events import get_event_signature, get_event_topic0, get_events_from_abi
from abilens.core.config import DecoderConfig, FetchDecodeConfig, TopicSlotMode
from abilens.core.errors import AbiLensError, MalformedAbiError
from abilens.engine import decode_log

console = Console()
err_console = Console(stderr=True)

_abi_option = click.option(
    "--abi",
    "abi_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to the contract ABI (JSON list)",
)
_slots_option = click.option(
    "--topic-slots",
    type=click.Choice([m.value for m in TopicSlotMode]),
    default=None,
    help="Topic slot assignment for indexed inputs [default: ABILENS_TOPIC_SLOTS or positional]",
)


def _decoder_config(topic_slots: str | None) -> DecoderConfig:
    if topic_slots is None:
        try:
            return DecoderConfig.from_env()
        except ValueError as e:
            raise click.UsageError(str(e)) from e
    return DecoderConfig(topic_slots=TopicSlotMode(topic_slots))


def _emit(record: dict) -> None:
    click.echo(json.dumps(record, separators=(",", ":")))


@click.group()
@click.option(
    "--log-level",
    default=lambda: os.getenv("ABILENS_LOG_LEVEL", "WARNING"),
    show_default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
def cli(log_level: str) -> None:
    """abilens: decode EVM event logs against a contract ABI."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command("signature")
@_abi_option
def signature_cmd(abi_path: Path) -> None:
    """List the events of an ABI with their canonical signatures and topic0."""
    try:
        events = get_events_from_abi(abi_path)
    except MalformedAbiError as e:
        raise click.ClickException(str(e)) from e

    rows = [(event.name, get_event_signature(event), get_event_topic0(event)) for event in events]
    if not console.is_terminal:
        for row in rows:
            click.echo("\t".join(row))
        return

    table = Table("event", "signature", "topic0")
    for row in rows:
        table.add_row(*row)
    console.print(table)


@cli.command("decode")
@_abi_option
@click.option("--input", "input_file", type=click.File("r"), default="-", help="NDJSON log records [default: stdin]")
@_slots_option
def decode_cmd(abi_path: Path, input_file: IO[str], topic_slots: str | None) -> None:
    """Decode NDJSON log records and write decoded NDJSON to stdout."""
    config = _decoder_config(topic_slots)
    abi_text = abi_path.read_text()
    try:
        get_events_from_abi(abi_text)
    except MalformedAbiError as e:
        err_console.print(f"[yellow]warning[/]: {e}; records will pass through undecoded")

    failed = 0
    for lineno, line in enumerate(input_file, start=1):
        if not line.strip():
            continue
        try:
            raw = json.loads(line)
            out = decode_log(raw, abi_text, config)
        except (json.JSONDecodeError, AbiLensError) as e:
            failed += 1
            err_console.print(f"[red]line {lineno}[/]: {e}")
            continue
        _emit(out)

    if failed:
        err_console.print(f"[bold red]{failed} record(s) failed[/]")
        raise click.exceptions.Exit(1)


@cli.command("fetch-decode")
@click.option("--rpc", required=True, help="RPC endpoint URL")
@_abi_option
@click.option("--address", required=True, help="Emitter contract address")
@click.option("--from-block", type=int, required=True)
@click.option("--to-block", type=int, required=True)
@click.option("--step", type=int, default=1_000, show_default=True, help="Blocks per request")
@click.option("--timeout", "timeout_s", type=int, default=20, show_default=True, help="RPC timeout in seconds")
@_slots_option
def fetch_decode_cmd(
    rpc: str,
    abi_path: Path,
    address: str,
    from_block: int,
    to_block: int,
    step: int,
    timeout_s: int,
    topic_slots: str | None,
) -> None:
    """Fetch a contract's logs over JSON-RPC and print them decoded as NDJSON."""
    from abilens.fetch import FetchStats, fetch_decode

    decoder_config = _decoder_config(topic_slots)
    config = FetchDecodeConfig(
        rpc_url=rpc,
        address=address,
        from_block=from_block,
        to_block=to_block,
        step=step,
        timeout_s=timeout_s,
    )
    abi_text = abi_path.read_text()
    stats = FetchStats()

    async def run() -> None:
        async for out in fetch_decode(config, abi_text, decoder_config=decoder_config, stats=stats):
            _emit(out)

    try:
        asyncio.run(run())
    except (AbiLensError, RuntimeError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e

    err_console.print(
        f"[bold]done[/]: chunks={stats.chunks} logs={stats.logs} "
        f"[green]decoded[/]={stats.decoded} [red]failed[/]={stats.failed}"
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
