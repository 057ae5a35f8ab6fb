"""Host boundary: the `set_param` / `transform` operations of a lens module.

A host configures the module once with `set_param` and then pulls records
through `transform`, which never raises for decoding failures. Each call
returns a `TransformResult`:

- `record`: JSON bytes of the decoded (or passed-through) record
- `nil`: the source had no record this time
- `eos`: the source is exhausted
- `error`: a message describing why the record could not be decoded
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import ValidationError

from abilens.abi_events import Parameters
from abilens.core.config import DEFAULT_CONFIG, DecoderConfig
from abilens.core.errors import AbiLensError, NotConfiguredError
from abilens.core.interfaces import LogSource
from abilens.core.models import END_OF_STREAM, _EndOfStream
from abilens.engine import decode_with_store
from abilens.params import ParameterStore

logger = logging.getLogger(__name__)

ResultKind = Literal["record", "nil", "eos", "error"]

DEFAULT_STORE = ParameterStore()


@dataclass(slots=True, frozen=True)
class TransformResult:
    kind: ResultKind
    payload: bytes = b""

    @classmethod
    def record(cls, out: Mapping[str, Any]) -> TransformResult:
        return cls("record", json.dumps(out, separators=(",", ":")).encode())

    @classmethod
    def nil(cls) -> TransformResult:
        return cls("nil")

    @classmethod
    def eos(cls) -> TransformResult:
        return cls("eos")

    @classmethod
    def error(cls, message: str) -> TransformResult:
        return cls("error", message.encode())

    @property
    def message(self) -> str:
        return self.payload.decode()

    def json(self) -> dict[str, Any]:
        """Return the decoded record mapping (only valid for `record`)."""
        if self.kind != "record":
            raise ValueError(f"{self.kind} result carries no record")
        return json.loads(self.payload)


class IterableSource:
    """LogSource over any iterable of raw records; exhausted -> END_OF_STREAM."""

    def __init__(self, records: Iterable[Mapping[str, Any] | None]) -> None:
        self._it = iter(records)

    def next(self) -> Mapping[str, Any] | None | _EndOfStream:
        return next(self._it, END_OF_STREAM)


def set_param(payload: bytes | str | None, store: ParameterStore = DEFAULT_STORE) -> str | None:
    """Store module parameters from a JSON payload `{"abi": "<abi text>"}`.

    Returns None on success or an error message.
    """
    if payload is None:
        return str(NotConfiguredError())
    try:
        params = Parameters.model_validate_json(payload)
    except ValidationError as e:
        logger.warning("rejected parameters: %s", e)
        return f"invalid parameters: {e}"
    store.set(params.abi)
    return None


def transform(
    source: LogSource,
    store: ParameterStore = DEFAULT_STORE,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> TransformResult:
    """Pull one record from `source` and decode it."""
    item = source.next()
    if item is None:
        return TransformResult.nil()
    if isinstance(item, _EndOfStream):
        return TransformResult.eos()

    try:
        out = decode_with_store(item, store, config)
    except AbiLensError as e:
        logger.warning("failed to decode log: %s", e)
        return TransformResult.error(str(e))
    return TransformResult.record(out)


def transform_all(
    source: LogSource,
    store: ParameterStore = DEFAULT_STORE,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> Iterator[TransformResult]:
    """Yield results for every record until the source reports end of stream."""
    while True:
        result = transform(source, store, config)
        if result.kind == "eos":
            return
        yield result
