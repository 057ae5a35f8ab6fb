"""Core data models for log decoding.

This module defines:
- `LogRecord`: validated view over a raw log mapping.
- `DecodedArgument`: one decoded event parameter.
- `MatchedEvent`: the event definition selected by topic0.
- `END_OF_STREAM`: sentinel returned by a log source when input is exhausted.

Design notes
------------
- The raw mapping is kept on `LogRecord` so unknown keys pass through to the
  output record untouched.
- Decoded values are strings, except `bool` parameters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from abilens.core.errors import MalformedInputError, OutOfBoundsError

if TYPE_CHECKING:
    from abilens.abi_events import AbiEvent


# === Stream sentinel ===


class _EndOfStream:
    __slots__ = ()

    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM: Final = _EndOfStream()


# === Input record ===


def _parse_block_number(value: Any) -> int:
    if isinstance(value, bool):
        raise MalformedInputError("blockNumber must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value[:2].lower() == "0x":
        try:
            return int(value, 16)
        except ValueError as e:
            raise MalformedInputError(f"blockNumber is not valid hex: {value!r}") from e
    raise MalformedInputError("blockNumber must be an integer")


def read_topics(raw: Mapping[str, Any]) -> tuple[str, ...]:
    """Return the record's topics, checking they are a non-empty list of strings."""
    if not isinstance(raw, Mapping):
        raise MalformedInputError("log record must be a JSON object")
    topics = raw.get("topics")
    if not isinstance(topics, Sequence) or isinstance(topics, (str, bytes)):
        raise MalformedInputError("topics must be a list of hex strings")
    if not all(isinstance(t, str) for t in topics):
        raise MalformedInputError("topics must be a list of hex strings")
    if not topics:
        raise OutOfBoundsError("topic", 0, 0)
    return tuple(topics)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Raw log record with its required fields checked."""

    tx_hash: str
    block_number: int
    topics: tuple[str, ...]
    data_hex: str
    raw: Mapping[str, Any]

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> LogRecord:
        """Validate presence and types of the fields the decoder reads."""
        if not isinstance(raw, Mapping):
            raise MalformedInputError("log record must be a JSON object")

        tx_hash = raw.get("transactionHash")
        if not isinstance(tx_hash, str):
            raise MalformedInputError("transactionHash must be a string")

        if "blockNumber" not in raw:
            raise MalformedInputError("blockNumber is missing")
        block_number = _parse_block_number(raw["blockNumber"])

        topics = read_topics(raw)

        data_hex = raw.get("data")
        if not isinstance(data_hex, str):
            raise MalformedInputError("data must be a hex string")

        return cls(
            tx_hash=tx_hash,
            block_number=block_number,
            topics=topics,
            data_hex=data_hex,
            raw=raw,
        )


# === Decoding results ===


@dataclass(slots=True, frozen=True)
class DecodedArgument:
    """One decoded event parameter."""

    name: str
    type: str
    value: str | bool

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type, "value": self.value}


@dataclass(slots=True, frozen=True)
class MatchedEvent:
    """Event definition whose signature hash equals the log's topic0."""

    event: AbiEvent
    signature: str
    topic0: str
