import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal

from eth_utils import keccak
from pydantic import BaseModel, Field, ValidationError

from abilens.core.errors import MalformedAbiError


class AbiInput(BaseModel):
    indexed: bool = False
    internalType: str | None = None
    name: str = ""
    type: str


class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput] = Field(default_factory=list)
    name: str
    type: Literal["event"]

    @property
    def indexed_inputs(self) -> list[AbiInput]:
        return [event_input for event_input in self.inputs if event_input.indexed]

    @property
    def data_inputs(self) -> list[AbiInput]:
        return [event_input for event_input in self.inputs if not event_input.indexed]


class Parameters(BaseModel):
    """Host-supplied module parameters."""

    abi: str


def get_event_signature(event: AbiEvent) -> str:
    return f"{event.name}({','.join(event_input.type for event_input in event.inputs)})"


def get_signature_topic0(signature: str) -> str:
    return "0x" + keccak(text=signature).hex()


def get_event_topic0(event: AbiEvent) -> str:
    return get_signature_topic0(get_event_signature(event))


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path | str


def _load_abi(abi: AbiSpec) -> Any:
    if isinstance(abi, Path):
        abi = abi.read_text()
    if isinstance(abi, str):
        try:
            return json.loads(abi)
        except json.JSONDecodeError as e:
            raise MalformedAbiError(f"ABI is not valid JSON: {e}") from e
    return list(abi)


def get_events_from_abi(abi: AbiSpec) -> list[AbiEvent]:
    """Return the event definitions of an ABI in declaration order.

    Raises MalformedAbiError when the ABI is not a list of definitions or an
    event entry does not validate.
    """
    entries = _load_abi(abi)
    if not isinstance(entries, list):
        raise MalformedAbiError("ABI must be a list of definitions")

    events: list[AbiEvent] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise MalformedAbiError("ABI entries must be objects")
        if entry.get("type") != "event":
            continue
        try:
            events.append(AbiEvent.model_validate(entry))
        except ValidationError as e:
            raise MalformedAbiError(f"invalid event definition {entry.get('name')!r}: {e}") from e
    return events


def get_event_topic0s(events: Iterable[AbiEvent]) -> list[str]:
    return [get_event_topic0(event) for event in events]
