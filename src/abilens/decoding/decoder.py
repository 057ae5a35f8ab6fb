"""Topic and data decoders.

Both walk the matched event's inputs in declaration order:
- indexed inputs are read from topic slots (`decode_topics`)
- non-indexed inputs are read from consecutive 32-byte data slots (`decode_data`)

Each decoder checks its full bounds before producing any value, so a short
log never yields a partial argument list.
"""

from __future__ import annotations

from collections.abc import Sequence

from abilens.abi_events import AbiInput
from abilens.core.config import TopicSlotMode
from abilens.core.errors import MalformedInputError, OutOfBoundsError
from abilens.core.models import DecodedArgument
from abilens.decoding.slots import FIXED_TYPES, SLOT_SIZE, decode_slot, hex_to_bytes, slot_at, topic_at


def topic_positions(inputs: Sequence[AbiInput], mode: TopicSlotMode) -> list[tuple[AbiInput, int]]:
    """Pair each indexed input with the topic index it is read from."""
    out: list[tuple[AbiInput, int]] = []
    topic_index = 1  # topics[0] is the signature
    for event_input in inputs:
        if event_input.indexed:
            out.append((event_input, topic_index))
            topic_index += 1
        elif mode is TopicSlotMode.POSITIONAL:
            topic_index += 1
    return out


def required_topics(positions: Sequence[tuple[AbiInput, int]]) -> int:
    """Number of topics a log must carry for the given slot assignment."""
    return positions[-1][1] + 1 if positions else 1


def decode_topics(
    inputs: Sequence[AbiInput],
    topics: Sequence[str],
    mode: TopicSlotMode = TopicSlotMode.POSITIONAL,
) -> list[DecodedArgument]:
    """Decode the indexed inputs from `topics` (topics[0] included)."""
    positions = topic_positions(inputs, mode)
    need = required_topics(positions)
    if len(topics) < need:
        raise OutOfBoundsError("topic", need - 1, len(topics))
    if len(topics) > need:
        raise MalformedInputError(f"expected {need} topics, got {len(topics)}")

    return [
        DecodedArgument(event_input.name, event_input.type, decode_slot(event_input.type, topic_at(topics, idx)))
        for event_input, idx in positions
    ]


def decode_data(data_inputs: Sequence[AbiInput], data_hex: str) -> list[DecodedArgument]:
    """Decode the non-indexed inputs, one 32-byte slot each, from the data blob.

    When every input has a fixed-width type the blob must be exactly one slot
    per input; otherwise trailing bytes (dynamic payloads) are left unread.
    """
    data = hex_to_bytes(data_hex)
    need = SLOT_SIZE * len(data_inputs)
    if len(data) < need:
        raise OutOfBoundsError("data slot", len(data_inputs) - 1, len(data) // SLOT_SIZE)
    if len(data) > need and all(i.type in FIXED_TYPES for i in data_inputs):
        raise MalformedInputError(f"expected {need} data bytes, got {len(data)}")

    return [
        DecodedArgument(event_input.name, event_input.type, decode_slot(event_input.type, slot_at(data, k)))
        for k, event_input in enumerate(data_inputs)
    ]
