"""Decoding engine: one raw log record in, one output record out.

Pipeline per call:
1. parse event definitions from the ABI text (malformed ABI -> pass-through)
2. match topic0 against the definitions (no match -> pass-through)
3. decode indexed inputs from topics and non-indexed inputs from data
4. assemble the output record

Definitions are parsed on every call; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from abilens.abi_events import get_events_from_abi
from abilens.core.config import DEFAULT_CONFIG, DecoderConfig
from abilens.core.errors import MalformedAbiError
from abilens.core.models import LogRecord, read_topics
from abilens.decoding.assembler import assemble, passthrough
from abilens.decoding.decoder import decode_data, decode_topics
from abilens.decoding.matcher import match_event
from abilens.params import ParameterStore

logger = logging.getLogger(__name__)


def decode_log(
    raw: Mapping[str, Any],
    abi_text: str,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """Decode `raw` against the events in `abi_text`.

    Returns the input record unchanged when the ABI is malformed or no event
    matches. Raises MalformedInputError / OutOfBoundsError when the record
    cannot be decoded against the matched event.
    """
    try:
        events = get_events_from_abi(abi_text)
    except MalformedAbiError as e:
        logger.debug("malformed ABI, passing record through: %s", e)
        return passthrough(raw)

    topics = read_topics(raw)
    matched = match_event(topics[0], events)
    if matched is None:
        return passthrough(raw)

    record = LogRecord.from_mapping(raw)
    inputs = matched.event.inputs
    topic_args = decode_topics(inputs, record.topics, config.topic_slots)
    data_args = decode_data(matched.event.data_inputs, record.data_hex)
    return assemble(record, matched, topic_args, data_args)


def decode_with_store(
    raw: Mapping[str, Any],
    store: ParameterStore,
    config: DecoderConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """Decode `raw` against the ABI currently held by `store`.

    Raises NotConfiguredError if the store was never set.
    """
    return decode_log(raw, store.get(), config)
