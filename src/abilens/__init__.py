from __future__ import annotations

from .abi_events import AbiEvent, AbiInput, Parameters, get_event_signature, get_event_topic0, get_events_from_abi
from .core.config import DecoderConfig, TopicSlotMode
from .core.errors import AbiLensError, MalformedAbiError, MalformedInputError, NotConfiguredError, OutOfBoundsError
from .core.models import END_OF_STREAM, DecodedArgument
from .engine import decode_log, decode_with_store
from .params import ParameterStore

__all__ = [
    "AbiEvent",
    "AbiInput",
    "Parameters",
    "get_event_signature",
    "get_event_topic0",
    "get_events_from_abi",
    "DecoderConfig",
    "TopicSlotMode",
    "AbiLensError",
    "MalformedAbiError",
    "MalformedInputError",
    "NotConfiguredError",
    "OutOfBoundsError",
    "END_OF_STREAM",
    "DecodedArgument",
    "decode_log",
    "decode_with_store",
    "ParameterStore",
]
