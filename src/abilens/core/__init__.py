"""Core data models, configuration, errors and host interfaces.

This package provides:
- Data models (LogRecord, DecodedArgument, MatchedEvent)
- Configuration classes (DecoderConfig, FetchDecodeConfig)
- The error taxonomy rooted at AbiLensError
"""

from abilens.core.config import DEFAULT_CONFIG, DecoderConfig, FetchDecodeConfig, TopicSlotMode
from abilens.core.errors import (
    AbiLensError,
    MalformedAbiError,
    MalformedInputError,
    NotConfiguredError,
    OutOfBoundsError,
)
from abilens.core.models import END_OF_STREAM, DecodedArgument, LogRecord, MatchedEvent

__all__ = [
    "DEFAULT_CONFIG",
    "DecoderConfig",
    "FetchDecodeConfig",
    "TopicSlotMode",
    "AbiLensError",
    "MalformedAbiError",
    "MalformedInputError",
    "NotConfiguredError",
    "OutOfBoundsError",
    "END_OF_STREAM",
    "DecodedArgument",
    "LogRecord",
    "MatchedEvent",
]
