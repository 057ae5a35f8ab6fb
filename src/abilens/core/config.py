from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class TopicSlotMode(str, Enum):
    """How indexed parameters are assigned to topic slots."""

    # topic index advances once per declared parameter, indexed or not
    POSITIONAL = "positional"
    # topic index advances once per indexed parameter
    SEQUENTIAL = "sequential"


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for the decoding engine."""

    topic_slots: TopicSlotMode = TopicSlotMode.POSITIONAL

    @classmethod
    def from_env(cls) -> DecoderConfig:
        """Load configuration from environment variables."""
        raw = os.getenv("ABILENS_TOPIC_SLOTS", TopicSlotMode.POSITIONAL.value)
        try:
            mode = TopicSlotMode(raw.strip().lower())
        except ValueError as e:
            allowed = ", ".join(m.value for m in TopicSlotMode)
            raise ValueError(f"Unknown ABILENS_TOPIC_SLOTS '{raw}'. Supported: {allowed}") from e
        return cls(topic_slots=mode)


DEFAULT_CONFIG = DecoderConfig()


@dataclass(frozen=True)
class FetchDecodeConfig:
    """Configuration for the RPC fetch-and-decode command (CLI)."""

    rpc_url: str
    address: str
    from_block: int
    to_block: int
    step: int = 1_000
    timeout_s: int = 20
