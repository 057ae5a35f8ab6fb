"""Event log decoding.

This package provides:
- Signature matching against an ABI's event definitions
- Topic and data decoders over fixed 32-byte slots
- Single-stage typed slot decoding
- Result assembly into the output record
"""

from abilens.decoding.assembler import assemble, passthrough
from abilens.decoding.decoder import decode_data, decode_topics, required_topics, topic_positions
from abilens.decoding.matcher import match_event
from abilens.decoding.slots import FIXED_TYPES, SLOT_SIZE, decode_slot, hex_to_bytes, slot_at, topic_at

__all__ = [
    "assemble",
    "passthrough",
    "decode_data",
    "decode_topics",
    "required_topics",
    "topic_positions",
    "match_event",
    "FIXED_TYPES",
    "SLOT_SIZE",
    "decode_slot",
    "hex_to_bytes",
    "slot_at",
    "topic_at",
]
