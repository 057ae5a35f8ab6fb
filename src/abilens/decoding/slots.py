"""Slot utilities: bounds-checked ABI slot access and typed slot decoding."""

from __future__ import annotations

from collections.abc import Sequence

from abilens.core.errors import MalformedInputError, OutOfBoundsError

SLOT_SIZE = 32

# types decoded from exactly one slot by `decode_slot`
FIXED_TYPES = frozenset({"address", "uint256", "bool", "bytes32"})


def hex_to_bytes(h: str, *, field: str = "data") -> bytes:
    """Decode a hex string with or without a 0x prefix."""
    clean = h[2:] if h[:2].lower() == "0x" else h
    try:
        return bytes.fromhex(clean)
    except ValueError as e:
        raise MalformedInputError(f"{field} is not valid hex: {h!r}") from e


def slot_at(data: bytes, i: int) -> bytes:
    """Return the i-th 32-byte slot of the data blob."""
    start = SLOT_SIZE * i
    end = start + SLOT_SIZE
    if i < 0 or end > len(data):
        raise OutOfBoundsError("data slot", i, len(data) // SLOT_SIZE)
    return data[start:end]


def topic_at(topics: Sequence[str], i: int) -> bytes:
    """Return topic `i` as a 32-byte slot."""
    if i < 0 or i >= len(topics):
        raise OutOfBoundsError("topic", i, len(topics))
    slot = hex_to_bytes(topics[i], field=f"topic {i}")
    if len(slot) != SLOT_SIZE:
        raise MalformedInputError(f"topic {i} is {len(slot)} bytes, expected {SLOT_SIZE}")
    return slot


def decode_slot(typ: str, slot: bytes) -> str | bool:
    """Decode one 32-byte slot according to the declared type."""
    if typ == "address":
        # right-aligned, 12 bytes of left padding
        return "0x" + slot[12:].hex()
    if typ == "uint256":
        return str(int.from_bytes(slot, "big", signed=False))
    if typ == "bool":
        return slot[31] != 0
    if typ == "bytes32":
        return "0x" + slot.hex()
    return f"unsupported type: {typ}"
