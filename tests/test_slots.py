import pytest

from abilens.core.errors import MalformedInputError, OutOfBoundsError
from abilens.decoding.slots import decode_slot, hex_to_bytes, slot_at, topic_at


def test_address_slot() -> None:
    slot = bytes.fromhex("000000000000000000000000" + "aa" * 20)
    assert decode_slot("address", slot) == "0x" + "a" * 40


def test_address_slot_is_lowercase() -> None:
    slot = hex_to_bytes("0x000000000000000000000000A0B86991C6218B36C1D19D4A2E9EB0CE3606EB48")
    assert decode_slot("address", slot) == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def test_uint256_one() -> None:
    slot = b"\x00" * 31 + b"\x01"
    assert decode_slot("uint256", slot) == "1"


def test_uint256_above_128_bits_keeps_precision() -> None:
    v = 2**255 + 12345
    assert decode_slot("uint256", v.to_bytes(32, "big")) == str(v)
    assert decode_slot("uint256", b"\xff" * 32) == str(2**256 - 1)


@pytest.mark.parametrize(
    ("last", "expected"),
    [(0x00, False), (0x01, True), (0x02, True), (0xFF, True)],
)
def test_bool_uses_last_byte(last: int, expected: bool) -> None:
    assert decode_slot("bool", b"\x00" * 31 + bytes([last])) is expected


def test_bytes32_verbatim() -> None:
    slot = bytes(range(32))
    assert decode_slot("bytes32", slot) == "0x" + slot.hex()


@pytest.mark.parametrize("typ", ["string", "uint8", "int256", "address[]", "tuple"])
def test_unsupported_type_fallback(typ: str) -> None:
    assert decode_slot(typ, b"\x00" * 32) == f"unsupported type: {typ}"


def test_hex_to_bytes_prefix_optional() -> None:
    assert hex_to_bytes("0x0102") == b"\x01\x02"
    assert hex_to_bytes("0102") == b"\x01\x02"
    assert hex_to_bytes("0x") == b""


def test_hex_to_bytes_rejects_invalid() -> None:
    with pytest.raises(MalformedInputError):
        hex_to_bytes("0xzz")


def test_slot_at_bounds() -> None:
    data = b"\x01" * 64
    assert slot_at(data, 1) == b"\x01" * 32
    with pytest.raises(OutOfBoundsError) as exc:
        slot_at(data, 2)
    assert exc.value.index == 2
    assert exc.value.available == 2


def test_slot_at_rejects_partial_slot() -> None:
    with pytest.raises(OutOfBoundsError):
        slot_at(b"\x00" * 40, 1)


def test_topic_at_bounds_and_width() -> None:
    topics = ["0x" + "00" * 32]
    assert topic_at(topics, 0) == b"\x00" * 32
    with pytest.raises(OutOfBoundsError):
        topic_at(topics, 1)
    with pytest.raises(MalformedInputError):
        topic_at(["0x1234"], 0)
