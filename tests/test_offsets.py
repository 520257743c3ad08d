import pytest
from hypothesis import given
from hypothesis import strategies as st

from bsdelta.offsets import OFFSET_SIZE, decode_offset, encode_offset

OFFSETS = st.integers(min_value=-(2**63 - 1), max_value=2**63 - 1)


def test_encode_one():
    assert encode_offset(1) == b"\x01" + b"\x00" * 7


def test_encode_minus_one_sets_sign_bit():
    assert encode_offset(-1) == b"\x01" + b"\x00" * 6 + b"\x80"


def test_encode_is_little_endian():
    assert encode_offset(256) == b"\x00\x01" + b"\x00" * 6


@given(OFFSETS)
def test_round_trip(value):
    assert decode_offset(encode_offset(value)) == value


@given(OFFSETS)
def test_encoded_length_is_fixed(value):
    assert len(encode_offset(value)) == OFFSET_SIZE


@given(st.integers(min_value=1, max_value=2**63 - 1))
def test_negative_differs_only_in_sign_bit(value):
    positive = encode_offset(value)
    negative = encode_offset(-value)
    assert negative[:-1] == positive[:-1]
    assert negative[-1] == positive[-1] | 0x80


@pytest.mark.parametrize("value", [2**63, -(2**63), 2**70])
def test_encode_out_of_range(value):
    with pytest.raises(ValueError):
        encode_offset(value)


@pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9])
def test_decode_wrong_length(data):
    with pytest.raises(ValueError):
        decode_offset(data)


def test_negative_zero_decodes_as_zero():
    assert decode_offset(bytes(7) + b"\x80") == decode_offset(bytes(8))


@given(OFFSETS)
def test_decode_accepts_bytes_like(value):
    encoded = encode_offset(value)
    assert decode_offset(bytearray(encoded)) == value
    assert decode_offset(memoryview(encoded)) == value