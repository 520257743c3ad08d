"""Fixed-width signed offsets as stored in patch control blocks.

An offset is eight bytes: the magnitude in little-endian order in the low
63 bits, and the sign in the top bit of the last byte.
"""

OFFSET_SIZE = 8

_SIGN_BIT = 0x80
_LIMIT = 1 << 63


def encode_offset(value: int) -> bytes:
    """Encode a signed integer as an eight-byte sign-magnitude offset."""
    magnitude = abs(value)
    if magnitude >= _LIMIT:
        raise ValueError(f"offset {value} does not fit in {OFFSET_SIZE} bytes")
    raw = bytearray(magnitude.to_bytes(OFFSET_SIZE, "little"))
    if value < 0:
        raw[-1] |= _SIGN_BIT
    return bytes(raw)


def decode_offset(data) -> int:
    """Decode an eight-byte sign-magnitude offset into an integer."""
    raw = bytes(data)
    if len(raw) != OFFSET_SIZE:
        raise ValueError(f"an offset is {OFFSET_SIZE} bytes, got {len(raw)}")
    last = raw[-1]
    magnitude = int.from_bytes(raw[:-1] + bytes([last & ~_SIGN_BIT & 0xFF]), "little")
    return -magnitude if last & _SIGN_BIT else magnitude