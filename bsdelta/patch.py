"""Rebuilding new data from old data and a stream of patch blocks."""

from typing import BinaryIO

from .offsets import OFFSET_SIZE, decode_offset

MAX_BLOCK_LENGTH = 2**31 - 1


class PatchError(Exception):
    """Raised when patch data is truncated or inconsistent."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise PatchError(f"patch data truncated: expected {size} more bytes")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_control(stream: BinaryIO) -> tuple[int, int, int]:
    diff_length, extra_length, seek = (
        decode_offset(_read_exact(stream, OFFSET_SIZE)) for _ in range(3)
    )
    return diff_length, extra_length, seek


def patch(old, new_size: int, stream: BinaryIO) -> bytes:
    """Apply the control, diff and extra blocks read from ``stream`` to ``old``.

    Returns the rebuilt data, exactly ``new_size`` bytes long.
    """
    if new_size < 0:
        raise ValueError(f"new size must not be negative, got {new_size}")

    old_view = memoryview(old)
    old_size = len(old_view)
    out = bytearray()
    old_pos = 0

    while len(out) < new_size:
        diff_length, extra_length, seek = _read_control(stream)

        if not 0 <= diff_length <= MAX_BLOCK_LENGTH:
            raise PatchError(f"invalid diff block length {diff_length}")
        if not 0 <= extra_length <= MAX_BLOCK_LENGTH:
            raise PatchError(f"invalid extra block length {extra_length}")
        if len(out) + diff_length > new_size:
            raise PatchError("diff block runs past the end of the new data")

        block = bytearray(_read_exact(stream, diff_length))
        low = max(old_pos, 0)
        high = min(old_pos + diff_length, old_size)
        if low < high:
            start, end = low - old_pos, high - old_pos
            block[start:end] = bytes(
                (a + b) & 0xFF for a, b in zip(block[start:end], old_view[low:high])
            )
        out += block
        old_pos += diff_length

        if len(out) + extra_length > new_size:
            raise PatchError("extra block runs past the end of the new data")
        out += _read_exact(stream, extra_length)
        old_pos += seek

    return bytes(out)