"""Computing the control, diff and extra blocks that turn old data into new."""

from typing import BinaryIO

from .offsets import encode_offset
from .suffix import longest_match, suffix_array

# A match must beat the running score by more than this to start a new block.
_MATCH_SLACK = 8


def _forward_extension(old: memoryview, new: memoryview) -> int:
    """Length of the best approximate match extending forward from both starts."""
    score = best_score = length = 0
    for i, (a, b) in enumerate(zip(old, new), 1):
        score += a == b
        if score * 2 - i > best_score * 2 - length:
            best_score, length = score, i
    return length


def _backward_extension(old: memoryview, new: memoryview) -> int:
    """Length of the best approximate match extending backward from both ends."""
    score = best_score = length = 0
    for i, (a, b) in enumerate(zip(reversed(old), reversed(new)), 1):
        score += a == b
        if score * 2 - i > best_score * 2 - length:
            best_score, length = score, i
    return length


def _split_overlap(
    forward_new: memoryview,
    forward_old: memoryview,
    backward_new: memoryview,
    backward_old: memoryview,
) -> int:
    """How much of an overlapping region the forward extension should keep."""
    score = best_score = keep = 0
    pairs = zip(forward_new, forward_old, backward_new, backward_old)
    for i, (fn, fo, bn, bo) in enumerate(pairs, 1):
        score += fn == fo
        score -= bn == bo
        if score > best_score:
            best_score, keep = score, i
    return keep


def diff(old, new, out: BinaryIO) -> int:
    """Write the uncompressed patch blocks turning ``old`` into ``new`` to ``out``.

    Each block is a 24-byte control triple (diff length, extra length, old
    seek), the bytewise differences against old data, and literal extra
    bytes. Returns the number of bytes written.
    """
    old = bytes(old)
    new = bytes(new)
    old_view = memoryview(old)
    new_view = memoryview(new)
    old_size = len(old)
    new_size = len(new)
    index = suffix_array(old)

    written = 0
    scan = length = pos = 0
    last_scan = last_pos = last_offset = 0

    while scan < new_size:
        old_score = 0
        scan += length
        scored = scan
        while scan < new_size:
            pos, length = longest_match(index, old_view, new_view[scan:])

            while scored < scan + length:
                shifted = scored + last_offset
                if 0 <= shifted < old_size and old[shifted] == new[scored]:
                    old_score += 1
                scored += 1

            if (length == old_score and length != 0) or length > old_score + _MATCH_SLACK:
                break

            shifted = scan + last_offset
            if 0 <= shifted < old_size and old[shifted] == new[scan]:
                old_score -= 1
            scan += 1

        if length == old_score and scan != new_size:
            continue

        forward = _forward_extension(old_view[last_pos:], new_view[last_scan:scan])

        backward = 0
        if scan < new_size:
            backward = _backward_extension(old_view[:pos], new_view[last_scan:scan])

        if last_scan + forward > scan - backward:
            overlap = (last_scan + forward) - (scan - backward)
            new_f = last_scan + forward - overlap
            old_f = last_pos + forward - overlap
            new_b = scan - backward
            old_b = pos - backward
            keep = _split_overlap(
                new_view[new_f : new_f + overlap],
                old_view[old_f : old_f + overlap],
                new_view[new_b : new_b + overlap],
                old_view[old_b : old_b + overlap],
            )
            forward += keep - overlap
            backward -= keep

        extra_start = last_scan + forward
        extra_end = scan - backward
        control = (
            encode_offset(forward)
            + encode_offset(extra_end - extra_start)
            + encode_offset((pos - backward) - (last_pos + forward))
        )
        diff_block = bytes(
            (a - b) & 0xFF
            for a, b in zip(
                new_view[last_scan : last_scan + forward],
                old_view[last_pos : last_pos + forward],
            )
        )
        extra_block = new[extra_start:extra_end]

        for chunk in (control, diff_block, extra_block):
            out.write(chunk)
            written += len(chunk)

        last_scan = scan - backward
        last_pos = pos - backward
        last_offset = pos - scan

    return written