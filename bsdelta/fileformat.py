"""The complete patch file: magic, new size and bzip2-compressed blocks."""

import bz2
import io

from .diff import diff
from .offsets import OFFSET_SIZE, decode_offset, encode_offset
from .patch import PatchError, patch

MAGIC = b"ENDSLEY/BSDIFF43"
HEADER_SIZE = len(MAGIC) + OFFSET_SIZE
COMPRESSION_LEVEL = 9


class CorruptPatchError(PatchError):
    """Raised when a patch file is malformed."""


def make_patch(old, new) -> bytes:
    """Build a complete patch file turning ``old`` into ``new``."""
    new = bytes(new)
    blocks = io.BytesIO()
    diff(old, new, blocks)
    compressed = bz2.compress(blocks.getvalue(), COMPRESSION_LEVEL)
    return MAGIC + encode_offset(len(new)) + compressed


def _new_size(patch_data: bytes) -> int:
    if len(patch_data) < HEADER_SIZE:
        raise CorruptPatchError("Corrupt patch: header truncated")
    if patch_data[: len(MAGIC)] != MAGIC:
        raise CorruptPatchError("Corrupt patch: bad magic")
    size = decode_offset(patch_data[len(MAGIC) : HEADER_SIZE])
    if size < 0:
        raise CorruptPatchError("Corrupt patch: negative new size")
    return size


def apply_patch(old, patch_data) -> bytes:
    """Apply a complete patch file to ``old`` and return the new data."""
    patch_data = bytes(patch_data)
    new_size = _new_size(patch_data)
    try:
        with bz2.BZ2File(io.BytesIO(patch_data[HEADER_SIZE:])) as stream:
            return patch(old, new_size, stream)
    except (OSError, EOFError) as exc:
        raise CorruptPatchError(f"Corrupt patch: {exc}") from exc
    except CorruptPatchError:
        raise
    except PatchError as exc:
        raise CorruptPatchError(f"Corrupt patch: {exc}") from exc