# bsdelta

Compute compact binary patches between two versions of a file, and apply
them. Patches use the `ENDSLEY/BSDIFF43` layout: the 16-byte signature
`ENDSLEY/BSDIFF43`, the size of the new data as an 8-byte sign-magnitude
integer, and then a bzip2-compressed stream of blocks. Each block is a
control triple (diff length, extra length, old seek), bytewise differences
against the old data, and literal extra bytes.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

Create a patch that turns `old.bin` into `new.bin`:

```
bsdelta-diff old.bin new.bin update.patch
```

Apply it to rebuild the new file:

```
bsdelta-patch old.bin rebuilt.bin update.patch
```

Both commands take exactly three arguments, in the order
`oldfile newfile patchfile`; any other count prints a usage line and exits
with status 1. When `bsdelta-patch` creates the output file, it is created
with the permission bits of the old file (subject to the umask). A
malformed or truncated patch is reported with a message beginning
`Corrupt patch` and the command exits with status 1, as it does when a
file cannot be read or written.

## Library

Whole patches, in memory:

```python
from bsdelta.fileformat import make_patch, apply_patch, CorruptPatchError

old = b"the quick brown fox jumps over the lazy dog"
new = b"the quick brown cat jumps over the lazy dog!"

patch_data = make_patch(old, new)
assert apply_patch(old, patch_data) == new
```

`apply_patch` raises `CorruptPatchError` when the header is shorter than
24 bytes, the signature is wrong, the declared new size is negative, the
compressed body cannot be decompressed, or the blocks are truncated or
inconsistent with the declared size. `CorruptPatchError` is a subclass of
`bsdelta.patch.PatchError`.

Lower-level pieces:

- `bsdelta.diff.diff(old, new, out)` writes the uncompressed control, diff
  and extra blocks to the binary stream `out` and returns the number of
  bytes written.
- `bsdelta.patch.patch(old, new_size, stream)` reads such blocks from a
  binary stream and returns exactly `new_size` rebuilt bytes. It raises
  `PatchError` on truncated input, a negative or oversized block length, or
  a block that runs past `new_size`, and `ValueError` if `new_size` is
  negative.
- `bsdelta.offsets.encode_offset(value)` and `decode_offset(data)` convert
  between integers and the 8-byte sign-magnitude form used for sizes and
  control values. Both raise `ValueError` on out-of-range values or input
  that is not 8 bytes long.
- `bsdelta.suffix.suffix_array(data)` returns the sorted start positions of
  all suffixes of `data`, including the empty suffix, and
  `longest_match(index, old, new)` uses it to return `(position, length)`
  of a long prefix of `new` found in `old`.

## Limitations

Old data, new data and the patch are held in memory in full; there is no
streaming mode for very large files.

## Running the tests

```
pip install -e ".[test]"
pytest
```