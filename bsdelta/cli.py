"""Command-line entry points for creating and applying patch files."""

import os
import stat
import sys
from pathlib import Path

from .fileformat import CorruptPatchError, apply_patch, make_patch

_USAGE = "usage: {prog} oldfile newfile patchfile"


def _parse(argv, prog: str):
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(_USAGE.format(prog=prog), file=sys.stderr)
        return None
    return args


def _fail(prog: str, message: str) -> int:
    print(f"{prog}: {message}", file=sys.stderr)
    return 1


def _os_message(path: str, exc: OSError) -> str:
    return f"{path}: {exc.strerror or exc}"


def diff_main(argv=None) -> int:
    """Create a patch file from an old and a new file."""
    prog = "bsdiff"
    args = _parse(argv, prog)
    if args is None:
        return 1
    old_path, new_path, patch_path = args

    contents = []
    for path in (old_path, new_path):
        try:
            contents.append(Path(path).read_bytes())
        except OSError as exc:
            return _fail(prog, _os_message(path, exc))
    old, new = contents

    data = make_patch(old, new)
    try:
        Path(patch_path).write_bytes(data)
    except OSError as exc:
        return _fail(prog, _os_message(patch_path, exc))
    return 0


def patch_main(argv=None) -> int:
    """Rebuild a new file from an old file and a patch file."""
    prog = "bspatch"
    args = _parse(argv, prog)
    if args is None:
        return 1
    old_path, new_path, patch_path = args

    try:
        patch_data = Path(patch_path).read_bytes()
    except OSError as exc:
        return _fail(prog, _os_message(patch_path, exc))

    try:
        old = Path(old_path).read_bytes()
        mode = stat.S_IMODE(os.stat(old_path).st_mode)
    except OSError as exc:
        return _fail(prog, _os_message(old_path, exc))

    try:
        new = apply_patch(old, patch_data)
    except CorruptPatchError as exc:
        return _fail(prog, str(exc))

    try:
        fd = os.open(new_path, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, mode)
        with os.fdopen(fd, "wb") as handle:
            handle.write(new)
    except OSError as exc:
        return _fail(prog, _os_message(new_path, exc))
    return 0


if __name__ == "__main__":
    sys.exit(diff_main())