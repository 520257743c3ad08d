"""Suffix sorting and match lookup over the old data."""

from collections.abc import Sequence


def suffix_array(data) -> list[int]:
    """Return the start positions of all suffixes of ``data`` in sorted order.

    The empty suffix is included, so the result has ``len(data) + 1`` entries
    and always begins with ``len(data)``.
    """
    size = len(data)
    order = list(range(size + 1))
    rank = [*bytes(data), -1]
    step = 1
    while True:
        keys = [
            (rank[start], rank[start + step] if start + step <= size else -1)
            for start in range(size + 1)
        ]
        order.sort(key=keys.__getitem__)

        new_rank = [0] * (size + 1)
        current = -1
        previous = None
        for start in order:
            key = keys[start]
            if key != previous:
                current += 1
                previous = key
            new_rank[start] = current
        rank = new_rank

        if current == size:
            return order
        step *= 2


def _match_length(old: memoryview, start: int, new: memoryview) -> int:
    """Length of the common prefix of ``old[start:]`` and ``new``."""
    limit = min(len(old) - start, len(new))
    return next(
        (
            offset
            for offset, (a, b) in enumerate(zip(old[start : start + limit], new[:limit]))
            if a != b
        ),
        limit,
    )


def _precedes(old: memoryview, start: int, new: memoryview) -> bool:
    """Whether ``old[start:]`` sorts before ``new`` over their shared length."""
    limit = min(len(old) - start, len(new))
    common = _match_length(old, start, new)
    if common >= limit:
        return False
    return old[start + common] < new[common]


def longest_match(index: Sequence[int], old, new) -> tuple[int, int]:
    """Find a long prefix of ``new`` inside ``old`` using its suffix array.

    Returns ``(position, length)`` such that ``old[position:position + length]``
    equals ``new[:length]``.
    """
    old_view = memoryview(old)
    new_view = memoryview(new)
    low, high = 0, len(old_view)
    while high - low >= 2:
        middle = low + (high - low) // 2
        if _precedes(old_view, index[middle], new_view):
            low = middle
        else:
            high = middle

    low_length = _match_length(old_view, index[low], new_view)
    high_length = _match_length(old_view, index[high], new_view)
    if low_length > high_length:
        return index[low], low_length
    return index[high], high_length