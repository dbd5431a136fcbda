"""Helpers for index arithmetic on mutable sequences.

Every index argument may be negative, in which case it counts from the end
of the sequence (-1 is the last element). A span end-point `to` equal to
`END` (0) means the end of the sequence.

Splice operations modify the given sequence and return it.
"""
from __future__ import annotations

from typing import (
    Final,
    MutableSequence,
    Sequence,
    TypeVar,
    Union,
)

from negslices.utils import (
    copy_within,
    is_index_valid,
    is_position_valid,
    is_span_valid,
    OutOfRangeError,
    SlicesError,
    SliceView,
    validate_index,
    validate_position,
    validate_span,
)


# Type variables
T = TypeVar("T")

Writable = Union[MutableSequence[T], SliceView[T]]


# Constants
END: Final[int] = 0


# ===================
# Index normalization
# ===================


def normalize_index(idx: int, length: int) -> int:
    if idx < 0:
        return idx + length
    return idx


def normalize_end(to: int, length: int) -> int:
    """Like `normalize_index()`, but `END` means `length`."""
    if to == END:
        return length
    return normalize_index(to, length)


# ==============
# Element access
# ==============


def get(s: Sequence[T], idx: int) -> T:
    idx = normalize_index(idx, len(s))
    validate_index(idx, len(s))
    return s[idx]


def put(s: Writable[T], idx: int, val: T) -> None:
    """Overwrite the idx'th element of `s` with `val`."""
    idx = normalize_index(idx, len(s))
    validate_index(idx, len(s))
    s[idx] = val


def append(s: MutableSequence[T], *vals: T) -> MutableSequence[T]:
    """Same as `list.extend()`, included for completeness."""
    s.extend(vals)
    return s


# =======
# Splices
# =======


def insert(s: MutableSequence[T], idx: int, *vals: T) -> MutableSequence[T]:
    """Insert `vals` so that the first one ends up at position `idx`.

    Example: insert([x, y, z], 1, a, b, c) -> [x, a, b, c, y, z]
    """
    idx = normalize_index(idx, len(s))
    validate_position(idx, len(s))
    return _insert(s, idx, vals)


def _insert(
        s: MutableSequence[T],
        idx: int,
        vals: Sequence[T],
) -> MutableSequence[T]:
    if not vals:
        return s
    old_len = len(s)

    # Make `s` long enough.
    s.extend(vals)

    # Make space at the right position.
    copy_within(s, idx + len(vals), idx, old_len - idx)

    for offset, val in enumerate(vals):
        s[idx + offset] = val
    return s


def remove_n(s: MutableSequence[T], idx: int, n: int) -> MutableSequence[T]:
    """Remove `n` items beginning at position `idx`.

    Example: remove_n([a, b, c, d], 1, 2) -> [a, d]
    """
    idx = normalize_index(idx, len(s))
    validate_span(idx, idx + n, len(s))
    return _remove_n(s, idx, n)


def remove_to(
        s: MutableSequence[T],
        from_: int,
        to: int,
) -> MutableSequence[T]:
    """Remove items from position `from_` up to, not including, `to`.

    Example: remove_to([a, b, c, d], 1, 3) -> [a, d]
    """
    from_ = normalize_index(from_, len(s))
    to = normalize_end(to, len(s))
    validate_span(from_, to, len(s))
    return _remove_n(s, from_, to - from_)


def _remove_n(
        s: MutableSequence[T],
        idx: int,
        n: int,
) -> MutableSequence[T]:
    if not n:
        return s
    new_len = len(s) - n
    copy_within(s, idx, idx + n, new_len - idx)

    # MutableSequence does not guarantee slice deletion.
    for _ in range(n):
        s.pop()
    return s


def replace_n(
        s: MutableSequence[T],
        idx: int,
        n: int,
        *vals: T,
) -> MutableSequence[T]:
    """Replace `n` items beginning at position `idx` with `vals`.

    After the replace the first new value has position `idx`.
    """
    idx = normalize_index(idx, len(s))
    validate_span(idx, idx + n, len(s))
    return _replace_n(s, idx, n, vals)


def replace_to(
        s: MutableSequence[T],
        from_: int,
        to: int,
        *vals: T,
) -> MutableSequence[T]:
    from_ = normalize_index(from_, len(s))
    to = normalize_end(to, len(s))
    validate_span(from_, to, len(s))
    return _replace_n(s, from_, to - from_, vals)


def _replace_n(
        s: MutableSequence[T],
        idx: int,
        n: int,
        vals: Sequence[T],
) -> MutableSequence[T]:
    if n > len(vals):
        # Removing more items than inserting.
        s = _remove_n(s, idx, n - len(vals))
    elif n < len(vals):
        # Inserting more items than removing.
        delta = len(vals) - n
        s = _insert(s, idx, vals[:delta])
        idx += delta
        vals = vals[delta:]

    for offset, val in enumerate(vals):
        s[idx + offset] = val
    return s


# ===========
# Range views
# ===========


def prefix(s: Writable[T], idx: int) -> SliceView[T]:
    """View of `s` up to but not including position `idx`."""
    idx = normalize_index(idx, len(s))
    return SliceView(s, 0, idx)


def suffix(s: Writable[T], idx: int) -> SliceView[T]:
    """View of `s` excluding elements before position `idx`."""
    idx = normalize_index(idx, len(s))
    return SliceView(s, idx, len(s))


def slice_n(s: Writable[T], idx: int, n: int) -> SliceView[T]:
    idx = normalize_index(idx, len(s))
    return SliceView(s, idx, idx + n)


def slice_to(s: Writable[T], from_: int, to: int) -> SliceView[T]:
    """View of `s` from position `from_` up to, not including, `to`."""
    from_ = normalize_index(from_, len(s))
    to = normalize_end(to, len(s))
    return SliceView(s, from_, to)
