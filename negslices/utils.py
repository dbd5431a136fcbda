from __future__ import annotations

from typing import (
    Iterator,
    List,
    MutableSequence,
    Optional,
    overload,
    Sequence,
    TypeVar,
    Union,
)


# Type variables
T = TypeVar("T")


# ==========
# Exceptions
# ==========


class SlicesError(Exception):
    """Base negslices exception class."""


class OutOfRangeError(SlicesError, IndexError):
    """Index, span or count outside of the sequence."""


# ==========
# Validation
# ==========


def validate_index(idx: int, length: int) -> None:
    """Check that `idx` is an element position."""
    if not 0 <= idx < length:
        raise OutOfRangeError(
            f"Index {idx} out of range for sequence of length {length}"
        )


def validate_position(idx: int, length: int) -> None:
    """Check that `idx` is an insertion point."""
    if not 0 <= idx <= length:
        raise OutOfRangeError(
            f"Position {idx} out of range for sequence of length {length}"
        )


def validate_span(start: int, stop: int, length: int) -> None:
    if not 0 <= start <= length or stop > length:
        raise OutOfRangeError(
            f"Span [{start}, {stop}) out of range for sequence"
            f" of length {length}"
        )
    if start > stop:
        raise OutOfRangeError(
            f"Negative count: span [{start}, {stop})"
        )


def is_index_valid(idx: int, length: int) -> bool:
    try:
        validate_index(idx, length)
    except OutOfRangeError:
        return False
    else:
        return True


def is_position_valid(idx: int, length: int) -> bool:
    try:
        validate_position(idx, length)
    except OutOfRangeError:
        return False
    else:
        return True


def is_span_valid(start: int, stop: int, length: int) -> bool:
    try:
        validate_span(start, stop, length)
    except OutOfRangeError:
        return False
    else:
        return True


# ===========
# copy_within
# ===========


def copy_within(
        data: MutableSequence[T],
        dst: int,
        src: int,
        count: int,
) -> None:
    """Copy `count` items of `data` from `src` to `dst`.

    Source and destination ranges may overlap.
    """
    if dst > src:
        for offset in reversed(range(count)):
            data[dst + offset] = data[src + offset]
    elif dst < src:
        for offset in range(count):
            data[dst + offset] = data[src + offset]


# =========
# SliceView
# =========


class SliceView(Sequence[T]):
    """Window `[start, stop)` over `data` sharing its storage.

    Item assignment writes through to `data`. The window is fixed at
    creation and does not follow later resizing of `data`.
    """

    def __init__(
            self,
            data: Union[MutableSequence[T], SliceView[T]],
            start: int = 0,
            stop: Optional[int] = None,
    ) -> None:
        if stop is None:
            stop = len(data)
        validate_span(start, stop, len(data))
        self._data = data
        self._start = start
        self._stop = stop

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def _absolute(self, index: int) -> int:
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise OutOfRangeError(
                f"{type(self).__name__} index {index} out of range"
                f" (length {length})"
            )
        return self._start + index

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step == 1:
                return SliceView(
                    self._data,
                    self._start + start,
                    self._start + max(start, stop),
                )
            return [self[i] for i in range(start, stop, step)]
        return self._data[self._absolute(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[self._absolute(index)] = value

    def __len__(self) -> int:
        return self._stop - self._start

    def __iter__(self) -> Iterator[T]:
        for i in range(self._start, self._stop):
            yield self._data[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SliceView, list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def to_list(self) -> List[T]:
        """Return a copy of the items in the window."""
        return list(self)
