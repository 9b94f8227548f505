"""
Read-only windows over a sequence.

A SequenceView borrows its source instead of copying it. The source must
not be mutated while a view over it is in use.
"""

from collections.abc import Sequence
from typing import Any, List, Optional, Tuple


class SequenceView(Sequence):
    """
    Contiguous, read-only window `source[start:stop]` without a copy.

    Slicing returns another view; slices with a step other than 1 are
    rejected since they would not be contiguous.

    Example:
        >>> view = SequenceView(['a', 'b', 'c', 'd'])
        >>> head, tail = view.split_at(1)
        >>> list(head), list(tail)
        (['a'], ['b', 'c', 'd'])
    """

    __slots__ = ('_source', '_start', '_stop')

    def __init__(self, source: Sequence, start: int = 0, stop: Optional[int] = None):
        if isinstance(source, SequenceView):
            start, stop, _ = slice(start, stop).indices(len(source))
            start += source._start
            stop += source._start
            source = source._source
        else:
            start, stop, _ = slice(start, stop).indices(len(source))
        self._source = source
        self._start = start
        self._stop = max(start, stop)

    @property
    def source(self) -> Sequence:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("SequenceView slices must be contiguous (step 1)")
            return SequenceView(self._source, self._start + start, self._start + stop)

        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError('SequenceView index out of range')
        return self._source[self._start + index]

    def __iter__(self):
        source = self._source
        for i in range(self._start, self._stop):
            yield source[i]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (str, bytes, bytearray)) or not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"SequenceView({self.to_list()!r})"

    def split_at(self, index: int) -> Tuple['SequenceView', 'SequenceView']:
        """Split into `(self[:index], self[index:])`."""
        if not 0 <= index <= len(self):
            raise IndexError(f"split index {index} out of range for view of length {len(self)}")
        middle = self._start + index
        return SequenceView(self._source, self._start, middle), SequenceView(self._source, middle, self._stop)

    def to_list(self) -> List[Any]:
        """Copy the window into a new list."""
        return list(self)
